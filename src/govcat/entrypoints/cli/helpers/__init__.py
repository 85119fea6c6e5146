"""CLI helpers for GOVCAT.

Utilities used by the command-line interface: URL sanitization for safe
display, option parsers, and message emitters that write to stderr with
emoji→ASCII fallbacks.
"""

from .db_url import sanitize_url
from .messages import error, success, warn
from .option_parsers import parse_log_level, parse_tags

__all__ = [
    "error",
    "parse_log_level",
    "parse_tags",
    "sanitize_url",
    "success",
    "warn",
]
