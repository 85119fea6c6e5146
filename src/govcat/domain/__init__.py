"""Domain layer for GOVCAT.

Contains the service record model, its validation rules, and the pure query
engine (text filter, tag filter, related-services ranking). This package is
deliberately technology-agnostic and performs no I/O.

Dependency rule: do not import from `govcat.adapters` or `govcat.entrypoints`.
"""

from .errors import DomainError, ValidationError
from .service_record import ServiceRecord

__all__ = ["DomainError", "ServiceRecord", "ValidationError"]
