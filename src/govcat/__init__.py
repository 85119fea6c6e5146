"""GOVCAT

A catalogue of government services. Service records are kept in a
key-prefixed record store and can be listed, searched by free text and tags,
and cross-linked through a "related services" ranking.
"""

__all__ = ["__version__"]
__version__ = "0.1.0"
