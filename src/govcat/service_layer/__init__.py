"""Service layer for GOVCAT.

Implements the catalogue use-cases: the repository that maps service records
onto record-store entries, and the catalogue service facade that composes the
repository with the domain query engine.

Dependency rule: may import `govcat.domain` and `govcat.interfaces`, but not
`govcat.adapters` or `govcat.entrypoints`.
"""

from .catalogue import CatalogueService
from .repository import CatalogueRepository

__all__ = ["CatalogueRepository", "CatalogueService"]
