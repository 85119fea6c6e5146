"""Bootstrap (composition root) for GOVCAT.

Assembles the application at runtime: wires a concrete record store and ID
generator into the catalogue service, reads configuration, and owns the
explicit one-time seeding step (`initialize`).

Import rules:
- Entry points import *this* package (not adapters/service_layer/interfaces/domain).
- This package may import: `govcat.adapters`, `govcat.service_layer`,
  `govcat.interfaces`, `govcat.domain`, and `govcat.config`.
- Inner layers must not import `govcat.bootstrap`.

Public surface:
- Re-export composition factories from this module; keep wiring helpers internal.
- No business rules live here; this is assembly and lifecycle only.
"""

from .bootstrap import (
    AppContainer,
    bootstrap,
    build_catalogue,
    build_record_store,
    initialize,
)

__all__ = [
    "AppContainer",
    "bootstrap",
    "build_catalogue",
    "build_record_store",
    "initialize",
]
