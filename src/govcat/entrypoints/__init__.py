"""Entrypoints (inbound adapters) for GOVCAT.

Expose the catalogue to the outside world. Today this is the ``govcat`` CLI;
commands parse and validate inputs, call the catalogue service built by
`govcat.bootstrap`, and present results.

Dependency rule: may import `govcat.bootstrap` and `govcat.service_layer`. The
only adapter imported directly is `govcat.adapters.db`, for schema management.
"""
