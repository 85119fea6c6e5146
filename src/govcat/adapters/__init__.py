"""Adapters (infrastructure) for GOVCAT.

Provide concrete implementations of the application ports: record stores
(in-memory and SQLAlchemy-backed), ID generators, and the database plumbing
they need (engines, metadata, migrations).

Dependency rule: may import `govcat.interfaces` and `govcat.domain`; those
packages must not import this one.
"""
