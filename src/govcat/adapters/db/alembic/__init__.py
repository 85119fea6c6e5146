"""Alembic migration scripts for the GOVCAT database."""
