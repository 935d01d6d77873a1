"""PostgreSQL Infrastructure."""

from safebed.infrastructure.persistence_postgres.location_store_sqla import SqlaLocationStore

__all__ = ["SqlaLocationStore"]
