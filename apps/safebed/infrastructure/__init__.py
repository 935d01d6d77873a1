"""SafeBed Infrastructure Layer."""

from safebed.infrastructure.fallback import SAMPLE_LOCATIONS
from safebed.infrastructure.integrations.supabase import SupabaseRpcClient
from safebed.infrastructure.persistence_postgres import SqlaLocationStore

__all__ = ["SAMPLE_LOCATIONS", "SqlaLocationStore", "SupabaseRpcClient"]
