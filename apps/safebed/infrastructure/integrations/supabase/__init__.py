"""Supabase PostgREST RPC integration."""

from safebed.infrastructure.integrations.supabase.rpc_client import SupabaseRpcClient

__all__ = ["SupabaseRpcClient"]
