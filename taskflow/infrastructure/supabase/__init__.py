"""Supabase adapters: PostgREST client, identity client, and repositories."""

from taskflow.infrastructure.supabase._rest_client import SupabaseRESTClient, TableQuery
from taskflow.infrastructure.supabase.auth import SupabaseAuthClient

__all__ = ["SupabaseRESTClient", "TableQuery", "SupabaseAuthClient"]
