"""Supabase infrastructure module"""
from .client import close_supabase_client, create_supabase_client, supabase_url

__all__ = ['close_supabase_client', 'create_supabase_client', 'supabase_url']
