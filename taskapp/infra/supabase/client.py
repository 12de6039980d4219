"""Supabase client construction and teardown"""
import logging

from supabase import Client, create_client  # type: ignore

logger = logging.getLogger(__name__)


def supabase_url(project_id: str) -> str:
    """Resolve a project ref (or a full URL) to the project's API URL"""
    if project_id.startswith(("http://", "https://")):
        return project_id.rstrip("/")
    return f"https://{project_id}.supabase.co"


def create_supabase_client(project_id: str, service_key: str) -> Client:
    """Create a new Supabase client for the given project.

    Each call returns a fresh client; the caller owns it and must release it
    with close_supabase_client.
    """
    url = supabase_url(project_id)
    logger.info(f"Connecting to Supabase project at {url}")
    return create_client(url, service_key)


def close_supabase_client(client: Client) -> None:
    """Close the HTTP sessions opened by the client's sub-clients

    PostgREST is created lazily and may never have been opened; the auth
    client always holds its own session.
    """
    postgrest = getattr(client, "_postgrest", None)
    if postgrest is not None:
        _close_http_client(getattr(postgrest, "session", None))

    auth = getattr(client, "auth", None)
    if auth is not None:
        _close_http_client(getattr(auth, "_http_client", None))


def _close_http_client(http_client) -> None:
    if http_client is not None and not getattr(http_client, "is_closed", False):
        http_client.close()
