from taskapp.infra.supabase import close_supabase_client, supabase_url

from tests.fakes import FakeSupabaseClient


def test_supabase_url_from_project_ref():
    assert supabase_url("abcdefgh") == "https://abcdefgh.supabase.co"


def test_supabase_url_passes_full_url_through():
    assert supabase_url("https://abcdefgh.supabase.co/") == "https://abcdefgh.supabase.co"
    assert supabase_url("http://localhost:54321") == "http://localhost:54321"


def test_close_supabase_client_closes_every_session_once():
    client = FakeSupabaseClient()

    close_supabase_client(client)
    close_supabase_client(client)

    assert client._postgrest.session.close_count == 1
    assert client.auth._http_client.close_count == 1


def test_close_supabase_client_without_postgrest():
    client = FakeSupabaseClient()
    client._postgrest = None

    close_supabase_client(client)

    assert client.auth._http_client.close_count == 1
