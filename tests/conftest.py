"""Shared test fixtures."""
import pytest
from unittest.mock import MagicMock


@pytest.fixture(autouse=True)
def env_vars(monkeypatch):
    """Set the environment every test starts from; never read a local .env."""
    monkeypatch.setattr("lazy_clients.config.load_dotenv", lambda **kwargs: False)
    monkeypatch.setenv("CLERK_SECRET_KEY", "sk_test_123")
    monkeypatch.setenv("SUPABASE_URL", "https://project.supabase.co")
    monkeypatch.setenv("SUPABASE_ANON_KEY", "anon-key")
    monkeypatch.setenv("SUPABASE_SERVICE_ROLE_KEY", "service-role-key")
    monkeypatch.setenv("DATABASE_URL", "sqlite://")
    for name in (
        "APP_ENV",
        "CLERK_ON_MISSING",
        "SUPABASE_ON_MISSING",
        "SUPABASE_ADMIN_ON_MISSING",
        "DATABASE_ON_MISSING",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def config():
    """Create a Config instance with test env vars."""
    from lazy_clients.config import Config
    return Config()


@pytest.fixture
def fake_client():
    """A stand-in SDK client with one method and one field."""

    class FakeClient:
        def __init__(self, api_key):
            self.api_key = api_key
            self.region = "eu-west-1"
            self.calls = []

        def list_users(self, limit=10):
            self.calls.append(limit)
            return [f"user-{i}" for i in range(limit)]

    return FakeClient


@pytest.fixture
def factory(fake_client):
    """A factory mock that builds FakeClient instances."""
    return MagicMock(side_effect=fake_client)
