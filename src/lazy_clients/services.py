"""Lazy accessors for the auth, Supabase and database clients."""
import atexit
import logging
from functools import lru_cache

from clerk_backend_api import Clerk
from sqlalchemy import create_engine
from supabase import ClientOptions, create_client

from .accessor import LazyClient, close
from .config import Config

logger = logging.getLogger(__name__)

# Fixed construction options per service
SUPABASE_OPTIONS = {"auto_refresh_token": True, "persist_session": False}
SUPABASE_ADMIN_OPTIONS = {"auto_refresh_token": False, "persist_session": False}


def build_clerk(secret_key):
    return Clerk(bearer_auth=secret_key)


def build_supabase(url, key, auto_refresh_token=True, persist_session=False):
    """Create a Supabase client; sessions are handled by the caller, not persisted."""
    options = ClientOptions(
        auto_refresh_token=auto_refresh_token,
        persist_session=persist_session,
    )
    return create_client(url, key, options=options)


def build_supabase_admin(url, anon_key, service_role_key, **options):
    # The anon key is required alongside the service-role key but not used here.
    return build_supabase(url, service_role_key, **options)


def build_engine(database_url, echo=False):
    return create_engine(database_url, echo=echo, pool_pre_ping=True)


def dispose_engine(engine):
    engine.dispose()


class Clients:
    """The application's service clients, each built on first use.

    Create one at startup and pass it to whatever needs a client.
    """

    def __init__(self, config):
        self.config = config

        self.clerk = LazyClient(
            "Clerk",
            build_clerk,
            config.required("clerk_secret_key"),
            policy=config.clerk_policy,
        )
        self.supabase = LazyClient(
            "Supabase",
            build_supabase,
            config.required("supabase_url", "supabase_anon_key"),
            policy=config.supabase_policy,
            options=SUPABASE_OPTIONS,
        )
        self.supabase_admin = LazyClient(
            "Supabase admin",
            build_supabase_admin,
            config.required("supabase_url", "supabase_anon_key", "supabase_service_role_key"),
            policy=config.supabase_admin_policy,
            options=SUPABASE_ADMIN_OPTIONS,
        )
        # Query echo only outside production
        self.db = LazyClient(
            "Database",
            build_engine,
            config.required("database_url"),
            policy=config.database_policy,
            options={"echo": not config.is_production},
            closer=dispose_engine,
        )

    def accessors(self):
        """(attribute, accessor) pairs in a fixed order."""
        return [
            ("clerk", self.clerk),
            ("supabase", self.supabase),
            ("supabase_admin", self.supabase_admin),
            ("db", self.db),
        ]

    def close(self):
        """Close every constructed client, logging failures."""
        for attr, lazy in self.accessors():
            try:
                close(lazy)
            except Exception as e:
                logger.error(f"Error closing {attr}: {e}")


@lru_cache(maxsize=1)
def get_clients():
    """Process-wide Clients built from the environment, closed at interpreter exit."""
    clients = Clients(Config())
    atexit.register(clients.close)
    return clients
