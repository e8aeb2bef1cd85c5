"""Lazily constructed clients for the auth, Supabase and database services."""
from .accessor import LazyClient, resolve, close, is_configured, is_constructed
from .config import Config
from .errors import AuthenticationError, ConfigurationMissing, MissingConfigPolicy
from .services import Clients, get_clients

__all__ = [
    "AuthenticationError",
    "Clients",
    "Config",
    "ConfigurationMissing",
    "LazyClient",
    "MissingConfigPolicy",
    "close",
    "get_clients",
    "is_configured",
    "is_constructed",
    "resolve",
]
