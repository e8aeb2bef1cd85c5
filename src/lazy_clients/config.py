"""Configuration from environment variables."""
import os

from dotenv import load_dotenv

from .errors import MissingConfigPolicy

# attribute name -> environment variable
ENV_NAMES = {
    "clerk_secret_key": "CLERK_SECRET_KEY",
    "supabase_url": "SUPABASE_URL",
    "supabase_anon_key": "SUPABASE_ANON_KEY",
    "supabase_service_role_key": "SUPABASE_SERVICE_ROLE_KEY",
    "database_url": "DATABASE_URL",
}


def read_env(name):
    """Return the variable's value, or None when it is unset or blank."""
    value = os.getenv(name)
    if value is None or not value.strip():
        return None
    return value.strip()


class Config:
    """Configuration from environment variables.

    Every value is read once, here. Absent values are None.
    """

    def __init__(self, dotenv=True):
        if dotenv:
            load_dotenv(override=False)

        for attr, env_name in ENV_NAMES.items():
            setattr(self, attr, read_env(env_name))

        self.app_env = (read_env("APP_ENV") or "development").lower()

        # Missing-configuration policy per accessor
        self.clerk_policy = MissingConfigPolicy.parse(os.getenv("CLERK_ON_MISSING", "permissive"))
        self.supabase_policy = MissingConfigPolicy.parse(os.getenv("SUPABASE_ON_MISSING", "strict"))
        self.supabase_admin_policy = MissingConfigPolicy.parse(
            os.getenv("SUPABASE_ADMIN_ON_MISSING", "strict")
        )
        self.database_policy = MissingConfigPolicy.parse(os.getenv("DATABASE_ON_MISSING", "strict"))

    @property
    def is_production(self):
        return self.app_env == "production"

    def required(self, *attrs):
        """Ordered {ENV_NAME: value} for the given attributes."""
        return {ENV_NAMES[attr]: getattr(self, attr) for attr in attrs}

    def missing(self, *attrs):
        """Environment variable names of the given attributes that are absent."""
        return [ENV_NAMES[attr] for attr in attrs if getattr(self, attr) is None]
