"""Error types and the missing-configuration policy."""
from enum import Enum


class MissingConfigPolicy(Enum):
    """What an accessor does when a required value is absent."""

    STRICT = "strict"
    PERMISSIVE = "permissive"

    @classmethod
    def parse(cls, value):
        """Parse a policy name such as "strict" (case-insensitive)."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            choices = ", ".join(p.value for p in cls)
            raise ValueError(f"Unknown missing-config policy {value!r} (expected one of: {choices})")


class ConfigurationMissing(ValueError):
    """A required configuration value is absent (strict accessors only)."""

    def __init__(self, service, names):
        self.service = service
        self.names = list(names)
        super().__init__(f"{service}: missing {', '.join(self.names)}")


class AuthenticationError(Exception):
    """Bearer-token verification failed."""

    status = 401

    def __init__(self, message, details=None):
        self.message = message
        self.details = details
        super().__init__(message)

    def to_dict(self):
        body = {"error": self.message}
        if self.details:
            body["details"] = self.details
        return body
