"""Bearer-token verification against the Supabase admin client."""
import logging

from .errors import AuthenticationError

logger = logging.getLogger(__name__)

BEARER_PREFIX = "Bearer "


def extract_bearer(header):
    """Token part of an "Authorization: Bearer <token>" header, or None."""
    if not header or not header.startswith(BEARER_PREFIX):
        return None
    return header[len(BEARER_PREFIX):]


def verify_token(clients, header):
    """Return the user the bearer token belongs to.

    Raises AuthenticationError when the header is missing or malformed, or
    when Supabase rejects the token.
    """
    token = extract_bearer(header)
    if token is None:
        raise AuthenticationError("Missing or invalid authorization header")
    if not token:
        raise AuthenticationError("Missing token")

    # Raises ConfigurationMissing for a strict accessor; None when permissive.
    auth = clients.supabase_admin.auth
    if auth is None:
        raise AuthenticationError("Authentication unavailable")

    try:
        response = auth.get_user(token)
    except Exception as e:
        logger.error(f"[Auth] Error verifying token: {e}")
        raise AuthenticationError("Invalid or expired token", details=str(e)) from e

    user = getattr(response, "user", None)
    if user is None:
        raise AuthenticationError("Invalid or expired token")
    return user


def user_from_header(clients, header):
    """Optional auth: the user for the header, or None."""
    try:
        return verify_token(clients, header)
    except AuthenticationError:
        return None
    except Exception as e:
        logger.error(f"[Auth] Error getting user: {e}")
        return None
