"""Lazy client accessor - builds the wrapped SDK client on first member access."""
import logging
import threading

from .errors import ConfigurationMissing, MissingConfigPolicy

logger = logging.getLogger(__name__)

_INTERNAL = frozenset({
    "_name", "_factory", "_required", "_policy", "_options", "_closer",
    "_client", "_lock", "_warned",
})


class LazyClient:
    """Stands in for an SDK client and builds it when first used.

    Reading any attribute resolves it on the real client, which is built
    once from ``factory(*required_values, **options)`` and then reused.
    With a STRICT policy a missing required value raises
    ConfigurationMissing before the factory runs; with PERMISSIVE every
    access returns None and each missing value is warned about once.

    Factory exceptions propagate unchanged and are not cached, so the next
    access tries again.

    The accessor has no public attributes of its own, so nothing shadows
    the client's members. Use the module functions (resolve, close,
    is_constructed, ...) to inspect it.
    """

    def __init__(self, name, factory, required, policy=MissingConfigPolicy.STRICT,
                 options=None, closer=None):
        self._name = name
        self._factory = factory
        self._required = dict(required)
        self._policy = MissingConfigPolicy.parse(policy)
        self._options = dict(options or {})
        self._closer = closer
        self._client = None
        self._lock = threading.Lock()
        self._warned = set()

    def __repr__(self):
        state = "constructed" if self._client is not None else "unconstructed"
        return f"<LazyClient {self._name} {self._policy.value} {state}>"

    def __getattr__(self, name):
        # Only reached for names not found on the accessor itself.
        if name in _INTERNAL or (name.startswith("__") and name.endswith("__")):
            raise AttributeError(name)
        client = self._resolve()
        if client is None:
            return None
        return getattr(client, name)

    def _missing(self):
        return [key for key, value in self._required.items() if value is None]

    def _resolve(self):
        client = self._client
        if client is not None:
            return client

        missing = self._missing()
        if missing:
            if self._policy is MissingConfigPolicy.STRICT:
                raise ConfigurationMissing(self._name, missing)
            self._warn_missing(missing)
            return None

        with self._lock:
            if self._client is None:
                self._client = self._factory(*self._required.values(), **self._options)
                logger.info(f"[{self._name}] Client initialized")
            return self._client

    def _close(self):
        # Never reset; the same client is reused after closing.
        client = self._client
        if client is not None and self._closer is not None:
            self._closer(client)
            logger.info(f"[{self._name}] Client closed")

    def _warn_missing(self, missing):
        with self._lock:
            fresh = [key for key in missing if key not in self._warned]
            self._warned.update(fresh)
        for key in fresh:
            logger.warning(f"[{self._name}] Missing {key} environment variable")


def resolve(lazy):
    """Return the underlying client, building it if needed.

    Returns None for a PERMISSIVE accessor with missing configuration.
    """
    return lazy._resolve()


def close(lazy):
    """Run the closer on a constructed client. The client itself is kept."""
    lazy._close()


def service_name(lazy):
    return lazy._name


def policy_of(lazy):
    return lazy._policy


def missing(lazy):
    """Names of required values that are absent."""
    return lazy._missing()


def is_configured(lazy):
    return not lazy._missing()


def is_constructed(lazy):
    return lazy._client is not None
