"""Configuration report for the service clients."""
import logging
import sys

from .accessor import is_constructed, missing, policy_of
from .config import Config
from .errors import MissingConfigPolicy
from .services import Clients

logger = logging.getLogger(__name__)


def describe(clients):
    """Per-accessor state. Does not construct any client."""
    report = {}
    for attr, lazy in clients.accessors():
        absent = missing(lazy)
        report[attr] = {
            "policy": policy_of(lazy).value,
            "configured": not absent,
            "constructed": is_constructed(lazy),
            "missing": absent,
        }
    return report


def main(argv=None):
    """Log each accessor's state; exit 1 if a strict accessor is misconfigured."""
    logging.basicConfig(level=logging.INFO, format="%(levelname)s: %(message)s")

    try:
        clients = Clients(Config())
    except ValueError as e:
        logger.error(f"Config error: {e}")
        return 1

    failed = False
    for attr, state in describe(clients).items():
        if state["configured"]:
            logger.info(f"{attr}: ok ({state['policy']})")
            continue
        names = ", ".join(state["missing"])
        if state["policy"] == MissingConfigPolicy.STRICT.value:
            failed = True
            logger.error(f"{attr}: missing {names} ({state['policy']})")
        else:
            logger.warning(f"{attr}: missing {names} ({state['policy']})")

    return 1 if failed else 0


if __name__ == "__main__":
    sys.exit(main())
