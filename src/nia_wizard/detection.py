# ABOUTME: Detection of which coding agents are present on this machine
# ABOUTME: Each probe runs on its own; one failing never affects another
import logging
from collections.abc import Sequence

from nia_wizard.models import ClientDescriptor

logger = logging.getLogger(__name__)


def detect_supported(
    clients: Sequence[ClientDescriptor],
    log: logging.Logger | None = None,
) -> list[ClientDescriptor]:
    """Return the clients whose detect() probe succeeds, in registry order.

    ABOUTME: Probes run sequentially; exceptions count as not detected
    """
    log = log or logger
    log.debug("Checking for supported MCP clients...")

    supported: list[ClientDescriptor] = []
    for client in clients:
        try:
            found = client.detect()
        except Exception as e:
            log.debug(f"{client.name}: detection raised {e}")
            found = False
        if found:
            supported.append(client)

    log.debug(
        f"Found {len(supported)} supported client(s): "
        f"{', '.join(c.name for c in supported)}"
    )
    return supported
