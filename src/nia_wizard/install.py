# Install orchestration for nia-wizard
import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field

from nia_wizard.clients import find_clients, get_all_clients
from nia_wizard.config import Settings
from nia_wizard.detection import detect_supported
from nia_wizard.models import ClientDescriptor, Mode

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FailedClient:
    name: str
    error: str


@dataclass(frozen=True)
class ClientChoice:
    """One row of the client picker.

    ABOUTME: Undetected clients are still offered, just marked
    """
    name: str
    docs_url: str
    note: str
    detected: bool


@dataclass
class InstallReport:
    """Report from an install run.

    ABOUTME: Tracks success/failure across clients in selection order
    ABOUTME: Partial failure is a normal outcome, not an exception
    """
    succeeded: list[str] = field(default_factory=list)
    failed: list[FailedClient] = field(default_factory=list)
    already_installed: list[str] = field(default_factory=list)
    skipped: list[str] = field(default_factory=list)
    nothing_detected: bool = False

    def add_success(self, name: str) -> None:
        self.succeeded.append(name)

    def add_failure(self, name: str, error: str) -> None:
        """Record a failed client; the run continues."""
        self.failed.append(FailedClient(name=name, error=error))


@dataclass
class RemoveReport:
    """Report from a remove run."""
    removed: list[str] = field(default_factory=list)
    failed: list[FailedClient] = field(default_factory=list)
    not_installed: list[str] = field(default_factory=list)


def selection_choices(
    clients: Sequence[ClientDescriptor],
    detected: Sequence[ClientDescriptor],
) -> list[ClientChoice]:
    """Every client, in registry order, flagged with its detection result."""
    detected_names = {client.name for client in detected}
    return [
        ClientChoice(
            name=client.name,
            docs_url=client.docs_url,
            note=client.note,
            detected=client.name in detected_names,
        )
        for client in clients
    ]


def _select(
    clients: Sequence[ClientDescriptor],
    detected: Sequence[ClientDescriptor],
    selected_names: list[str] | None,
    ci: bool,
) -> list[ClientDescriptor]:
    if selected_names is None:
        return list(detected)

    chosen = find_clients(selected_names, clients)
    if ci:
        # Nobody is around to handle an install against an absent client
        detected_names = {client.name for client in detected}
        return [client for client in chosen if client.name in detected_names]
    return chosen


def add_all(
    api_key: str,
    mode: Mode,
    selected_names: list[str] | None = None,
    *,
    ci: bool = False,
    confirm_reinstall: Callable[[list[str]], bool] | None = None,
    clients: Sequence[ClientDescriptor] | None = None,
    detected: Sequence[ClientDescriptor] | None = None,
    settings: Settings | None = None,
    log: logging.Logger | None = None,
) -> InstallReport:
    """Register the server with the selected clients.

    ABOUTME: Detects clients, applies selection policy, checks existing
    ABOUTME: installs, then adds sequentially; one failure never stops the rest

    Args:
        api_key: Validated API key
        mode: Requested mode; single-mode clients substitute their own
        selected_names: Client names chosen by the user; None means all detected
        ci: Non-interactive: only detected clients, always reinstall
        confirm_reinstall: Called with already-configured names; False skips them
        clients: Clients to consider (defaults to the full registry)
        detected: Result of an earlier detection pass, to avoid probing twice
        settings: Settings for registry clients
        log: Logger (defaults to module logger)

    Returns:
        InstallReport with succeeded/failed lists in selection order

    Raises:
        KeyError: If selected_names contains an unknown client
    """
    log = log or logger
    if clients is None:
        clients = get_all_clients(settings=settings, logger=log)

    report = InstallReport()
    if detected is None:
        detected = detect_supported(clients, log)

    if ci and not detected:
        log.info("No coding agents detected on this system.")
        report.nothing_detected = True
        return report

    selected = _select(clients, detected, selected_names, ci)
    if not selected:
        log.info("No clients selected.")
        report.nothing_detected = not detected
        return report

    log.info(f"Installing to {len(selected)} client(s): {', '.join(c.name for c in selected)}")

    installed = [client for client in selected if client.is_installed()]
    report.already_installed = [client.name for client in installed]

    if installed and not ci and confirm_reinstall is not None:
        if not confirm_reinstall(report.already_installed):
            report.skipped = list(report.already_installed)
            selected = [client for client in selected if client not in installed]
            log.info(f"Skipping already configured client(s): {', '.join(report.skipped)}")

    for client in selected:
        try:
            outcome = client.add(api_key, mode)
        except Exception as e:
            # Record error but continue with other clients
            report.add_failure(client.name, str(e) or type(e).__name__)
            log.debug(f"{client.name}: unexpected error: {e}")
            continue

        if outcome.success:
            report.add_success(client.name)
            log.debug(f"{client.name}: installed")
        else:
            report.add_failure(client.name, outcome.error or "Unknown error")
            log.debug(f"{client.name}: {outcome.error}")

    return report


def remove_all(
    selected_names: list[str] | None = None,
    *,
    clients: Sequence[ClientDescriptor] | None = None,
    detected: Sequence[ClientDescriptor] | None = None,
    settings: Settings | None = None,
    log: logging.Logger | None = None,
) -> RemoveReport:
    """Unregister the server from clients where it is currently installed.

    ABOUTME: Without names, targets detected clients; either way only
    ABOUTME: clients that report is_installed() are touched

    Raises:
        KeyError: If selected_names contains an unknown client
    """
    log = log or logger
    if clients is None:
        clients = get_all_clients(settings=settings, logger=log)

    if selected_names is None:
        candidates = list(detected) if detected is not None else detect_supported(clients, log)
    else:
        candidates = find_clients(selected_names, clients)

    report = RemoveReport()
    for client in candidates:
        if not client.is_installed():
            report.not_installed.append(client.name)
            continue

        try:
            outcome = client.remove()
        except Exception as e:
            report.failed.append(FailedClient(client.name, str(e) or type(e).__name__))
            continue

        if outcome.success:
            report.removed.append(client.name)
            log.debug(f"{client.name}: removed")
        else:
            report.failed.append(FailedClient(client.name, outcome.error or "Unknown error"))

    return report
