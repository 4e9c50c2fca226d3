# CLI interface for nia-wizard
import argparse
import logging
import os
import sys

from nia_wizard import __version__
from nia_wizard.clients import get_all_clients
from nia_wizard.config import load_settings
from nia_wizard.detection import detect_supported
from nia_wizard.errors import ConfigParseError, UnsupportedOperationError
from nia_wizard.install import add_all, remove_all, selection_choices
from nia_wizard.models import Mode
from nia_wizard.prompts import PromptCancelled, ask_text, choose, confirm, interactive_select
from nia_wizard.utils.validation import local_mode_available, validate_api_key

# ABOUTME: Exit codes
# 0 = success, 1 = partial success, 2 = config error, 3 = fatal
EXIT_SUCCESS = 0
EXIT_PARTIAL = 1
EXIT_CONFIG_ERROR = 2
EXIT_FATAL = 3

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"
NOT_DETECTED_HINT = "not detected - rerun wizard to set up manually"
MODE_HINTS = {"remote": "recommended, hosted endpoint", "local": "requires pipx"}


def configure_logging(debug: bool) -> logging.Logger:
    """Set up logging and return the logger handed to the core.

    ABOUTME: WARNING by default, DEBUG with --debug
    """
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format=LOG_FORMAT,
        force=True,
    )
    return logging.getLogger("nia_wizard")


def resolve_api_key(args: argparse.Namespace) -> str | None:
    """API key from the argument, NIA_API_KEY, or a prompt (interactive only)."""
    api_key = args.api_key or os.environ.get("NIA_API_KEY")
    if not api_key and not args.ci:
        api_key = ask_text("Enter your Nia API key (nk_...):", secret=True)
    return api_key.strip() if api_key else None


def resolve_mode(args: argparse.Namespace) -> Mode | None:
    """Requested mode, switching to remote when pipx is unavailable.

    ABOUTME: --local/--remote win; CI defaults to local; otherwise the user picks
    ABOUTME: Returns None when the user declines the switch
    """
    mode: Mode
    if args.local or args.remote:
        mode = "local" if args.local else "remote"
    elif args.ci:
        mode = "local"
        print("Using local mode (CI default)")
    else:
        choice = choose("Select installation mode:", ["remote", "local"], "local", hints=MODE_HINTS)
        mode = "local" if choice == "local" else "remote"

    if mode == "local" and not local_mode_available():
        if args.ci:
            print("pipx not found; using remote mode.")
            return "remote"
        if not confirm("pipx is required for local mode but was not found. Use remote mode instead?"):
            return None
        return "remote"
    return mode


def cmd_install(args: argparse.Namespace) -> int:
    """Execute install command.

    ABOUTME: Resolves key and mode, picks clients, installs, reports
    ABOUTME: Returns exit code based on results
    """
    print(f"nia-wizard install v{__version__}")
    print()

    log = configure_logging(args.debug)

    try:
        settings = load_settings()
    except ConfigParseError as e:
        print(f"Error: {e}")
        return EXIT_CONFIG_ERROR

    try:
        api_key = resolve_api_key(args)
        error = validate_api_key(api_key)
        if error is not None or api_key is None:
            print(f"Error: {error.message if error else 'API key is required'}")
            print("Pass it as an argument or set NIA_API_KEY.")
            return EXIT_CONFIG_ERROR

        mode = resolve_mode(args)
        if mode is None:
            print("Local mode unavailable. Install pipx and try again.")
            return EXIT_CONFIG_ERROR

        clients = get_all_clients(settings=settings, logger=log)
        print("Detecting coding agents...")
        detected = detect_supported(clients, log)

        selected_names: list[str] | None = None
        if not args.ci:
            choices = selection_choices(clients, detected)
            selected_names = interactive_select(
                "Select which coding agents to install Nia to:",
                [choice.name for choice in choices],
                {choice.name for choice in choices if choice.detected},
                hints={c.name: NOT_DETECTED_HINT for c in choices if not c.detected},
            )
            if not selected_names:
                print("No clients selected.")
                return EXIT_SUCCESS

        def confirm_reinstall(names: list[str]) -> bool:
            print("Nia is already configured for:")
            for name in names:
                print(f"  - {name}")
            return confirm("Reinstall to update configuration?")

        report = add_all(
            api_key,
            mode,
            selected_names,
            ci=args.ci,
            confirm_reinstall=confirm_reinstall,
            clients=clients,
            detected=detected,
            log=log,
        )
    except PromptCancelled:
        print()
        print("Operation cancelled.")
        return EXIT_FATAL
    except Exception as e:
        print(f"Fatal error: {e}")
        return EXIT_FATAL

    if report.nothing_detected:
        print("No coding agents detected on this system.")
        return EXIT_SUCCESS
    if not report.succeeded and not report.failed:
        print("Nothing to install.")
        return EXIT_SUCCESS

    print()
    print(f"Installing Nia ({mode} mode)...")
    for name in report.succeeded:
        print(f"  {name} - installed")
    for failure in report.failed:
        print(f"  {failure.name} - failed: {failure.error}")

    print()
    total = len(report.succeeded) + len(report.failed)
    if report.failed:
        print(f"Install complete: {len(report.succeeded)}/{total} clients configured, {len(report.failed)} failed")
        return EXIT_PARTIAL

    print(f"Install complete: {len(report.succeeded)}/{total} clients configured")
    print("Restart your coding agents to pick up the new server.")
    return EXIT_SUCCESS


def cmd_remove(args: argparse.Namespace) -> int:
    """Execute remove command.

    ABOUTME: Removes the registration from clients where it is installed
    ABOUTME: Interactive mode lets the user pick among them
    """
    print(f"nia-wizard remove v{__version__}")
    print()

    log = configure_logging(args.debug)

    try:
        settings = load_settings()
    except ConfigParseError as e:
        print(f"Error: {e}")
        return EXIT_CONFIG_ERROR

    try:
        clients = get_all_clients(settings=settings, logger=log)
        detected = detect_supported(clients, log)
        installed = [client for client in detected if client.is_installed()]

        if not installed:
            print("Nia is not installed in any detected coding agent.")
            return EXIT_SUCCESS

        names = [client.name for client in installed]
        if not args.ci:
            names = interactive_select(
                "Select which coding agents to remove Nia from:",
                names,
                set(names),
            )
            if not names:
                print("No clients selected.")
                return EXIT_SUCCESS

        report = remove_all(names, clients=installed, log=log)
    except PromptCancelled:
        print()
        print("Operation cancelled.")
        return EXIT_FATAL
    except Exception as e:
        print(f"Fatal error: {e}")
        return EXIT_FATAL

    print("Removing Nia...")
    for name in report.removed:
        print(f"  {name} - removed")
    for failure in report.failed:
        print(f"  {failure.name} - failed: {failure.error}")

    print()
    if report.failed:
        print(f"Remove complete: {len(report.removed)} removed, {len(report.failed)} failed")
        return EXIT_PARTIAL
    print(f"Remove complete: {len(report.removed)} removed")
    return EXIT_SUCCESS


def cmd_list(args: argparse.Namespace) -> int:
    """Execute list command.

    ABOUTME: Shows every client with detection and install status
    """
    print(f"nia-wizard list v{__version__}")
    print()

    log = configure_logging(args.debug)

    try:
        settings = load_settings()
    except ConfigParseError as e:
        print(f"Error: {e}")
        return EXIT_CONFIG_ERROR

    clients = get_all_clients(settings=settings, logger=log)
    detected_count = 0
    for client in clients:
        detected = client.detect()
        installed = detected and client.is_installed()
        detected_count += detected

        status = "installed" if installed else ("detected" if detected else "not detected")
        try:
            location = str(client.config_path())
        except UnsupportedOperationError:
            location = "managed by CLI"

        print(f"  {client.name} [{status}]")
        print(f"    mechanism: {client.install_mechanism.value}")
        print(f"    config: {location}")
        if client.docs_url:
            print(f"    docs: {client.docs_url}")
        if client.note:
            print(f"    note: {client.note}")
        print()

    print(f"Total: {len(clients)} client(s), {detected_count} detected")
    return EXIT_SUCCESS


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point.

    ABOUTME: Parses args and dispatches to appropriate command
    ABOUTME: Returns exit code for sys.exit()
    """
    parser = argparse.ArgumentParser(
        prog="nia-wizard",
        description="Install the Nia MCP server into your coding agents"
    )

    parser.add_argument(
        "--version", "-V",
        action="version",
        version=f"nia-wizard v{__version__}"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # install command
    install_parser = subparsers.add_parser(
        "install",
        help="Add Nia to detected coding agents"
    )
    install_parser.add_argument(
        "api_key",
        nargs="?",
        help="Nia API key (defaults to $NIA_API_KEY or a prompt)"
    )
    mode_group = install_parser.add_mutually_exclusive_group()
    mode_group.add_argument(
        "--local",
        action="store_true",
        help="Run the server locally via pipx (stdio); default with --ci"
    )
    mode_group.add_argument(
        "--remote",
        action="store_true",
        help="Use the hosted HTTP endpoint"
    )
    install_parser.add_argument(
        "--ci",
        action="store_true",
        help="Non-interactive: install to every detected agent"
    )
    install_parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging"
    )

    # remove command
    remove_parser = subparsers.add_parser(
        "remove",
        help="Remove Nia from coding agents"
    )
    remove_parser.add_argument(
        "--ci",
        action="store_true",
        help="Non-interactive: remove from every agent where it is installed"
    )
    remove_parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging"
    )

    # list command
    list_parser = subparsers.add_parser(
        "list",
        help="List supported coding agents and their status"
    )
    list_parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging"
    )

    args = parser.parse_args(argv)

    if args.command == "install":
        return cmd_install(args)
    elif args.command == "remove":
        return cmd_remove(args)
    elif args.command == "list":
        return cmd_list(args)
    else:
        # No command specified, show help
        parser.print_help()
        return EXIT_SUCCESS


if __name__ == "__main__":
    sys.exit(main())
