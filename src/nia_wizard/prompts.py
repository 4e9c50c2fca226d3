# Interactive terminal prompts for nia-wizard
import sys

# ABOUTME: Terminal codes for interactive UI
CLEAR_SCREEN = "\033[2J\033[H"
BOLD = "\033[1m"
DIM = "\033[2m"
RESET = "\033[0m"
GREEN = "\033[92m"
YELLOW = "\033[93m"
CYAN = "\033[96m"


class PromptCancelled(Exception):
    """The user cancelled an interactive prompt (Ctrl+C / EOF)."""


def _read_line() -> str:
    try:
        line = sys.stdin.readline()
    except KeyboardInterrupt as e:
        raise PromptCancelled() from e
    if not line:
        raise PromptCancelled()
    return line.strip()


def _select_numbered(
    title: str,
    items: list[str],
    selected: set[str],
    hints: dict[str, str],
) -> set[str]:
    """Fallback for systems without tty/termios (e.g., Windows, pipes)."""
    print(f"{BOLD}{title}{RESET}")
    print()
    for idx, item in enumerate(items):
        status = " [preselected]" if item in selected else ""
        hint = f" {DIM}({hints[item]}){RESET}" if item in hints else ""
        print(f"  {idx + 1}. {item}{status}{hint}")

    print()
    print("Enter comma-separated numbers (e.g., 1,3,5) or press Enter for defaults:")
    user_input = _read_line()
    if not user_input:
        return selected

    chosen: set[str] = set()
    try:
        for num_str in user_input.split(","):
            idx = int(num_str.strip()) - 1
            if 0 <= idx < len(items):
                chosen.add(items[idx])
    except ValueError:
        print("Invalid input. Using defaults.")
        return selected
    return chosen


def _select_raw(
    title: str,
    items: list[str],
    selected: set[str],
    hints: dict[str, str],
) -> set[str]:
    import termios
    import tty

    def getch() -> str:
        """Get a single character from stdin."""
        fd = sys.stdin.fileno()
        old_settings = termios.tcgetattr(fd)
        try:
            tty.setraw(fd)
            ch = sys.stdin.read(1)
            # Arrow keys arrive as three-character escape sequences
            if ch == "\x1b":
                ch += sys.stdin.read(2)
            return ch
        finally:
            termios.tcsetattr(fd, termios.TCSADRAIN, old_settings)

    current_idx = 0
    while True:
        print(CLEAR_SCREEN, end="")
        print(f"{BOLD}{title}{RESET}")
        print()

        for idx, item in enumerate(items):
            prefix = "[x]" if item in selected else "[ ]"
            cursor = f"{CYAN}>>>{RESET} " if idx == current_idx else "    "
            hint = f" {DIM}({hints[item]}){RESET}" if item in hints else ""
            print(f"{cursor}{prefix} {item}{hint}")

        print()
        print("Use arrow keys to navigate, space to toggle, enter to confirm.")

        ch = getch()
        if ch == "\x1b[A":  # Up arrow
            current_idx = (current_idx - 1) % len(items)
        elif ch == "\x1b[B":  # Down arrow
            current_idx = (current_idx + 1) % len(items)
        elif ch == " ":
            current_item = items[current_idx]
            if current_item in selected:
                selected.remove(current_item)
            else:
                selected.add(current_item)
        elif ch in ("\r", "\n"):
            break
        elif ch in ("\x03", "\x04"):  # Ctrl+C / Ctrl+D
            print(CLEAR_SCREEN, end="")
            raise PromptCancelled()

    print(CLEAR_SCREEN, end="")
    return selected


def interactive_select(
    title: str,
    items: list[str],
    preselected: set[str],
    hints: dict[str, str] | None = None,
) -> list[str]:
    """Terminal-based multi-select without external dependencies.

    ABOUTME: Uses arrow keys, space, and enter when stdin is a terminal
    ABOUTME: Falls back to a numbered list otherwise
    ABOUTME: Returns selections in the order of `items`

    Args:
        title: Heading shown above the list
        items: List of items to select from
        preselected: Set of items that should start selected
        hints: Optional dim annotation per item

    Returns:
        List of selected items

    Raises:
        PromptCancelled: If the user aborts
    """
    if not items:
        return []

    selected: set[str] = set(preselected) & set(items)
    hints = hints or {}

    use_raw = sys.stdin.isatty()
    if use_raw:
        try:
            import termios  # noqa: F401
        except ImportError:
            use_raw = False

    if use_raw:
        chosen = _select_raw(title, items, selected, hints)
    else:
        chosen = _select_numbered(title, items, selected, hints)
    return [item for item in items if item in chosen]


def confirm(message: str, default: bool = True) -> bool:
    """Yes/no question; Enter picks the default.

    Raises:
        PromptCancelled: On EOF
    """
    suffix = "[Y/n]" if default else "[y/N]"
    while True:
        print(f"{message} {suffix} ", end="", flush=True)
        answer = _read_line().lower()
        if not answer:
            return default
        if answer in ("y", "yes"):
            return True
        if answer in ("n", "no"):
            return False
        print("Please answer y or n.")


def ask_text(message: str, secret: bool = False) -> str:
    """Free-text question.

    ABOUTME: secret=True hides input (used for API keys)

    Raises:
        PromptCancelled: On EOF or Ctrl+C
    """
    if secret:
        import getpass

        try:
            return getpass.getpass(f"{message} ").strip()
        except (EOFError, KeyboardInterrupt) as e:
            raise PromptCancelled() from e

    print(f"{message} ", end="", flush=True)
    return _read_line()


def choose(
    message: str,
    options: list[str],
    default: str,
    hints: dict[str, str] | None = None,
) -> str:
    """Single choice from a numbered list; Enter picks the default.

    Raises:
        PromptCancelled: On EOF or Ctrl+C
    """
    hints = hints or {}
    print(f"{BOLD}{message}{RESET}")
    for idx, option in enumerate(options):
        marker = " [default]" if option == default else ""
        hint = f" {DIM}({hints[option]}){RESET}" if option in hints else ""
        print(f"  {idx + 1}. {option}{marker}{hint}")

    while True:
        print("Enter a number or press Enter for the default: ", end="", flush=True)
        answer = _read_line()
        if not answer:
            return default
        if answer.isdigit() and 1 <= int(answer) <= len(options):
            return options[int(answer) - 1]
        print(f"Please enter a number between 1 and {len(options)}.")
