# Minimal TOML block editor for nia-wizard
import re
from typing import Any

import tomli
import tomli_w

from nia_wizard.errors import ConfigParseError

# ABOUTME: Matches [table] and [[array]] header lines, with optional trailing comment
_HEADER_PATTERN = re.compile(r"^\s*(\[\[?)\s*([^\[\]]+?)\s*(\]\]?)\s*(?:#.*)?$")


def load_toml(text: str) -> dict[str, Any]:
    """Parse TOML text.

    ABOUTME: Empty text is an empty document
    ABOUTME: Raises ConfigParseError for invalid TOML
    """
    try:
        return tomli.loads(text)
    except tomli.TOMLDecodeError as e:
        raise ConfigParseError(f"Invalid TOML: {e}") from e


def _split_key(raw: str) -> tuple[str, ...]:
    """Split a dotted TOML key, honouring quoted segments."""
    parts: list[str] = []
    current: list[str] = []
    quote = ""
    for ch in raw:
        if quote:
            if ch == quote:
                quote = ""
            else:
                current.append(ch)
        elif ch in ('"', "'"):
            quote = ch
        elif ch == ".":
            parts.append("".join(current).strip())
            current = []
        else:
            current.append(ch)
    parts.append("".join(current).strip())
    return tuple(parts)


def _parse_header(line: str) -> tuple[bool, tuple[str, ...]] | None:
    """Return (is_array, key_path) for a header line, else None."""
    match = _HEADER_PATTERN.match(line)
    if not match:
        return None
    opening, raw, closing = match.groups()
    if len(opening) != len(closing):
        return None
    return len(opening) == 2, _split_key(raw)


def _starts_with(path: tuple[str, ...], prefix: tuple[str, ...]) -> bool:
    return path[:len(prefix)] == prefix


def render_table(keys: tuple[str, ...], value: dict[str, Any]) -> str:
    """Render a value as a [a.b] table block.

    ABOUTME: Nested dicts become dotted sub-tables, e.g. [mcp_servers.nia.env]

    Example output:
        [mcp_servers.nia]
        command = "pipx"
        args = ["run", "--no-cache", "nia-mcp-server"]

        [mcp_servers.nia.env]
        NIA_API_KEY = "nk_xxxx"
    """
    nested: dict[str, Any] = value
    for key in reversed(keys):
        nested = {key: nested}
    return tomli_w.dumps(nested)


def render_array_entry(array: str, entry: dict[str, Any]) -> str:
    """Render one [[array]] element.

    ABOUTME: Nested dicts become [array.key] sub-tables of that element
    ABOUTME: The header is written by hand; tomli_w inlines short arrays

    Example output:
        [[mcp_servers]]
        name = "nia"
        url = "https://apigcp.trynia.ai/mcp"

        [mcp_servers.headers]
        Authorization = "Bearer nk_xxxx"
    """
    literals = {k: v for k, v in entry.items() if not isinstance(v, dict)}
    tables = {k: v for k, v in entry.items() if isinstance(v, dict)}

    block = f"[[{array}]]\n" + tomli_w.dumps(literals)
    if tables:
        block += "\n" + tomli_w.dumps({array: tables})
    return block


def append_block(text: str, block: str) -> str:
    """Append a rendered block, separated by one blank line."""
    block = block.strip() + "\n"
    if not text.strip():
        return block
    return text.rstrip() + "\n\n" + block


def remove_table(text: str, keys: tuple[str, ...]) -> str:
    """Remove the [keys] table and its dotted sub-tables.

    ABOUTME: A block ends at the next header that is not part of it, or EOF
    ABOUTME: Tables defined some other way (inline, dotted keys) are not touched
    """
    out: list[str] = []
    skipping = False
    for line in text.splitlines(keepends=True):
        header = _parse_header(line)
        if header is not None:
            _, path = header
            skipping = _starts_with(path, keys)
        if not skipping:
            out.append(line)
    return _tidy("".join(out), text)


def remove_array_entry(text: str, array: str, field: str, value: str) -> str:
    """Remove every [[array]] element whose `field` equals `value`.

    ABOUTME: An element spans its [[array]] header, its keys and any
    ABOUTME: [array.sub] tables up to the next unrelated header
    """
    key_pattern = re.compile(
        rf"^\s*{re.escape(field)}\s*=\s*([\"']){re.escape(value)}\1\s*(?:#.*)?$"
    )
    array_path = (array,)

    chunks: list[tuple[str, list[str]]] = [("other", [])]
    for line in text.splitlines(keepends=True):
        header = _parse_header(line)
        if header is not None:
            is_array, path = header
            if is_array and path == array_path:
                chunks.append(("element", [line]))
                continue
            in_element = chunks[-1][0] in ("element", "element-sub")
            if not is_array and in_element and _starts_with(path, array_path):
                chunks.append(("element-sub", [line]))
                continue
            chunks.append(("other", [line]))
            continue
        chunks[-1][1].append(line)

    out: list[str] = []
    dropping = False
    for kind, lines in chunks:
        if kind == "element":
            # Only the element's own keys decide, not its sub-tables
            dropping = any(key_pattern.match(line) for line in lines[1:])
        elif kind == "other":
            dropping = False
        if not dropping:
            out.extend(lines)
    return _tidy("".join(out), text)


def _tidy(result: str, original: str) -> str:
    if result == original:
        return original
    result = re.sub(r"\n{3,}", "\n\n", result)
    stripped = result.rstrip()
    return stripped + "\n" if stripped else ""
