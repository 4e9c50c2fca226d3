# ABOUTME: JSON-with-comments reader and comment-preserving editor
# ABOUTME: Edits are textual patches so untouched regions stay byte-for-byte
import json
import re
from dataclasses import dataclass, field
from typing import Any

from nia_wizard.errors import ConfigParseError

_LITERAL_PATTERN = re.compile(
    r"-?(?:0|[1-9]\d*)(?:\.\d+)?(?:[eE][+-]?\d+)?|true|false|null"
)
_WHITESPACE = " \t\r\n\ufeff"


@dataclass
class _Node:
    """A parsed JSONC value with its source span [start, end)."""
    kind: str  # 'object', 'array' or 'scalar'
    start: int
    end: int
    value: Any = None
    properties: list["_Property"] = field(default_factory=list)


@dataclass
class _Property:
    key: str
    start: int  # offset of the key's opening quote
    value: _Node
    comma: int | None = None  # offset of the comma after the value, if any


class _Parser:
    """Recursive-descent JSONC parser that keeps source offsets.

    ABOUTME: Accepts // and /* */ comments and trailing commas
    ABOUTME: Tracks strings so // inside URLs is not taken as a comment
    """

    def __init__(self, text: str) -> None:
        self.text = text
        self.pos = 0

    def parse(self) -> _Node | None:
        self._skip()
        if self.pos >= len(self.text):
            return None
        node = self._parse_value()
        self._skip()
        if self.pos < len(self.text):
            raise self._error("Unexpected content after end of document")
        return node

    def _error(self, message: str) -> ConfigParseError:
        line = self.text.count("\n", 0, self.pos) + 1
        column = self.pos - (self.text.rfind("\n", 0, self.pos) + 1) + 1
        return ConfigParseError(f"{message} (line {line}, column {column})")

    def _peek(self) -> str:
        return self.text[self.pos] if self.pos < len(self.text) else ""

    def _skip(self) -> None:
        text = self.text
        length = len(text)
        while self.pos < length:
            ch = text[self.pos]
            if ch in _WHITESPACE:
                self.pos += 1
            elif text.startswith("//", self.pos):
                end = text.find("\n", self.pos)
                self.pos = length if end == -1 else end + 1
            elif text.startswith("/*", self.pos):
                end = text.find("*/", self.pos + 2)
                if end == -1:
                    raise self._error("Unterminated block comment")
                self.pos = end + 2
            else:
                break

    def _parse_value(self) -> _Node:
        ch = self._peek()
        if ch == "{":
            return self._parse_object()
        if ch == "[":
            return self._parse_array()
        if ch == '"':
            start = self.pos
            value = self._parse_string()
            return _Node("scalar", start, self.pos, value)
        if not ch:
            raise self._error("Unexpected end of input")

        match = _LITERAL_PATTERN.match(self.text, self.pos)
        if not match:
            raise self._error(f"Unexpected character {ch!r}")
        start = self.pos
        self.pos = match.end()
        return _Node("scalar", start, self.pos, json.loads(match.group(0)))

    def _parse_string(self) -> str:
        start = self.pos
        self.pos += 1
        text = self.text
        while self.pos < len(text):
            ch = text[self.pos]
            if ch == "\\":
                self.pos += 2
                continue
            if ch == '"':
                self.pos += 1
                try:
                    return json.loads(text[start:self.pos])
                except json.JSONDecodeError as e:
                    self.pos = start
                    raise self._error(f"Invalid string: {e.msg}") from e
            if ch == "\n":
                break
            self.pos += 1
        self.pos = start
        raise self._error("Unterminated string")

    def _parse_object(self) -> _Node:
        node = _Node("object", self.pos, self.pos, {})
        self.pos += 1

        while True:
            self._skip()
            if self._peek() == "}":
                self.pos += 1
                break
            if node.properties and node.properties[-1].comma is None:
                raise self._error("Expected ',' or '}'")
            if self._peek() != '"':
                raise self._error("Expected property name")

            key_start = self.pos
            key = self._parse_string()
            self._skip()
            if self._peek() != ":":
                raise self._error("Expected ':' after property name")
            self.pos += 1
            self._skip()

            value = self._parse_value()
            prop = _Property(key=key, start=key_start, value=value)
            self._skip()
            if self._peek() == ",":
                prop.comma = self.pos
                self.pos += 1
            node.properties.append(prop)
            node.value[key] = value.value

        node.end = self.pos
        return node

    def _parse_array(self) -> _Node:
        node = _Node("array", self.pos, self.pos, [])
        self.pos += 1
        expect_comma = False

        while True:
            self._skip()
            if self._peek() == "]":
                self.pos += 1
                break
            if expect_comma:
                raise self._error("Expected ',' or ']'")

            element = self._parse_value()
            node.value.append(element.value)
            self._skip()
            if self._peek() == ",":
                self.pos += 1
            else:
                expect_comma = True

        node.end = self.pos
        return node


def parse(text: str) -> Any:
    """Parse JSONC text into Python values.

    ABOUTME: Empty or comment-only text parses as an empty dict
    ABOUTME: Raises ConfigParseError for malformed content
    """
    root = _Parser(text).parse()
    if root is None:
        return {}
    return root.value


def _nest(keys: list[str], value: Any) -> Any:
    for key in reversed(keys):
        value = {key: value}
    return value


def _line_indent(text: str, offset: int) -> str:
    line_start = text.rfind("\n", 0, offset) + 1
    indent_end = line_start
    while indent_end < offset and text[indent_end] in " \t":
        indent_end += 1
    return text[line_start:indent_end]


def _format(value: Any, base_indent: str, indent: int, eol: str) -> str:
    rendered = json.dumps(value, indent=indent, ensure_ascii=False)
    return rendered.replace("\n", eol + base_indent)


def _format_property(key: str, value: Any, base_indent: str, indent: int, eol: str) -> str:
    return f"{json.dumps(key, ensure_ascii=False)}: {_format(value, base_indent, indent, eol)}"


def _find(node: _Node, key: str) -> tuple[int, _Property | None]:
    # Last occurrence wins, matching json.loads
    for index in range(len(node.properties) - 1, -1, -1):
        if node.properties[index].key == key:
            return index, node.properties[index]
    return -1, None


def _skip_inline(text: str, pos: int) -> int:
    while pos < len(text) and text[pos] in " \t":
        pos += 1
    return pos


def _skip_inline_back(text: str, pos: int) -> int:
    while pos > 0 and text[pos - 1] in " \t":
        pos -= 1
    return pos


def _tail_end(text: str, pos: int) -> int | None:
    """Where the line ends, if only blanks or a // comment follow pos on it."""
    pos = _skip_inline(text, pos)
    if text.startswith("//", pos):
        newline = text.find("\n", pos)
        if newline == -1:
            return len(text)
        return newline - 1 if text[newline - 1] == "\r" else newline
    if pos >= len(text) or text[pos] in "\r\n":
        return pos
    return None


def _past_terminator(text: str, pos: int) -> int:
    if text.startswith("\r\n", pos):
        return pos + 2
    if text.startswith("\n", pos):
        return pos + 1
    return pos


def _insert_property(
    text: str, obj: _Node, key: str, value: Any, indent: int, eol: str
) -> str:
    if obj.properties:
        last = obj.properties[-1]
        child_indent = _line_indent(text, last.start)
        entry = eol + child_indent + _format_property(key, value, child_indent, indent, eol)
        value_end = last.value.end
        after = last.comma + 1 if last.comma is not None else value_end
        # A comment closing the sibling's line stays with the sibling
        at = _tail_end(text, after)
        if at is None:
            at = after
        if last.comma is not None:
            return text[:at] + entry + text[at:]
        return text[:value_end] + "," + text[value_end:at] + entry + text[at:]

    parent_indent = _line_indent(text, obj.start)
    child_indent = parent_indent + " " * indent
    entry = _format_property(key, value, child_indent, indent, eol)
    open_at = obj.start + 1
    close_at = obj.end - 1
    if not text[open_at:close_at].strip():
        return text[:open_at] + eol + child_indent + entry + eol + parent_indent + text[close_at:]
    # Only comments inside: keep them after the new property
    return text[:open_at] + eol + child_indent + entry + text[open_at:]


def _eol(text: str) -> str:
    return "\r\n" if "\r\n" in text else "\n"


def set_value(text: str, keys: list[str], value: Any, indent: int = 2) -> str:
    """Return text with the value at the key path set.

    ABOUTME: Creates intermediate objects as needed
    ABOUTME: Replaces non-object intermediates instead of failing
    ABOUTME: Everything outside the edited span is left untouched

    Args:
        text: Original JSONC source (may be empty)
        keys: Key path, e.g. ["mcpServers", "nia"]
        value: JSON-serializable value to store
        indent: Spaces per level for newly rendered values

    Returns:
        The patched source text

    Raises:
        ConfigParseError: If text is malformed or its root is not an object
    """
    if not keys:
        raise ValueError("Key path must not be empty")

    eol = _eol(text)
    root = _Parser(text).parse()
    if root is None:
        rendered = _format(_nest(list(keys), value), "", indent, eol) + eol
        if not text.strip():
            return rendered
        return text.rstrip() + eol + rendered
    if root.kind != "object":
        raise ConfigParseError("Root of the document must be a JSON object")

    node = root
    for depth, key in enumerate(keys):
        _, prop = _find(node, key)
        rest = list(keys[depth + 1:])
        if prop is None:
            return _insert_property(text, node, key, _nest(rest, value), indent, eol)
        if not rest or prop.value.kind != "object":
            replacement = _format(_nest(rest, value), _line_indent(text, prop.start), indent, eol)
            return text[:prop.value.start] + replacement + text[prop.value.end:]
        node = prop.value

    raise AssertionError("unreachable")


def _removal_span(text: str, prop: _Property) -> tuple[int, int]:
    """Source span covering a property, its comma and its own trailing comment.

    ABOUTME: Comments on other lines belong to the neighbouring entries and stay
    """
    end = prop.comma + 1 if prop.comma is not None else prop.value.end
    line_end = _tail_end(text, end)
    if line_end is None:
        # Something else follows on the same line
        if prop.comma is not None:
            return prop.start, _skip_inline(text, end)
        return _skip_inline_back(text, prop.start), end

    start = _skip_inline_back(text, prop.start)
    if start == 0 or text[start - 1] == "\n":
        return start, _past_terminator(text, line_end)
    return start, line_end


def remove_value(text: str, keys: list[str]) -> str:
    """Return text with the property at the key path removed.

    ABOUTME: Missing paths leave the text unchanged
    ABOUTME: An object left empty collapses to {}

    Raises:
        ConfigParseError: If text is malformed or its root is not an object
    """
    if not keys:
        raise ValueError("Key path must not be empty")

    root = _Parser(text).parse()
    if root is None:
        return text
    if root.kind != "object":
        raise ConfigParseError("Root of the document must be a JSON object")

    node = root
    for key in keys[:-1]:
        _, prop = _find(node, key)
        if prop is None or prop.value.kind != "object":
            return text
        node = prop.value

    index, prop = _find(node, keys[-1])
    if prop is None:
        return text

    start, end = _removal_span(text, prop)
    props = node.properties
    if len(props) == 1:
        remaining = text[node.start + 1:start] + text[end:node.end - 1]
        if not remaining.strip():
            return text[:node.start + 1] + text[node.end - 1:]
        return text[:start] + text[end:]

    previous = props[index - 1] if index > 0 else None
    if index == len(props) - 1 and prop.comma is None and previous is not None:
        # The previous entry becomes last; drop only its comma
        comma = previous.comma
        return text[:comma] + text[comma + 1:start] + text[end:]
    return text[:start] + text[end:]
