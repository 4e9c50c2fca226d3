# Config document codecs for nia-wizard
import copy
import json
import logging
from pathlib import Path
from typing import Any, Protocol, cast, runtime_checkable

from nia_wizard.errors import ConfigParseError, ConfigWriteError
from nia_wizard.models import ConfigFormat
from nia_wizard.utils import jsonc, toml_writer

logger = logging.getLogger(__name__)


def read_json_file(path: Path) -> dict[str, Any]:
    """Read JSON file with error handling.

    ABOUTME: Returns empty dict if file doesn't exist or is blank
    ABOUTME: Raises ConfigParseError for invalid JSON or a non-object root
    """
    if not path.exists():
        return {}

    with open(path, encoding="utf-8") as f:
        content = f.read()
    if not content.strip():
        return {}

    try:
        result = json.loads(content)
    except json.JSONDecodeError as e:
        raise ConfigParseError(f"Invalid JSON in {path}: {e}", path) from e

    if not isinstance(result, dict):
        raise ConfigParseError(f"Expected a JSON object in {path}", path)
    return cast(dict[str, Any], result)


def write_json_file(path: Path, data: dict[str, Any]) -> None:
    """Write JSON file with error handling.

    ABOUTME: Creates parent directories if needed
    ABOUTME: Uses 2-space indentation and keeps the existing key order
    """
    path.parent.mkdir(parents=True, exist_ok=True)

    with open(path, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2, ensure_ascii=False)
        f.write("\n")  # Add trailing newline


def read_text_file(path: Path) -> str:
    """Read a text config, returning "" when it doesn't exist.

    ABOUTME: newline="" keeps CRLF files intact through an edit
    """
    if not path.exists():
        return ""
    with open(path, encoding="utf-8", newline="") as f:
        return f.read()


def write_text_file(path: Path, content: str) -> None:
    """Write a text config, creating parent directories if needed."""
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8", newline="") as f:
        f.write(content)


@runtime_checkable
class ConfigCodec(Protocol):
    """Read/modify/write contract shared by every config format.

    ABOUTME: A document is whatever the codec edits: a dict for JSON,
    ABOUTME: the raw source text for JSONC and TOML
    ABOUTME: set/delete return a new document and never touch the input
    """

    format: ConfigFormat

    def read(self, path: Path) -> Any:
        ...

    def write(self, path: Path, document: Any) -> None:
        ...

    def parse(self, document: Any) -> dict[str, Any]:
        """Structured view of a document, for lookups."""
        ...

    def set_key_path(self, document: Any, keys: tuple[str, ...], value: Any) -> Any:
        ...

    def delete_key_path(self, document: Any, keys: tuple[str, ...]) -> Any:
        ...


class JSONCodec:
    """Plain JSON: parse, mutate in memory, pretty-print."""

    format = ConfigFormat.JSON

    def read(self, path: Path) -> dict[str, Any]:
        return read_json_file(path)

    def write(self, path: Path, document: dict[str, Any]) -> None:
        write_json_file(path, document)
        logger.debug(f"Wrote JSON config to {path}")

    def parse(self, document: dict[str, Any]) -> dict[str, Any]:
        return document

    def set_key_path(
        self, document: dict[str, Any], keys: tuple[str, ...], value: Any
    ) -> dict[str, Any]:
        if not keys:
            raise ValueError("Key path must not be empty")

        result = copy.deepcopy(document)
        node = result
        for key in keys[:-1]:
            child = node.get(key)
            if not isinstance(child, dict):
                child = {}
                node[key] = child
            node = child
        node[keys[-1]] = copy.deepcopy(value)
        return result

    def delete_key_path(self, document: dict[str, Any], keys: tuple[str, ...]) -> dict[str, Any]:
        if not keys:
            raise ValueError("Key path must not be empty")

        result = copy.deepcopy(document)
        node: Any = result
        for key in keys[:-1]:
            node = node.get(key) if isinstance(node, dict) else None
            if not isinstance(node, dict):
                return result
        node.pop(keys[-1], None)
        return result


class JSONCCodec:
    """JSON with comments, edited as text so comments survive."""

    format = ConfigFormat.JSONC

    def __init__(self, indent: int = 2) -> None:
        self.indent = indent

    def read(self, path: Path) -> str:
        text = read_text_file(path)
        try:
            jsonc.parse(text)
        except ConfigParseError as e:
            raise ConfigParseError(f"Invalid JSON in {path}: {e}", path) from e
        return text

    def write(self, path: Path, document: str) -> None:
        write_text_file(path, document)
        logger.debug(f"Wrote JSONC config to {path}")

    def parse(self, document: str) -> dict[str, Any]:
        data = jsonc.parse(document)
        if not isinstance(data, dict):
            raise ConfigParseError("Root of the document must be a JSON object")
        return data

    def set_key_path(self, document: str, keys: tuple[str, ...], value: Any) -> str:
        return jsonc.set_value(document, list(keys), value, indent=self.indent)

    def delete_key_path(self, document: str, keys: tuple[str, ...]) -> str:
        return jsonc.remove_value(document, list(keys))


class TOMLCodec:
    """TOML edited as text: blocks are removed and appended whole.

    ABOUTME: Only [a.b] table blocks are managed; everything else is kept as-is
    ABOUTME: Every edited document is re-parsed before it may be written
    """

    format = ConfigFormat.TOML

    def read(self, path: Path) -> str:
        text = read_text_file(path)
        try:
            toml_writer.load_toml(text)
        except ConfigParseError as e:
            raise ConfigParseError(f"Invalid TOML in {path}: {e}", path) from e
        return text

    def write(self, path: Path, document: str) -> None:
        try:
            toml_writer.load_toml(document)
        except ConfigParseError as e:
            raise ConfigWriteError(f"Refusing to write invalid TOML to {path}: {e}") from e
        write_text_file(path, document)
        logger.debug(f"Wrote TOML config to {path}")

    def parse(self, document: str) -> dict[str, Any]:
        return toml_writer.load_toml(document)

    def set_key_path(self, document: str, keys: tuple[str, ...], value: Any) -> str:
        if not keys:
            raise ValueError("Key path must not be empty")
        if not isinstance(value, dict):
            raise TypeError("TOML values must be tables")

        without = toml_writer.remove_table(document, keys)
        return toml_writer.append_block(without, toml_writer.render_table(keys, value))

    def delete_key_path(self, document: str, keys: tuple[str, ...]) -> str:
        if not keys:
            raise ValueError("Key path must not be empty")
        return toml_writer.remove_table(document, keys)


def codec_for(config_format: ConfigFormat) -> ConfigCodec:
    """Return the codec for a config format.

    Raises:
        ValueError: For ConfigFormat.NONE
    """
    if config_format == ConfigFormat.JSON:
        return JSONCodec()
    if config_format == ConfigFormat.JSONC:
        return JSONCCodec()
    if config_format == ConfigFormat.TOML:
        return TOMLCodec()
    raise ValueError(f"No codec for config format '{config_format.value}'")
