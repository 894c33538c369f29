"""Configuration loading from pyproject.toml.

Reads the [tool.cleanarch] table:

    [tool.cleanarch]
    ignore_tests = true
    ignored_imports = ["myapp.generated"]
    replace_default_aliases = false

    [tool.cleanarch.aliases]
    domain = ["core", "model"]
    application = ["services"]
"""

from __future__ import annotations

import tomllib
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from cleanarch.domain.exceptions.config import ConfigError
from cleanarch.domain.model.configuration import (
    DEFAULT_LAYER_ALIASES,
    ValidatorConfig,
    build_alias_table,
)
from cleanarch.domain.model.layer import Layer

CONFIG_FILENAME = "pyproject.toml"
CONFIG_TABLE = ("tool", "cleanarch")

_KNOWN_KEYS = frozenset({"ignore_tests", "ignored_imports", "aliases", "replace_default_aliases"})


def find_config(start: Path | None = None) -> Path | None:
    """Walk up from *start* (default: cwd) looking for pyproject.toml.

    Returns the path to the config file, or None if not found.
    """
    current = (start or Path.cwd()).resolve()
    if current.is_file():
        current = current.parent

    while True:
        candidate = current / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
        parent = current.parent
        if parent == current:
            return None
        current = parent


def load_config(path: Path) -> ValidatorConfig:
    """Load validator configuration from a TOML file.

    Missing [tool.cleanarch] table = default configuration.

    Args:
        path: TOML file

    Returns:
        ValidatorConfig

    Raises:
        ConfigError: If file cannot be read, is not valid TOML, or has invalid values
    """
    source = path.as_posix()
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(source, f"cannot read: {e}") from e

    try:
        data: dict[str, Any] = tomllib.loads(raw)
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(source, f"invalid TOML: {e}") from e

    table: Any = data
    for key in CONFIG_TABLE:
        table = table.get(key, {}) if isinstance(table, Mapping) else None
    if not isinstance(table, Mapping):
        raise ConfigError(source, "[tool.cleanarch] must be a table")

    return parse_config(table, source)


def parse_config(table: Mapping[str, Any], source: str) -> ValidatorConfig:
    """Build ValidatorConfig from a [tool.cleanarch] table.

    Raises:
        ConfigError: On unknown keys or invalid values (FAIL-FIRST)
    """
    unknown = set(table) - _KNOWN_KEYS
    if unknown:
        raise ConfigError(source, f"unknown keys: {sorted(unknown)}")

    ignore_tests = table.get("ignore_tests", False)
    if not isinstance(ignore_tests, bool):
        raise ConfigError(source, "ignore_tests must be a boolean")

    ignored_imports = _string_list(table.get("ignored_imports", []), "ignored_imports", source)

    replace_defaults = table.get("replace_default_aliases", False)
    if not isinstance(replace_defaults, bool):
        raise ConfigError(source, "replace_default_aliases must be a boolean")

    aliases_table = table.get("aliases", {})
    if not isinstance(aliases_table, Mapping):
        raise ConfigError(source, "aliases must be a table of layer = [names]")

    layer_aliases: dict[Layer, list[str]] = (
        {} if replace_defaults else {k: list(v) for k, v in DEFAULT_LAYER_ALIASES.items()}
    )
    for layer_name, names in aliases_table.items():
        try:
            layer = Layer(layer_name)
        except ValueError as e:
            valid = ", ".join(item.value for item in Layer)
            raise ConfigError(source, f"unknown layer '{layer_name}' (expected: {valid})") from e
        layer_aliases.setdefault(layer, []).extend(
            _string_list(names, f"aliases.{layer_name}", source)
        )

    try:
        return ValidatorConfig(
            aliases=build_alias_table(layer_aliases),
            ignore_tests=ignore_tests,
            ignored_imports=ignored_imports,
        )
    except (TypeError, ValueError) as e:
        raise ConfigError(source, str(e)) from e


def _string_list(value: Any, key: str, source: str) -> tuple[str, ...]:
    if not isinstance(value, list) or not all(isinstance(item, str) and item for item in value):
        raise ConfigError(source, f"{key} must be a list of non-empty strings")
    return tuple(value)
