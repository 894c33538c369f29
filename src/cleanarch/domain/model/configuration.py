"""Validator configuration.

Aliases translate directory naming conventions into layers.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from cleanarch.domain.model.layer import Layer

# Conventional directory names per layer.
DEFAULT_LAYER_ALIASES: Mapping[Layer, tuple[str, ...]] = MappingProxyType(
    {
        Layer.DOMAIN: ("domain", "entities"),
        Layer.APPLICATION: ("application", "app", "usecases", "usecase", "use_cases"),
        Layer.INTERFACES: ("interfaces", "interface", "adapters", "adapter"),
        Layer.INFRASTRUCTURE: ("infrastructure", "infra"),
    }
)


def build_alias_table(layer_aliases: Mapping[Layer, Iterable[str]]) -> Mapping[str, Layer]:
    """Invert layer → aliases into a read-only alias → layer table.

    Args:
        layer_aliases: Layer → directory names

    Returns:
        Read-only alias table

    Raises:
        TypeError: If a key is not a Layer
        ValueError: If an alias is empty or maps to two different layers
    """
    table: dict[str, Layer] = {}
    for layer, aliases in layer_aliases.items():
        if not isinstance(layer, Layer):
            raise TypeError(f"layer must be Layer, got {type(layer).__name__}")
        for alias in aliases:
            if not alias:
                raise ValueError(f"alias for {layer} must not be empty")
            existing = table.get(alias)
            if existing is not None and existing is not layer:
                raise ValueError(f"alias '{alias}' maps to both {existing} and {layer}")
            table[alias] = layer
    return MappingProxyType(table)


def default_aliases() -> Mapping[str, Layer]:
    """Alias table for the conventional directory names."""
    return build_alias_table(DEFAULT_LAYER_ALIASES)


def freeze_aliases(aliases: Mapping[str, Layer]) -> Mapping[str, Layer]:
    """Validate and copy an alias table into a read-only mapping.

    Raises:
        ValueError: If an alias is not a non-empty string
        TypeError: If an alias does not map to a Layer
    """
    for alias, layer in aliases.items():
        if not isinstance(alias, str) or not alias:
            raise ValueError(f"alias must be non-empty string, got {alias!r}")
        if not isinstance(layer, Layer):
            raise TypeError(f"alias '{alias}' must map to Layer, got {type(layer).__name__}")
    return MappingProxyType(dict(aliases))


@dataclass(frozen=True, slots=True)
class ValidatorConfig:
    """Immutable validation settings with FAIL-FIRST validation.

    Attributes:
        aliases: Path segment → layer. Empty = nothing is classified.
        ignore_tests: Skip test files during discovery.
        ignored_imports: Imports containing any of these substrings are not checked.
    """

    aliases: Mapping[str, Layer] = field(default_factory=default_aliases)
    ignore_tests: bool = False
    ignored_imports: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.aliases is None:
            raise TypeError("aliases must not be None")
        object.__setattr__(self, "aliases", freeze_aliases(self.aliases))

        if not isinstance(self.ignore_tests, bool):
            raise TypeError("ignore_tests must be bool")

        if not isinstance(self.ignored_imports, tuple):
            raise TypeError(
                f"ignored_imports must be tuple, got {type(self.ignored_imports).__name__}"
            )
        for pattern in self.ignored_imports:
            if not pattern:
                raise ValueError("ignored import substring must not be empty")
