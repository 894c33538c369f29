"""Layer metadata value object."""

from __future__ import annotations

from dataclasses import dataclass

from cleanarch.domain.model.layer import Layer


@dataclass(frozen=True, slots=True)
class LayerMetadata:
    """Module and layer inferred from a path.

    None means "not found". A path with no layer is unclassifiable.
    A path whose layer segment is the first segment has a layer but no module.

    Attributes:
        module: Path segment enclosing the layer segment
        layer: Layer recognized from an alias segment
    """

    module: str | None = None
    layer: Layer | None = None

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.module == "":
            raise ValueError("module must be non-empty string or None")
        if self.layer is not None and not isinstance(self.layer, Layer):
            raise TypeError(f"layer must be Layer or None, got {type(self.layer).__name__}")
        if self.module is not None and self.layer is None:
            raise ValueError("module requires layer")

    @property
    def is_classified(self) -> bool:
        """Both module and layer are known."""
        return self.module is not None and self.layer is not None

    @classmethod
    def unclassified(cls) -> LayerMetadata:
        """Metadata for a path no alias matched."""
        return cls()

    def __str__(self) -> str:
        layer = self.layer.value if self.layer is not None else "?"
        return f"{self.module or '?'}:{layer}"
