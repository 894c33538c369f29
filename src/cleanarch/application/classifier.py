"""Path → (module, layer) classification.

The directory enclosing the deepest layer segment is the module:

    "billing/domain/invoice.py"      → module "billing", layer DOMAIN
    "billing/infra/db/session.py"    → module "billing", layer INFRASTRUCTURE
    "domain/invoice.py"              → module None,      layer DOMAIN
    "vendor/lib/util.py"             → unclassified

Matching is exact per segment. The same rule serves file paths and
import paths, both slash-delimited.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from cleanarch.domain.model.layer_metadata import LayerMetadata

if TYPE_CHECKING:
    from collections.abc import Mapping

    from cleanarch.domain.model.layer import Layer

PATH_SEPARATOR = "/"


def classify(path: str, aliases: Mapping[str, Layer]) -> LayerMetadata:
    """Infer module and layer from path segments.

    Walks segments from the deepest to the shallowest. The first segment
    matching an alias sets the layer; the segment right above it is the
    module.

    Args:
        path: Slash-delimited file or import path
        aliases: Path segment → layer

    Returns:
        LayerMetadata (unclassified if no segment matches)
    """
    layer: Layer | None = None
    module: str | None = None

    for segment in reversed(path.split(PATH_SEPARATOR)):
        if layer is not None:
            # empty segment ("//", leading "/") means no module
            module = segment or None
            break

        layer = aliases.get(segment)

    return LayerMetadata(module=module, layer=layer)
