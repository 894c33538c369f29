"""Import legality rules.

Pure decision over (importer, imported) metadata:

- Imported layer unknown: allowed.
- Same module: imported layer must not rank above importer layer.
- Other module: only interfaces → infrastructure is allowed.
"""

from __future__ import annotations

from cleanarch.domain.model.enums import ViolationRule
from cleanarch.domain.model.layer import Layer, layer_order
from cleanarch.domain.model.layer_metadata import LayerMetadata
from cleanarch.domain.model.violation import ImportViolation


def is_allowed(importer: LayerMetadata, imported: LayerMetadata) -> bool:
    """Check whether importer may import imported.

    Args:
        importer: Classified metadata of the importing file
        imported: Metadata of the import target

    Returns:
        True if the import is legal

    Raises:
        ValueError: If importer is not classified (FAIL-FIRST)
    """
    return violated_rule(importer, imported) is None


def violated_rule(importer: LayerMetadata, imported: LayerMetadata) -> ViolationRule | None:
    """Return the rule the import breaks, or None if legal.

    Raises:
        ValueError: If importer is not classified (FAIL-FIRST)
    """
    importer_layer = importer.layer
    if importer_layer is None or importer.module is None:
        raise ValueError(f"importer must be classified, got {importer}")

    if imported.layer is None:
        return None

    if imported.module == importer.module:
        if layer_order(imported.layer) > layer_order(importer_layer):
            return ViolationRule.LAYER_ORDER
        return None

    if imported.layer is Layer.INTERFACES and importer_layer is Layer.INFRASTRUCTURE:
        return None
    return ViolationRule.CROSS_MODULE


def check_import(
    importer: LayerMetadata,
    imported: LayerMetadata,
    importer_path: str,
    imported_path: str,
) -> tuple[ImportViolation, ...]:
    """Validate one import.

    Args:
        importer: Classified metadata of the importing file
        imported: Metadata of the import target
        importer_path: Importing file, for reporting
        imported_path: Import path, for reporting

    Returns:
        Tuple of violations (empty if legal, otherwise one)
    """
    rule = violated_rule(importer, imported)
    if rule is None:
        return ()

    return (
        ImportViolation(
            importer_path=importer_path,
            imported_path=imported_path,
            importer=importer,
            imported=imported,
            rule=rule,
        ),
    )
