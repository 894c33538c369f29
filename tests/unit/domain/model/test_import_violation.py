"""Tests for domain/model/violation.py."""

import pytest

from cleanarch.domain.model.enums import ViolationRule
from cleanarch.domain.model.layer import Layer
from cleanarch.domain.model.layer_metadata import LayerMetadata
from cleanarch.domain.model.violation import ImportViolation
from tests.factories import make_meta


def make_violation(
    rule: ViolationRule = ViolationRule.LAYER_ORDER,
    imported: LayerMetadata | None = None,
) -> ImportViolation:
    return ImportViolation(
        importer_path="modA/domain/user.py",
        imported_path="modA/infra/db",
        importer=make_meta("modA", Layer.DOMAIN),
        imported=imported or make_meta("modA", Layer.INFRASTRUCTURE),
        rule=rule,
    )


class TestImportViolationMessage:
    """Tests for ImportViolation.message."""

    def test_layer_order_message(self) -> None:
        violation = make_violation()

        assert violation.message == (
            "you cannot import infrastructure layer (modA/infra/db) "
            "to domain layer (modA/domain/user.py)"
        )
        assert str(violation) == violation.message

    def test_cross_module_message_names_both_modules(self) -> None:
        violation = make_violation(
            rule=ViolationRule.CROSS_MODULE,
            imported=make_meta("modB", Layer.DOMAIN),
        )

        assert "between modB and modA modules" in violation.message
        assert "you can only import interfaces layer to infrastructure layer" in violation.message

    def test_cross_module_message_without_imported_module(self) -> None:
        violation = make_violation(
            rule=ViolationRule.CROSS_MODULE,
            imported=LayerMetadata(layer=Layer.DOMAIN),
        )

        assert "between ? and modA modules" in violation.message


class TestImportViolationInvariants:
    """FAIL-FIRST validation."""

    def test_empty_importer_path_raises(self) -> None:
        with pytest.raises(ValueError, match="importer_path"):
            ImportViolation(
                importer_path="",
                imported_path="x",
                importer=make_meta("a", Layer.DOMAIN),
                imported=make_meta("a", Layer.INFRASTRUCTURE),
                rule=ViolationRule.LAYER_ORDER,
            )

    def test_unclassified_importer_raises(self) -> None:
        with pytest.raises(ValueError, match="importer must be classified"):
            ImportViolation(
                importer_path="x.py",
                imported_path="y",
                importer=LayerMetadata.unclassified(),
                imported=make_meta("a", Layer.INFRASTRUCTURE),
                rule=ViolationRule.LAYER_ORDER,
            )

    def test_imported_without_layer_raises(self) -> None:
        with pytest.raises(ValueError, match="imported layer"):
            ImportViolation(
                importer_path="x.py",
                imported_path="y",
                importer=make_meta("a", Layer.DOMAIN),
                imported=LayerMetadata.unclassified(),
                rule=ViolationRule.CROSS_MODULE,
            )
