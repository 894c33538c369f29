"""Tests for application/rules/layer_rules.py."""

import pytest

from cleanarch.application.rules.layer_rules import check_import, is_allowed, violated_rule
from cleanarch.domain.model.enums import ViolationRule
from cleanarch.domain.model.layer import Layer, layer_order
from cleanarch.domain.model.layer_metadata import LayerMetadata
from tests.factories import make_meta

ALL_PAIRS = [(importer, imported) for importer in Layer for imported in Layer]


class TestSameModule:
    """Intra-module ordering."""

    @pytest.mark.parametrize(("importer_layer", "imported_layer"), ALL_PAIRS)
    def test_order_decides(self, importer_layer: Layer, imported_layer: Layer) -> None:
        importer = make_meta("modA", importer_layer)
        imported = make_meta("modA", imported_layer)

        expected = layer_order(imported_layer) <= layer_order(importer_layer)

        assert is_allowed(importer, imported) is expected

    def test_same_layer_allowed(self) -> None:
        for layer in Layer:
            assert is_allowed(make_meta("modA", layer), make_meta("modA", layer))

    def test_domain_importing_infrastructure(self) -> None:
        rule = violated_rule(
            make_meta("modA", Layer.DOMAIN), make_meta("modA", Layer.INFRASTRUCTURE)
        )

        assert rule is ViolationRule.LAYER_ORDER

    def test_infrastructure_importing_domain(self) -> None:
        assert is_allowed(make_meta("modA", Layer.INFRASTRUCTURE), make_meta("modA", Layer.DOMAIN))


class TestCrossModule:
    """Only interfaces → infrastructure crosses modules."""

    @pytest.mark.parametrize(("importer_layer", "imported_layer"), ALL_PAIRS)
    def test_single_exception(self, importer_layer: Layer, imported_layer: Layer) -> None:
        importer = make_meta("modA", importer_layer)
        imported = make_meta("modB", imported_layer)

        expected = imported_layer is Layer.INTERFACES and importer_layer is Layer.INFRASTRUCTURE

        assert is_allowed(importer, imported) is expected

    def test_violation_rule(self) -> None:
        rule = violated_rule(
            make_meta("modA", Layer.INFRASTRUCTURE), make_meta("modB", Layer.DOMAIN)
        )

        assert rule is ViolationRule.CROSS_MODULE

    def test_same_layer_across_modules_is_violation(self) -> None:
        rule = violated_rule(
            make_meta("modA", Layer.INTERFACES), make_meta("modB", Layer.INTERFACES)
        )

        assert rule is ViolationRule.CROSS_MODULE

    def test_imported_without_module_is_cross_module(self) -> None:
        """Import path starting with a layer segment has no module."""
        rule = violated_rule(
            make_meta("modA", Layer.INFRASTRUCTURE), LayerMetadata(layer=Layer.DOMAIN)
        )

        assert rule is ViolationRule.CROSS_MODULE


class TestUnclassified:
    """Unclassifiable imports are always allowed."""

    @pytest.mark.parametrize("importer_layer", list(Layer))
    def test_unclassified_import_allowed(self, importer_layer: Layer) -> None:
        assert is_allowed(make_meta("modA", importer_layer), LayerMetadata.unclassified())

    def test_unclassified_importer_raises(self) -> None:
        with pytest.raises(ValueError, match="importer must be classified"):
            violated_rule(LayerMetadata.unclassified(), make_meta("modA", Layer.DOMAIN))

    def test_importer_without_module_raises(self) -> None:
        with pytest.raises(ValueError, match="importer must be classified"):
            violated_rule(LayerMetadata(layer=Layer.DOMAIN), make_meta("modA", Layer.DOMAIN))


class TestCheckImport:
    """Tests for check_import()."""

    def test_legal_import_returns_empty(self) -> None:
        result = check_import(
            make_meta("modA", Layer.INFRASTRUCTURE),
            make_meta("modA", Layer.DOMAIN),
            "modA/infra/db.py",
            "modA/domain/user",
        )

        assert result == ()

    def test_violation_carries_paths_and_metadata(self) -> None:
        importer = make_meta("modA", Layer.DOMAIN)
        imported = make_meta("modA", Layer.INFRASTRUCTURE)

        (violation,) = check_import(importer, imported, "modA/domain/user.py", "modA/infra/db")

        assert violation.importer_path == "modA/domain/user.py"
        assert violation.imported_path == "modA/infra/db"
        assert violation.importer == importer
        assert violation.imported == imported
        assert violation.rule is ViolationRule.LAYER_ORDER
