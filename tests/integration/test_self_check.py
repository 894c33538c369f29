"""Integration tests: full discovery → validation runs.

Includes cleanarch checking its own source tree.
"""

from pathlib import Path

import pytest

import cleanarch
from cleanarch import ViolationRule, new_validator
from cleanarch.domain.exceptions.discovery import DiscoveryError
from tests.factories import RecordingTracer, write_tree

PACKAGE_DIR = Path(cleanarch.__file__).parent


class TestSelfCheck:
    """cleanarch follows its own layering."""

    def test_package_passes(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Run from src so paths start at the package name."""
        monkeypatch.chdir(PACKAGE_DIR.parent)

        result = new_validator().validate(PACKAGE_DIR.name)

        assert result.passed, [str(v) for v in result.violations]
        assert result.stats.files_checked > 20
        assert result.stats.imports_checked > 0


class TestEndToEnd:
    """Discovery, classification and rules on a realistic tree."""

    @pytest.fixture
    def project(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
        write_tree(
            tmp_path,
            {
                "orders/domain/order.py": "from orders.infra import repo\n",
                "orders/application/place_order.py": (
                    "from orders.domain.order import Order\n"
                    "from billing.domain import invoice\n"
                ),
                "orders/interfaces/api.py": "from orders.application import place_order\n",
                "orders/infra/repo.py": (
                    "import sqlalchemy\n"
                    "from orders.domain import order\n"
                    "from billing.interfaces import client\n"
                ),
                "orders/infra/test_repo.py": "from orders.interfaces import api\n",
                "billing/interfaces/client.py": "",
                "scripts/migrate.py": "from orders.infra import repo\n",
            },
        )
        monkeypatch.chdir(tmp_path)
        return tmp_path

    def test_violations_in_discovery_order(self, project: Path) -> None:
        result = new_validator().validate(".")

        assert [(v.importer_path, v.imported_path, v.rule) for v in result.violations] == [
            (
                "orders/application/place_order.py",
                "billing/domain/invoice",
                ViolationRule.CROSS_MODULE,
            ),
            ("orders/domain/order.py", "orders/infra/repo", ViolationRule.LAYER_ORDER),
        ]

    def test_stats(self, project: Path) -> None:
        result = new_validator().validate(".", ignore_tests=True)

        assert result.stats.files_checked == 5
        assert result.stats.files_skipped == 1
        assert result.stats.imports_checked == 7

    def test_test_files_checked_unless_ignored(self, project: Path) -> None:
        result = new_validator().validate(".")

        assert result.stats.files_checked == 6

    def test_ignored_imports(self, project: Path) -> None:
        result = new_validator().validate(".", ignored_imports=["billing", "orders/infra"])

        assert result.passed
        assert result.stats.imports_ignored == 3

    def test_custom_aliases(self, project: Path) -> None:
        """With only 'infra' known, nothing outside infra is checked."""
        result = new_validator({"infra": cleanarch.Layer.INFRASTRUCTURE}).validate(".")

        assert result.passed
        assert result.stats.files_checked == 2

    def test_tracer_is_observational(self, project: Path) -> None:
        tracer = RecordingTracer()

        traced = new_validator(tracer=tracer).validate(".")

        assert traced == new_validator().validate(".")
        assert tracer.named("file.skipped") == [
            {"path": "scripts/migrate.py", "metadata": "?:?"}
        ]

    def test_missing_root(self, tmp_path: Path) -> None:
        with pytest.raises(DiscoveryError, match="does not exist"):
            new_validator().validate(str(tmp_path / "nope"))
