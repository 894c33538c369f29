"""pytest fixtures for layer checking.

User overrides cleanarch_aliases in their conftest.py.
"""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import TYPE_CHECKING

import pytest

from cleanarch.application.services.validator import Validator
from cleanarch.domain.exceptions.violation import ArchitectureViolationError
from cleanarch.domain.model.configuration import default_aliases
from cleanarch.infrastructure.discovery.python_sources import PythonSourceDiscovery

if TYPE_CHECKING:
    from cleanarch.domain.model.layer import Layer
    from cleanarch.domain.model.validation_result import ValidationResult

DEFAULT_ROOT = "src"


def _get_ini_value(config: pytest.Config, name: str, default: str) -> str:
    """Get ini value from pytest config with fallback.

    Args:
        config: pytest Config object
        name: ini option name
        default: default value if not set

    Returns:
        String value of ini option
    """
    value = config.getini(name)
    if value:
        return str(value)
    return default


def assert_clean_architecture(result: ValidationResult) -> None:
    """Fail with every violation listed if result did not pass.

    Raises:
        ArchitectureViolationError: If result has violations
    """
    if not result.passed:
        raise ArchitectureViolationError(result.violations)


@pytest.fixture(scope="session")
def cleanarch_aliases() -> Mapping[str, Layer]:
    """Alias table used by cleanarch_validator.

    Override in conftest.py for custom directory names.

    Returns:
        Default alias table
    """
    return default_aliases()


@pytest.fixture(scope="session")
def cleanarch_validator(cleanarch_aliases: Mapping[str, Layer]) -> Validator:
    """Validator wired to Python source discovery."""
    return Validator(cleanarch_aliases, discovery=PythonSourceDiscovery())


@pytest.fixture(scope="session")
def cleanarch_result(
    request: pytest.FixtureRequest,
    cleanarch_validator: Validator,
) -> ValidationResult:
    """Validate the configured source root.

    Reads cleanarch_root (default "src", relative to rootdir) and
    cleanarch_ignore_tests from pytest ini.

    Returns:
        ValidationResult for the source root
    """
    # rootdir exists on pytest.Config but type stubs may not include it
    root_dir = Path(str(getattr(request.config, "rootdir", ".")))
    source_path = root_dir / _get_ini_value(request.config, "cleanarch_root", DEFAULT_ROOT)

    if not source_path.is_dir():
        raise FileNotFoundError(
            f"cleanarch_root '{source_path}' does not exist. "
            f"Configure cleanarch_root in pytest.ini or pyproject.toml."
        )

    ignore_tests = bool(request.config.getini("cleanarch_ignore_tests"))
    return cleanarch_validator.validate(str(source_path), ignore_tests=ignore_tests)
