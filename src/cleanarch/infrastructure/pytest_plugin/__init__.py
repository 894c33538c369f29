"""pytest plugin for cleanarch.

Provides fixtures for layer checking:
    cleanarch_aliases: Alias table (override in conftest.py)
    cleanarch_validator: Validator wired to Python source discovery
    cleanarch_result: ValidationResult for the configured source root

Configuration (pytest.ini or pyproject.toml):
    cleanarch_root: Source directory to check (default: "src")
    cleanarch_ignore_tests: Skip test files (default: false)

Example:
    def test_layers(cleanarch_result):
        assert_clean_architecture(cleanarch_result)
"""

from __future__ import annotations

from typing import TYPE_CHECKING

# Register fixtures from fixtures module
from cleanarch.infrastructure.pytest_plugin.fixtures import (
    assert_clean_architecture,
    cleanarch_aliases,
    cleanarch_result,
    cleanarch_validator,
)

if TYPE_CHECKING:
    import pytest

# Export fixtures for pytest discovery
__all__ = [
    "assert_clean_architecture",
    "cleanarch_aliases",
    "cleanarch_result",
    "cleanarch_validator",
]


def pytest_addoption(parser: pytest.Parser) -> None:
    """Register ini options."""
    parser.addini("cleanarch_root", "Source directory checked by cleanarch", default="src")
    parser.addini(
        "cleanarch_ignore_tests",
        "Skip test files when checking layers",
        type="bool",
        default=False,
    )


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest plugin with markers."""
    config.addinivalue_line(
        "markers",
        "cleanarch: mark test as layer architecture test",
    )
