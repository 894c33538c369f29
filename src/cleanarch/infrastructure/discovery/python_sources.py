"""Python source discovery adapter.

Implements SourceDiscoveryPort: walks a directory tree in lexical
order and extracts imports from each .py file with the ast module.
"""

from __future__ import annotations

import ast
from pathlib import Path
from typing import TYPE_CHECKING

from cleanarch.domain.exceptions.discovery import DiscoveryError, ParsingError
from cleanarch.domain.model.source_file import SourceFile
from cleanarch.infrastructure.analyzers.base import PACKAGE_MARKER, compute_module_name
from cleanarch.infrastructure.analyzers.import_analyzer import ImportAnalyzer

if TYPE_CHECKING:
    from collections.abc import Iterator

SOURCE_SUFFIX = ".py"

# Vendored / third-party / generated subtrees
DEFAULT_EXCLUDED_DIRS: frozenset[str] = frozenset(
    {"vendor", "_vendor", "site-packages", "__pycache__"}
)


def is_test_file(name: str) -> bool:
    """Check if file name follows pytest test-file conventions."""
    return name.startswith("test_") or name.endswith("_test.py") or name == "conftest.py"


class PythonSourceDiscovery:
    """Discovers Python sources and their imports.

    Skips hidden entries (dot-prefixed), excluded directories and
    symlinked directories. Directory entries are visited in lexical
    order so discovery order is reproducible.

    FAIL-FIRST: any unreadable directory or unparsable file aborts the
    whole discovery with DiscoveryError / ParsingError.
    """

    def __init__(self, excluded_dirs: frozenset[str] = DEFAULT_EXCLUDED_DIRS) -> None:
        """Initialize discovery.

        Args:
            excluded_dirs: Directory names never descended into
        """
        if excluded_dirs is None:
            raise TypeError("excluded_dirs must not be None")

        self._excluded_dirs = frozenset(excluded_dirs)
        self._import_analyzer = ImportAnalyzer()

    def discover(self, root: str, *, ignore_tests: bool = False) -> Iterator[SourceFile]:
        """Yield source files under root.

        Args:
            root: Root directory
            ignore_tests: Skip test files (test_*.py, *_test.py, conftest.py)

        Yields:
            SourceFile per .py file, in lexical walk order

        Raises:
            DiscoveryError: If root is missing, not a directory, or unreadable
            ParsingError: If a file cannot be read or parsed
        """
        root_path = Path(root)

        if not root_path.exists():
            raise DiscoveryError(str(root), "does not exist")
        if not root_path.is_dir():
            raise DiscoveryError(str(root), "not a directory")

        yield from self._walk(root_path, root_path, ignore_tests)

    def parse_file(self, path: Path, root: Path) -> SourceFile:
        """Parse single Python file for its imports.

        Args:
            path: Path to .py file
            root: Discovery root, for naming modules outside packages

        Returns:
            SourceFile with slash-delimited import paths

        Raises:
            ParsingError: If file cannot be read or parsed
        """
        # Read file - FAIL-FIRST on file errors
        try:
            source = path.read_bytes()
        except FileNotFoundError as e:
            raise ParsingError(path.as_posix(), "file not found") from e
        except PermissionError as e:
            raise ParsingError(path.as_posix(), "permission denied") from e
        except OSError as e:
            raise ParsingError(path.as_posix(), f"cannot read: {e}") from e

        # Parse AST - FAIL-FIRST on syntax errors
        try:
            tree = ast.parse(source, filename=str(path))
        except SyntaxError as e:
            raise ParsingError(path.as_posix(), f"syntax error: {e}") from e
        except ValueError as e:
            # null bytes, undecodable source
            raise ParsingError(path.as_posix(), f"invalid source: {e}") from e

        try:
            module_name = compute_module_name(path, root)
            imports = self._import_analyzer.analyze(
                tree,
                module_name,
                is_package=path.name == PACKAGE_MARKER,
            )
        except ValueError as e:
            raise ParsingError(path.as_posix(), str(e)) from e

        return SourceFile(path=path.as_posix(), imports=imports)

    def _walk(self, directory: Path, root: Path, ignore_tests: bool) -> Iterator[SourceFile]:
        try:
            entries = sorted(directory.iterdir(), key=lambda p: p.name)
        except OSError as e:
            raise DiscoveryError(directory.as_posix(), f"cannot list directory: {e}") from e

        for entry in entries:
            if entry.name.startswith("."):
                continue

            if entry.is_dir():
                if entry.is_symlink() or entry.name in self._excluded_dirs:
                    continue
                yield from self._walk(entry, root, ignore_tests)
                continue

            if not entry.name.endswith(SOURCE_SUFFIX) or not entry.is_file():
                continue

            if ignore_tests and is_test_file(entry.name):
                continue

            yield self.parse_file(entry, root)
