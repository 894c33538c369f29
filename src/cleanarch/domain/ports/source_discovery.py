"""Source discovery port.

Walks a root directory and yields source files with their imports.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from collections.abc import Iterator

    from cleanarch.domain.model.source_file import SourceFile


class SourceDiscoveryPort(Protocol):
    """Contract for source discovery adapters.

    Implementations must yield files in a deterministic order and
    raise DiscoveryError (or ParsingError) on any walk or parse failure.
    """

    def discover(self, root: str, *, ignore_tests: bool = False) -> Iterator[SourceFile]:
        """Yield source files under root.

        Args:
            root: Root directory
            ignore_tests: Skip test files

        Yields:
            SourceFile per recognized source file, in discovery order

        Raises:
            DiscoveryError: If root cannot be walked or a file cannot be parsed
        """
        ...
