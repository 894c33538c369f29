"""Layer validator service.

Validator is the primary entry point: it classifies every discovered
file and each of its imports, then applies the layer rules.
Composition-based: source discovery and tracer are injected.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from typing import TYPE_CHECKING, Self

from cleanarch.application.classifier import classify
from cleanarch.application.rules.layer_rules import check_import
from cleanarch.domain.model.configuration import freeze_aliases
from cleanarch.domain.model.validation_result import ValidationResult
from cleanarch.domain.model.validation_stats import ValidationStats
from cleanarch.domain.ports.tracer import NullTracer

if TYPE_CHECKING:
    from cleanarch.domain.model.configuration import ValidatorConfig
    from cleanarch.domain.model.layer import Layer
    from cleanarch.domain.model.layer_metadata import LayerMetadata
    from cleanarch.domain.model.source_file import SourceFile
    from cleanarch.domain.model.violation import ImportViolation
    from cleanarch.domain.ports.source_discovery import SourceDiscoveryPort
    from cleanarch.domain.ports.tracer import TracerProtocol


class Validator:
    """Validates a source tree against the layer rules.

    Owns a classification cache (path → LayerMetadata) shared by
    importer paths and import paths. The cache is reset at the start of
    every run. Not safe for concurrent use: serialize runs or use one
    Validator per thread.

    Example:
        validator = Validator(default_aliases(), discovery=PythonSourceDiscovery())
        result = validator.validate("src/myapp", ignore_tests=True)
        if not result.passed:
            for violation in result.violations:
                print(violation)
    """

    def __init__(
        self,
        aliases: Mapping[str, Layer],
        *,
        discovery: SourceDiscoveryPort | None = None,
        tracer: TracerProtocol | None = None,
    ) -> None:
        """Initialize validator with dependencies.

        Args:
            aliases: Path segment → layer. Empty = nothing is classified.
            discovery: Source discovery adapter, required by validate()
            tracer: Diagnostic sink (default: NullTracer)

        Raises:
            TypeError: If aliases is None or maps to non-Layer values
            ValueError: If an alias is empty
        """
        if aliases is None:
            raise TypeError("aliases must not be None")

        self._aliases = freeze_aliases(aliases)
        self._discovery = discovery
        self._tracer: TracerProtocol = tracer if tracer is not None else NullTracer()
        self._metadata_cache: dict[str, LayerMetadata] = {}

    @classmethod
    def from_config(
        cls,
        config: ValidatorConfig,
        *,
        discovery: SourceDiscoveryPort | None = None,
        tracer: TracerProtocol | None = None,
    ) -> Self:
        """Create validator with aliases from config.

        Args:
            config: Validator configuration
            discovery: Source discovery adapter
            tracer: Diagnostic sink

        Returns:
            Validator using config.aliases
        """
        return cls(config.aliases, discovery=discovery, tracer=tracer)

    @property
    def aliases(self) -> Mapping[str, Layer]:
        """Read-only alias table."""
        return self._aliases

    @property
    def cache_size(self) -> int:
        """Number of cached classifications."""
        return len(self._metadata_cache)

    def clear_cache(self) -> None:
        """Drop all cached classifications."""
        self._metadata_cache.clear()

    def metadata_for(self, path: str) -> LayerMetadata:
        """Classify path, consulting the cache first.

        Args:
            path: Slash-delimited file or import path

        Returns:
            Cached or freshly computed LayerMetadata
        """
        cached = self._metadata_cache.get(path)
        if cached is not None:
            return cached

        metadata = classify(path, self._aliases)
        self._metadata_cache[path] = metadata
        self._tracer.trace("metadata.computed", path=path, metadata=str(metadata))
        return metadata

    def validate(
        self,
        root: str,
        *,
        ignore_tests: bool = False,
        ignored_imports: Sequence[str] = (),
    ) -> ValidationResult:
        """Discover sources under root and validate them.

        Args:
            root: Root directory
            ignore_tests: Skip test files
            ignored_imports: Imports containing any of these substrings are not checked

        Returns:
            ValidationResult with violations in discovery order

        Raises:
            ValueError: If no discovery adapter was injected
            DiscoveryError: If root cannot be walked or a file cannot be parsed
        """
        if self._discovery is None:
            raise ValueError(
                "validate() requires a source discovery adapter; "
                "pass discovery= or use validate_sources()"
            )

        sources = self._discovery.discover(str(root), ignore_tests=ignore_tests)
        return self.validate_sources(sources, ignored_imports=ignored_imports)

    def run(self, root: str, config: ValidatorConfig) -> ValidationResult:
        """Validate root with ignore options taken from config."""
        return self.validate(
            root,
            ignore_tests=config.ignore_tests,
            ignored_imports=config.ignored_imports,
        )

    def validate_sources(
        self,
        sources: Iterable[SourceFile],
        *,
        ignored_imports: Sequence[str] = (),
    ) -> ValidationResult:
        """Validate already discovered source files.

        Files are visited in iteration order, imports in declaration order.
        Unclassifiable files are skipped entirely. Unclassifiable imports
        are always allowed.

        Args:
            sources: Source files with their import paths
            ignored_imports: Imports containing any of these substrings are not checked

        Returns:
            ValidationResult
        """
        ignored = tuple(ignored_imports)
        for pattern in ignored:
            if not pattern:
                raise ValueError("ignored import substring must not be empty")

        self._metadata_cache.clear()

        violations: list[ImportViolation] = []
        files_checked = 0
        files_skipped = 0
        imports_checked = 0
        imports_ignored = 0

        for source in sources:
            self._tracer.trace("file.processing", path=source.path)
            importer = self.metadata_for(source.path)

            if not importer.is_classified:
                self._tracer.trace("file.skipped", path=source.path, metadata=str(importer))
                files_skipped += 1
                continue

            files_checked += 1
            for import_path in source.imports:
                if _is_ignored(import_path, ignored):
                    self._tracer.trace("import.ignored", path=source.path, imported=import_path)
                    imports_ignored += 1
                    continue

                imported = self.metadata_for(import_path)
                self._tracer.trace(
                    "import.checked",
                    path=source.path,
                    imported=import_path,
                    metadata=str(imported),
                )
                imports_checked += 1
                violations.extend(check_import(importer, imported, source.path, import_path))

        return ValidationResult(
            violations=tuple(violations),
            stats=ValidationStats(
                files_checked=files_checked,
                files_skipped=files_skipped,
                imports_checked=imports_checked,
                imports_ignored=imports_ignored,
            ),
        )


def _is_ignored(import_path: str, ignored: tuple[str, ...]) -> bool:
    """Substring match against the import path in slash or dotted form."""
    if not ignored:
        return False
    dotted = import_path.replace("/", ".")
    return any(pattern in import_path or pattern in dotted for pattern in ignored)
