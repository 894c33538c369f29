"""Import statement analyzer."""

from __future__ import annotations

import ast

from cleanarch.infrastructure.analyzers.base import module_to_path, resolve_relative_import


class ImportAnalyzer:
    """Extracts import paths from Python AST.

    Stateless analyzer - no state between analyze() calls.
    Imports anywhere in the module are collected (function bodies,
    TYPE_CHECKING and try blocks included), in source order.

    Mapping to import paths:
        import a.b, c           → "a/b", "c"
        from a.b import x, y    → "a/b/x", "a/b/y"
        from a.b import *       → "a/b"
        from ..c import x       → resolved against the current module
    """

    def analyze(
        self,
        tree: ast.Module,
        module_name: str,
        *,
        is_package: bool = False,
    ) -> tuple[str, ...]:
        """Extract all import paths from module.

        Args:
            tree: Parsed AST module
            module_name: Dotted module name, for relative imports
            is_package: Module is a package (__init__.py)

        Returns:
            Tuple of slash-delimited import paths

        Raises:
            ValueError: If a relative import escapes its package
        """
        visitor = _ImportVisitor(module_name, is_package)
        visitor.visit(tree)
        return tuple(visitor.imports)


class _ImportVisitor(ast.NodeVisitor):
    """Collects import paths in source order."""

    def __init__(self, module_name: str, is_package: bool) -> None:
        self.module_name = module_name
        self.is_package = is_package
        self.imports: list[str] = []

    def visit_Import(self, node: ast.Import) -> None:
        """Handle: import X, import X as Y."""
        for alias in node.names:
            self.imports.append(module_to_path(alias.name))

    def visit_ImportFrom(self, node: ast.ImportFrom) -> None:
        """Handle: from X import Y, from . import Y."""
        resolved_module = resolve_relative_import(
            node.module,
            node.level,
            self.module_name,
            is_package=self.is_package,
        )

        for alias in node.names:
            target = resolved_module if alias.name == "*" else f"{resolved_module}.{alias.name}"
            self.imports.append(module_to_path(target))
