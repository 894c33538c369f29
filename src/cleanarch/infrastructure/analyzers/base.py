"""Base utilities for import analysis."""

from __future__ import annotations

from pathlib import Path

PACKAGE_MARKER = "__init__.py"


def compute_module_name(file_path: Path, root_path: Path) -> str:
    """Compute dotted module name of a Python file.

    Files inside a package are named from the outermost enclosing package
    (the chain of directories holding __init__.py). Files outside any
    package are named relative to root_path.

    Args:
        file_path: Path to .py file
        root_path: Discovery root

    Returns:
        Dotted module name

    Raises:
        ValueError: If file_path is outside a package and not under root_path
    """
    # Absolute, so a relative root like "." still yields real directory names
    file_path = file_path.absolute()
    parts: list[str] = [] if file_path.name == PACKAGE_MARKER else [file_path.stem]

    directory = file_path.parent
    if not (directory / PACKAGE_MARKER).is_file():
        relative = file_path.relative_to(root_path.absolute())
        return ".".join([*relative.parent.parts, *parts])

    while (directory / PACKAGE_MARKER).is_file():
        parts.insert(0, directory.name)
        if directory.parent == directory:
            break
        directory = directory.parent

    return ".".join(parts)


def resolve_relative_import(
    node_module: str | None,
    node_level: int,
    current_module: str,
    *,
    is_package: bool = False,
) -> str:
    """Resolve relative import to absolute module path.

    Args:
        node_module: Module part of import (after dots)
        node_level: Number of dots (0=absolute, 1=., 2=..)
        current_module: Current module's fully qualified name
        is_package: current_module is a package (__init__.py)

    Returns:
        Absolute module path

    Raises:
        ValueError: If relative import escapes package (FAIL-FIRST)
    """
    if node_level == 0:
        if not node_module:
            raise ValueError("absolute import must have module")
        return node_module

    parts = current_module.split(".") if current_module else []
    package_parts = parts if is_package else parts[:-1]

    # "." is the current package, each extra dot goes one package up
    if node_level - 1 >= len(package_parts):
        raise ValueError(
            f"relative import level {node_level} exceeds package depth of module "
            f"'{current_module}'"
        )

    base_parts = package_parts[: len(package_parts) - (node_level - 1)]

    if node_module:
        return ".".join([*base_parts, node_module])
    return ".".join(base_parts)


def module_to_path(module: str) -> str:
    """Convert dotted module name to slash-delimited import path."""
    return module.replace(".", "/")
