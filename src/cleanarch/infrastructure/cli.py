"""Command-line entry point.

Exit status: 0 = passed, 1 = violations found, 2 = fatal error.
"""

from __future__ import annotations

import dataclasses
from collections.abc import Callable
from pathlib import Path

import click

from cleanarch import __version__
from cleanarch.application.services.validator import Validator
from cleanarch.domain.exceptions.base import CleanArchError
from cleanarch.domain.model.configuration import ValidatorConfig, build_alias_table
from cleanarch.domain.model.layer import Layer
from cleanarch.domain.ports.reporter import ReporterProtocol
from cleanarch.domain.ports.tracer import NullTracer
from cleanarch.infrastructure.config_loader import find_config, load_config
from cleanarch.infrastructure.discovery.python_sources import PythonSourceDiscovery
from cleanarch.infrastructure.logging import configure_logging
from cleanarch.infrastructure.tracing import StructlogTracer
from cleanarch.interfaces.reporters.console import ConsoleReporter
from cleanarch.interfaces.reporters.json_reporter import JSONReporter
from cleanarch.interfaces.reporters.plain_text import PlainTextReporter

EXIT_OK = 0
EXIT_VIOLATIONS = 1
EXIT_ERROR = 2

_REPORTERS: dict[str, Callable[[], ReporterProtocol]] = {
    "text": PlainTextReporter,
    "json": JSONReporter,
    "rich": ConsoleReporter,
}


@click.command()
@click.version_option(version=__version__, prog_name="cleanarch")
@click.argument("root", default=".", type=click.Path(file_okay=False, path_type=str))
@click.option("--ignore-tests", is_flag=True, help="Skip test files.")
@click.option(
    "--ignore-package",
    "ignored_imports",
    multiple=True,
    help="Do not check imports containing this substring (repeatable).",
)
@click.option("--domain", multiple=True, help="Extra directory name for the domain layer.")
@click.option(
    "--application", multiple=True, help="Extra directory name for the application layer."
)
@click.option(
    "--interfaces", multiple=True, help="Extra directory name for the interfaces layer."
)
@click.option(
    "--infrastructure", multiple=True, help="Extra directory name for the infrastructure layer."
)
@click.option(
    "-c",
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, exists=True, path_type=Path),
    default=None,
    help="pyproject.toml with a [tool.cleanarch] table (default: nearest one).",
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice(sorted(_REPORTERS)),
    default="text",
    help="Report format.",
)
@click.option("--debug", is_flag=True, help="Trace classification of every file and import.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.pass_context
def main(
    ctx: click.Context,
    root: str,
    ignore_tests: bool,
    ignored_imports: tuple[str, ...],
    domain: tuple[str, ...],
    application: tuple[str, ...],
    interfaces: tuple[str, ...],
    infrastructure: tuple[str, ...],
    config_path: Path | None,
    output_format: str,
    debug: bool,
    log_json: bool,
) -> None:
    """Check that imports under ROOT respect clean architecture layers."""
    configure_logging(verbose=debug, log_json=log_json)

    extra_aliases = {
        Layer.DOMAIN: domain,
        Layer.APPLICATION: application,
        Layer.INTERFACES: interfaces,
        Layer.INFRASTRUCTURE: infrastructure,
    }

    try:
        config = merge_options(
            _resolve_config(config_path, root),
            ignore_tests=ignore_tests,
            ignored_imports=ignored_imports,
            extra_aliases=extra_aliases,
        )
    except (CleanArchError, ValueError) as e:
        click.echo(f"error: {e}", err=True)
        ctx.exit(EXIT_ERROR)

    validator = Validator.from_config(
        config,
        discovery=PythonSourceDiscovery(),
        tracer=StructlogTracer() if debug else NullTracer(),
    )

    try:
        result = validator.run(root, config)
    except CleanArchError as e:
        click.echo(f"error: {e}", err=True)
        ctx.exit(EXIT_ERROR)

    reporter = _REPORTERS[output_format]()
    reporter.report(result)
    ctx.exit(EXIT_OK if result.passed else EXIT_VIOLATIONS)


def merge_options(
    config: ValidatorConfig,
    *,
    ignore_tests: bool,
    ignored_imports: tuple[str, ...],
    extra_aliases: dict[Layer, tuple[str, ...]],
) -> ValidatorConfig:
    """Overlay command-line options on file configuration.

    Args:
        config: Configuration from file (or defaults)
        ignore_tests: Flag value; True overrides config, False keeps it
        ignored_imports: Appended to config.ignored_imports
        extra_aliases: Layer → extra directory names, added to config.aliases

    Returns:
        New ValidatorConfig

    Raises:
        ValueError: If an extra alias is already mapped to another layer
    """
    layer_aliases: dict[Layer, list[str]] = {}
    for alias, layer in config.aliases.items():
        layer_aliases.setdefault(layer, []).append(alias)
    for layer, names in extra_aliases.items():
        layer_aliases.setdefault(layer, []).extend(names)

    aliases = build_alias_table(layer_aliases)

    return dataclasses.replace(
        config,
        aliases=aliases,
        ignore_tests=config.ignore_tests or ignore_tests,
        ignored_imports=(*config.ignored_imports, *ignored_imports),
    )


def _resolve_config(config_path: Path | None, root: str) -> ValidatorConfig:
    path = config_path
    if path is None:
        root_path = Path(root)
        path = find_config(root_path) if root_path.is_dir() else None
    if path is None:
        return ValidatorConfig()
    return load_config(path)
