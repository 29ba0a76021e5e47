"""Command line interface entry point."""

from __future__ import annotations

import logging
import sys

import click

from gschema_builder.compilation_pipeline import (
    CompilationError,
    CompilationRequest,
    compile_schema_directory,
)
from gschema_builder.configuration import ConfigurationError
from gschema_builder.external_tools import ExternalToolError, MissingDependencyError
from gschema_builder.schema_definitions import DefinitionError
from gschema_builder.schema_sources import SchemaSourceError
from gschema_builder.type_signatures import GrammarError
from gschema_builder.variant_literals import LiteralError

_FAILURES = (
    CompilationError,
    ConfigurationError,
    DefinitionError,
    ExternalToolError,
    GrammarError,
    LiteralError,
    MissingDependencyError,
    SchemaSourceError,
    OSError,
)


class CliError(Exception):
    """Custom CLI error."""


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="gsettings-schema-builder")
@click.argument("source_dir", required=False, type=click.Path(path_type=str))
@click.option(
    "--targetdir",
    "target_dir",
    required=False,
    type=click.Path(path_type=str),
    help="Directory for the generated .gschema.xml files (defaults to the working directory)",
)
@click.option(
    "--compile",
    "compile_cache",
    is_flag=True,
    default=False,
    help="Run glib-compile-schemas on the target directory afterwards.",
)
@click.option("-v", "--verbose", is_flag=True, default=False, help="Log progress to stderr.")
def cli(source_dir: str | None, target_dir: str | None, compile_cache: bool, verbose: bool) -> None:
    """Generate GSettings schema XML from the schema sources in SOURCE_DIR."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")
    try:
        outcome = compile_schema_directory(
            CompilationRequest(
                source_dir=source_dir or "",
                target_dir=target_dir,
                compile=compile_cache,
            )
        )
    except _FAILURES as exc:
        raise CliError(str(exc)) from exc
    for path in outcome.written_paths:
        click.echo(str(path))


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for console_scripts wiring."""
    argv = argv if argv is not None else sys.argv[1:]
    try:
        cli.main(args=list(argv), standalone_mode=False)
    except CliError as exc:
        click.echo(str(exc), err=True)
        return 1
    except click.ClickException as exc:
        exc.show()
        return 1
    except click.Abort:
        click.echo("Aborted.", err=True)
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
