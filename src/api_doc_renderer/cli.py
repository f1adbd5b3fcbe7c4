"""Command line interface entry point."""

from __future__ import annotations

import logging
import sys

import click

from api_doc_renderer.configuration import (
    DEFAULT_CONFIG_FILENAME,
    write_placeholder_configuration,
)
from api_doc_renderer.render_execution import (
    RenderExecutionError,
    RenderRequest,
    execute_render,
)


class CliError(Exception):
    """Custom CLI error."""


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="api-doc-renderer")
def cli() -> None:
    """Render discovered web-API models into Swagger documents."""


@cli.command(name="generate-config")
@click.option(
    "--output",
    "output_path",
    required=False,
    default=DEFAULT_CONFIG_FILENAME,
    show_default=True,
    type=click.Path(path_type=str),
    help="Path to the YAML render configuration template to write",
)
def generate_config(output_path: str) -> None:
    """Generate a YAML render configuration with guidance comments."""
    try:
        resolved_output = write_placeholder_configuration(output_path)
    except (FileExistsError, OSError) as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(resolved_output))


@cli.command(name="render")
@click.option(
    "--model",
    "model_path",
    required=True,
    type=click.Path(path_type=str),
    help="Path to the YAML/JSON API model file",
)
@click.option(
    "--config",
    "config_path",
    required=False,
    type=click.Path(path_type=str),
    help="Optional YAML render configuration file",
)
@click.option(
    "--output",
    "output_path",
    required=False,
    type=click.Path(path_type=str),
    help="Path of the Swagger JSON file to write; prints to stdout when omitted",
)
@click.option("--verbose", is_flag=True, default=False, help="Log schema registration details.")
def render(model_path: str, config_path: str | None, output_path: str | None, verbose: bool) -> None:
    """Render an API model into a Swagger 2.0 document."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s", stream=sys.stderr
        )
    try:
        outcome = execute_render(
            RenderRequest(model_path=model_path, config_path=config_path, output_path=output_path)
        )
    except RenderExecutionError as exc:
        raise CliError(str(exc)) from exc
    if outcome.output_path is None:
        click.echo(outcome.content.decode("utf-8"), nl=False)
    else:
        click.echo(str(outcome.output_path))


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
        return exc.exit_code
    except click.Abort:
        click.echo("Aborted.", err=True)
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
