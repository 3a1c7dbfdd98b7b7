"""CLI entry point for swamd."""

import logging
from pathlib import Path

import click

from swamd.config import DEFAULT_OUTPUT, load_settings
from swamd.errors import ConfigError, OutputWriteError
from swamd.parser.comments import LANGUAGES
from swamd.pipeline import run


@click.command()
@click.option("-p", "--path", default=None, help="Directory (or single file) to scan for annotated sources.  [default: .]")
@click.option("-o", "--output", default=None, help=f"Markdown file to write API specifications to.  [default: {DEFAULT_OUTPUT}]")
@click.option("-l", "--lang", default=None, type=click.Choice(sorted(LANGUAGES)), help="Source language to scan.  [default: go]")
@click.option("-c", "--config", "config_path", default=None, type=click.Path(exists=True, dir_okay=False, path_type=Path), help="YAML settings file.")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
def main(path: str | None, output: str | None, lang: str | None, config_path: Path | None, verbose: bool):
    """Render swag-style API annotations found in source comments as markdown tables."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        settings = load_settings(config_path)
    except ConfigError as e:
        raise click.BadParameter(str(e), param_hint="--config")

    overrides = {k: v for k, v in (("path", path), ("output", output), ("lang", lang)) if v is not None}
    settings = settings.model_copy(update=overrides)

    try:
        run(settings)
    except (OSError, OutputWriteError) as e:
        click.echo(f"Error: {e}")
