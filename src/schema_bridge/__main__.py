"""CLI entry point for Schema Bridge."""

import json
import sys
from pathlib import Path
from typing import Optional

import click

from .config import Config
from .exceptions import SchemaBridgeError
from .logging_config import setup_logging
from .schema_gen.documents import load_source_document, load_target_document
from .schema_gen.schema_converter_service import SchemaConverterService


@click.group()
@click.option(
    "--config-file", "-c",
    type=click.Path(exists=True, dir_okay=False, resolve_path=True),
    help="Path to a JSON configuration file.",
    envvar="SCHEMA_BRIDGE_CONFIG_FILE"
)
@click.option(
    "--log-level", "-l",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"], case_sensitive=False),
    default=None, # Falls back to the Config value
    help="Override the logging level (e.g., DEBUG, INFO).",
)
@click.option(
    "--log-format",
    type=click.Choice(["console", "json"], case_sensitive=False),
    default=None,
    help="Override logging format.",
)
@click.pass_context
def cli(ctx: click.Context, config_file: Optional[str], log_level: Optional[str], log_format: Optional[str]) -> None:
    """Schema Bridge - converts validation schemas to and from Gemini response schemas."""
    try:
        if config_file:
            cfg = Config.from_file(Path(config_file))
        else:
            # Environment variables (and .env file if present)
            cfg = Config()
    except Exception as e:
        click.echo(f"Error loading configuration: {e}", err=True)
        sys.exit(1)

    if log_level:
        cfg.logging.level = log_level.upper()
    if log_format:
        cfg.logging.format = log_format.lower()

    setup_logging(cfg.logging)

    ctx.ensure_object(dict)
    ctx.obj["config"] = cfg


@cli.command("to-target")
@click.argument("source_file", type=click.Path(dir_okay=False))
@click.option(
    "--response-format", "-r",
    is_flag=True,
    help="Emit the generation-config fragment (responseMimeType + responseSchema) instead of the bare schema."
)
@click.pass_context
def to_target(ctx: click.Context, source_file: str, response_format: bool) -> None:
    """Converts a source schema document (JSON) into a response schema."""
    service = SchemaConverterService(app_config=ctx.obj["config"])
    try:
        node = load_source_document(source_file)
    except SchemaBridgeError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    if response_format:
        output = service.response_format(node).to_generation_config()
    else:
        output = service.to_target_schema(node).to_payload()
    click.echo(json.dumps(output, indent=2))


@cli.command("to-source")
@click.argument("target_file", type=click.Path(dir_okay=False))
@click.pass_context
def to_source(ctx: click.Context, target_file: str) -> None:
    """Converts a response schema document (JSON) back into a source schema document."""
    service = SchemaConverterService(app_config=ctx.obj["config"])
    try:
        target = load_target_document(target_file)
    except SchemaBridgeError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    node = service.to_source_schema(target)
    click.echo(json.dumps(node.model_dump(mode="json", exclude_none=True), indent=2))


@cli.command()
def version() -> None:
    """Show version information."""
    from . import __version__
    click.echo(f"Schema Bridge v{__version__}")


@cli.command("config-show")
@click.pass_context
def config_show(ctx: click.Context) -> None:
    """Show current configuration."""
    config = ctx.obj["config"]
    click.echo(json.dumps(config.model_dump(mode="json"), indent=2))


if __name__ == "__main__":
    cli()
