"""CLI entry point for openapi-to-http."""

import logging
from pathlib import Path

import click

from openapi_to_http import config
from openapi_to_http.converter import convert, write_result
from openapi_to_http.errors import ConversionError
from openapi_to_http.parser.swagger import parse_openapi
from openapi_to_http.writer import FileWriter, clear, is_empty


@click.group()
@click.option(
    "--log-level",
    default="WARNING",
    envvar="OPENAPI_TO_HTTP_LOG_LEVEL",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    help="Logging level.",
)
def main(log_level: str):
    """OpenAPI to .http: generate request templates from an OpenAPI document."""
    logging.basicConfig(level=log_level.upper(), format=config.LOG_FORMAT)


@main.command("convert")
@click.argument("doc_path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("-o", "--output", required=True, envvar="OPENAPI_TO_HTTP_OUTPUT", type=click.Path(file_okay=False, path_type=Path), help="Output directory for .http files.")
@click.option("--append", is_flag=True, default=False, help="Append to existing files instead of replacing the output directory.")
@click.option("-y", "--yes", is_flag=True, default=False, help="Clear a non-empty output directory without asking.")
@click.option("--dry-run", is_flag=True, default=False, help="Print the files that would be written.")
def convert_cmd(doc_path: Path, output: Path, append: bool, yes: bool, dry_run: bool):
    """Convert an OpenAPI document into a tree of .http files."""
    click.echo(f"Parsing {doc_path}...")
    try:
        document = parse_openapi(doc_path)
        result = convert(document)
    except ConversionError as e:
        raise click.ClickException(str(e)) from e

    click.echo(f"Found {result.endpoint_count} endpoints, {result.operation_count} operations.")
    for diagnostic in result.diagnostics:
        click.echo(f"Warning: {diagnostic}", err=True)

    if dry_run:
        for doc in result.documents:
            click.echo(f"  Would create {doc.path}")
        return

    if not append and not is_empty(output):
        if not yes and not click.confirm(f"Output folder {output} is not empty. Proceed with delete?"):
            raise click.ClickException("You have to provide an empty output folder, exiting.")
        clear(output)

    output.mkdir(parents=True, exist_ok=True)
    written = write_result(result, FileWriter(output, append=append))
    for path in written:
        click.echo(f"  Created {path}")

    click.echo(f"Generated {len(written)} files in {output}")

