"""Command line interface to inspect ``get_mrna_by_gene`` payloads."""

import sys

import click

from .config import settings
from .payload import PayloadException, dump_payload, load_payload


@click.command()
@click.argument("payload", type=click.File("r"), default="-")
@click.option(
    "--describe/--no-describe",
    default=False,
    help="Print a human readable description before the wire JSON.",
)
@click.option(
    "--indent",
    type=int,
    default=None,
    help="Indentation of the JSON output (defaults to GENOME_ANNOTATION_JSON_INDENT).",
)
def main(payload, describe: bool, indent: int | None) -> None:
    """Parse PAYLOAD (a JSON file, or stdin) and print its normalized form."""
    try:
        settings.validate()
    except ValueError as e:
        click.echo(f"Configuration Error: {e}", err=True)
        click.echo("Please check your environment variables and try again.", err=True)
        sys.exit(2)

    try:
        params = load_payload(payload.read())
    except PayloadException as e:
        click.echo(f"Error ({e.error.error_type}): {e.error.message}", err=True)
        if e.error.details:
            click.echo(e.error.details, err=True)
        sys.exit(e.error.exit_code)

    if describe:
        click.echo(params.describe())
    click.echo(
        dump_payload(
            params,
            indent=settings.json_indent if indent is None else indent,
            sort_extensions=settings.sort_extensions,
        )
    )


if __name__ == "__main__":
    main()
