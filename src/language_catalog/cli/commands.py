"""
CLI Commands for the Language Table Generator

This module provides the command-line interface for generating the
reconciled ISO 639 language table.
"""

from pathlib import Path
from typing import Optional

import typer

from ..config import get_default_config
from ..parsers.base import ParserError
from ..providers.base import ProviderError
from ..providers.http import CatalogHTTPClient
from ..usecase import LanguageTableUseCase, SourceMissingError
from ..utils.logging_utils import setup_logging
from ..writer import OUTPUT_FORMATS

app = typer.Typer(
    name="language-catalog",
    help="Build a canonical ISO 639 language table from the ISO 639-2 and ISO 639-3 catalogs"
)


@app.command("generate")
def generate(
    legacy_file: Optional[Path] = typer.Option(
        None,
        "--legacy-file",
        exists=True,
        readable=True,
        help="Local ISO 639-2 code list HTML (default: download)",
    ),
    modern_file: Optional[Path] = typer.Option(
        None,
        "--modern-file",
        exists=True,
        readable=True,
        help="Local iso-639-3.tab (default: download)",
    ),
    output_dir: Optional[Path] = typer.Option(
        None, "--output-dir", "-o",
        help="Output directory (default: LANGUAGE_CATALOG_OUTPUT_DIR or ./data)"
    ),
    output_format: str = typer.Option(
        "all", "--format", "-f",
        help="Output format: csv, json or all"
    ),
    cache_dir: Optional[Path] = typer.Option(
        None, "--cache-dir",
        help="Directory for downloaded catalogs"
    ),
    force_refresh: bool = typer.Option(
        False, "--force-refresh",
        help="Download catalogs even if cached"
    ),
    no_reserved: bool = typer.Option(
        False, "--no-reserved",
        help="Do not add the qaa-qad local use entries"
    ),
    dry_run: bool = typer.Option(
        False, "--dry-run",
        help="Build the table and print a summary without writing files"
    ),
    verbose: bool = typer.Option(
        False, "--verbose", "-v",
        help="Enable verbose logging"
    ),
):
    """
    Generate the language table.

    Examples:
        language-catalog generate -o data
        language-catalog generate --legacy-file iso-639-2.html --modern-file iso-639-3.tab
    """
    config = get_default_config()
    setup_logging("DEBUG" if verbose else config.log_level)

    if output_format == "all":
        formats = OUTPUT_FORMATS
    elif output_format in OUTPUT_FORMATS:
        formats = (output_format,)
    else:
        typer.echo(f"Unsupported format: {output_format}", err=True)
        raise typer.Exit(2)

    if cache_dir:
        config.cache_dir = cache_dir
    if no_reserved:
        config.include_reserved = False

    try:
        usecase = LanguageTableUseCase(config)
        result = usecase.run(
            legacy_file=legacy_file,
            modern_file=modern_file,
            output_dir=output_dir,
            formats=formats,
            force_refresh=force_refresh,
            write=not dry_run,
        )
    except (ProviderError, SourceMissingError, ParserError) as e:
        typer.echo(f"Generation failed: {e}", err=True)
        raise typer.Exit(1)

    typer.echo("Language table generated!" if not dry_run else "DRY RUN: nothing written")
    typer.echo(f"Records: {result.total_records}")
    typer.echo(f"  ISO 639-2 records: {result.legacy_records}")
    typer.echo(f"  ISO 639-3 entries: {result.modern_entries}")
    typer.echo(f"  ISO 639-2 codes overridden: {result.overridden}")
    typer.echo(f"  Reserved entries: {result.reserved}")

    if result.output_files:
        typer.echo("\nOutput files:")
        for file in result.output_files:
            typer.echo(f"  • {file}")


@app.command("show-config")
def show_config():
    """Print the effective configuration."""
    config = get_default_config()
    for key, value in config.model_dump().items():
        typer.echo(f"{key}: {value}")


@app.command("clear-cache")
def clear_cache(
    cache_dir: Optional[Path] = typer.Option(
        None, "--cache-dir",
        help="Cache directory to clear"
    ),
):
    """Delete cached catalog downloads."""
    config = get_default_config()
    client = CatalogHTTPClient(cache_dir=cache_dir or config.cache_dir)
    removed = client.clear_cache()
    typer.echo(f"Removed {removed} cached files")


if __name__ == "__main__":
    app()
