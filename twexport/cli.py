"""Command-line interface for exporting library strings."""

import click
from pathlib import Path
from typing import Optional, Tuple
from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.panel import Panel

from .config import Config, config
from .errors import ConfigurationError, ExportError
from .export.bundle_writer import BundleWriter
from .export.orchestrator import ExportOrchestrator
from .extraction.extractor import LibraryExtractor
from .extraction.strings_reader import StringsCacheReader
from .formatting.placeholder_rewriter import PlaceholderRewriter
from .formatting.string_keyer import string_key
from .models.export_bundle import RewriteResult

console = Console()


@click.group()
@click.version_option(version="0.1.0")
def cli():
    """Translation project export CLI."""
    pass


def _single_library(library: Tuple[str, ...]) -> str:
    if not library:
        raise click.UsageError(
            "Provide the path to a library to export translations from."
        )
    if len(library) > 1:
        raise click.UsageError(
            "Provide the path to exactly one library to export translations from."
        )
    return library[0]


def _load_settings(**overrides) -> Config:
    """Build configuration from the environment plus command-line overrides."""
    settings = Config(**{k: v for k, v in overrides.items() if v is not None})
    errors = settings.validate()
    if errors:
        raise ConfigurationError("Configuration errors: " + "; ".join(errors))
    return settings


def _read_records(library_path: str, settings: Config, skip_extract: bool):
    """Run the extractor (unless skipped) and read the resulting cache."""
    extractor = LibraryExtractor(i18n_bin=settings.i18n_bin)

    if not skip_extract:
        console.print("Extracting library strings...")
        extractor.extract(library_path)

    reader = StringsCacheReader()
    return reader.read(str(extractor.cache_path(library_path)))


def _warn_skipped(result: RewriteResult):
    console.print(f"[yellow]{escape(result.message)}[/yellow]")


@cli.command()
@click.argument("library", nargs=-1)
@click.option(
    "--as",
    "project",
    default="",
    help='Name for the project being exported. Files are written to '
    '"<projects-root>/<name>/"',
)
@click.option(
    "--browse-uri",
    default=None,
    help="Base URI for browsing files in the project being exported",
)
@click.option(
    "--i18n-bin",
    default=None,
    help="Path to the string extractor (defaults to TWEXPORT_I18N_BIN or 'i18n')",
)
@click.option(
    "--projects-root",
    type=click.Path(file_okay=False),
    default=None,
    help="Directory exported projects are written to",
)
@click.option(
    "--skip-extract",
    is_flag=True,
    help="Reuse the library's existing string cache instead of extracting",
)
def export(
    library: Tuple[str, ...],
    project: str,
    browse_uri: Optional[str],
    i18n_bin: Optional[str],
    projects_root: Optional[str],
    skip_extract: bool,
):
    """Export translation strings from a library."""
    library_path = _single_library(library)

    if not project.strip():
        raise click.UsageError(
            'Provide a project name to export strings under with "--as".'
        )

    try:
        settings = _load_settings(
            i18n_bin=i18n_bin,
            projects_root=projects_root,
            browse_uri=browse_uri,
        )
        records = _read_records(library_path, settings, skip_extract)

        orchestrator = ExportOrchestrator(
            browse_uri=settings.browse_uri,
            on_skip=_warn_skipped,
        )
        bundle, stats = orchestrator.export(
            records,
            read_callback=lambda count: console.print(f"Read {count} string(s)."),
        )

        def report_write(help_text: str, path: Path):
            console.print(f'Writing data ({help_text}) to "{escape(str(path))}"...')

        writer = BundleWriter(projects_root=settings.projects_root)
        writer.write(bundle, project, progress_callback=report_write)
    except ExportError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise click.Abort()

    if stats.skipped:
        console.print(
            f"[yellow]Skipped {stats.skipped} unsupported string(s).[/yellow]"
        )
    console.print("[green]Done.[/green]")


@cli.command()
@click.argument("library", nargs=-1)
@click.option(
    "--i18n-bin",
    default=None,
    help="Path to the string extractor (defaults to TWEXPORT_I18N_BIN or 'i18n')",
)
@click.option(
    "--skip-extract",
    is_flag=True,
    help="Reuse the library's existing string cache instead of extracting",
)
def check(library: Tuple[str, ...], i18n_bin: Optional[str], skip_extract: bool):
    """List strings that can not be exported, without writing anything.

    Exits with status 1 if any string is unsupported.
    """
    library_path = _single_library(library)

    try:
        settings = _load_settings(i18n_bin=i18n_bin)
        records = _read_records(library_path, settings, skip_extract)
    except ExportError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise click.Abort()

    _, stats = ExportOrchestrator().export(records)

    console.print(f"[green]Read:[/green] {stats.read} string(s)")

    if not stats.skipped_strings:
        console.print("[green]All strings can be exported![/green]")
        return

    table = Table(title="Unsupported strings", show_header=True)
    table.add_column("Key", style="dim", no_wrap=True)
    table.add_column("Token", justify="center")
    table.add_column("String", max_width=60)

    for result in stats.skipped_strings:
        table.add_row(
            string_key(result.source),
            escape(result.token or ""),
            escape(result.source),
        )

    console.print(table)
    raise SystemExit(1)


@cli.command()
@click.argument(
    "project_dir",
    type=click.Path(exists=True, file_okay=False),
)
def stats(project_dir: str):
    """Show statistics for an exported project directory."""
    writer = BundleWriter()
    try:
        bundle = writer.read(project_dir)
    except ExportError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise click.Abort()

    rewriter = PlaceholderRewriter()

    table = Table(title=f"Statistics for {escape(Path(project_dir).name)}")
    table.add_column("Metric", style="cyan")
    table.add_column("Value", justify="right")

    for name, data in bundle.mappings():
        file_name, _ = config.OUTPUT_FILES[name]
        table.add_row(f"{file_name} entries", str(len(data)))

    with_placeholders = sum(
        1 for value in bundle.strings.values() if rewriter.count_positional(value)
    )
    with_context = sum(1 for value in bundle.context.values() if value)

    table.add_row("With placeholders", str(with_placeholders))
    table.add_row("With usage context", str(with_context))

    console.print(table)

    if bundle.is_aligned():
        console.print(Panel("[green]All files share the same keys[/green]", title="Alignment"))
    else:
        console.print(Panel("[red]Key sets differ between files[/red]", title="Alignment"))


if __name__ == "__main__":
    cli()
