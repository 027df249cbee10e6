"""
Command-line interface for the HAML i18n extractor.

Usage:
    haml-i18n-extractor extract app/views/users/show.html.haml
    haml-i18n-extractor extract -i --mode dump app/views/users/show.html.haml
    haml-i18n-extractor check app/views/users/show.html.haml
"""

import logging
from pathlib import Path
from typing import Any, Optional

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from i18n_extractor import __version__
from i18n_extractor.core.config import Settings
from i18n_extractor.core.exceptions import ExtractorError
from i18n_extractor.core.factory import ComponentFactory
from i18n_extractor.core.logging_config import setup_logging
from i18n_extractor.extraction.finder import find_text
from i18n_extractor.extraction.normalizer import split_lines, split_whitespace

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="haml-i18n-extractor",
    help="Move hard-coded text out of HAML templates into a YAML translation catalog.",
    add_completion=False,
)
console = Console()


def version_callback(value: bool):
    if value:
        console.print(f"haml-i18n-extractor v{__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        False, "--version", "-V",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
):
    """HAML i18n extractor."""


def _build_settings(**overrides: Any) -> Settings:
    """Settings from the environment, with CLI options taking precedence."""
    try:
        settings = Settings(**{k: v for k, v in overrides.items() if v is not None})
    except ValidationError as e:
        console.print(f"[red]Error:[/] invalid option: {escape(str(e))}", style="bold")
        raise typer.Exit(2)
    settings.configure_logging()
    setup_logging(settings)
    return settings


@app.command()
def extract(
    path: Path = typer.Argument(..., help="HAML template to process"),
    interactive: bool = typer.Option(
        False, "--interactive", "-i",
        help="Confirm every replacement",
    ),
    mode: Optional[str] = typer.Option(
        None, "--mode", "-m",
        help="'overwrite' the template or 'dump' to <name>.i18n-extractor.haml",
    ),
    locale: Optional[str] = typer.Option(
        None, "--locale", "-l",
        help="Catalog locale",
    ),
    yaml_file: Optional[Path] = typer.Option(
        None, "--yaml-file", "-y",
        help="Catalog file (default: <locale_dir>/<locale>.yml)",
    ),
    root: Optional[Path] = typer.Option(
        None, "--root", "-r",
        help="Project root that relative paths resolve against",
    ),
    dry_run: bool = typer.Option(
        False, "--dry-run",
        help="Show the replacements without writing anything",
    ),
    debug: bool = typer.Option(
        False, "--debug",
        help="Log every finder decision",
    ),
):
    """Replace hard-coded text in a template with translation keys."""
    settings = _build_settings(
        interactive=interactive or None,
        output_mode=mode,
        locale=locale,
        yaml_file=yaml_file,
        debug=debug or None,
    )

    try:
        factory = ComponentFactory(settings, root=root)
        extractor = factory.create_extractor(path)
        result = extractor.run(write=not dry_run)
    except (ExtractorError, FileNotFoundError) as e:
        logger.error(f"Extraction failed for {path}: {e}")
        console.print(f"[red]Error:[/] {escape(str(e))}", style="bold")
        raise typer.Exit(1)

    table = Table(title=f"Replacements in {escape(result.path)}")
    table.add_column("Line", justify="right", style="cyan")
    table.add_column("Key", style="green")
    table.add_column("Text")
    for line_no, record in result.replacements:
        table.add_row(str(line_no), escape(record.key_name), escape(record.replaced_text))
    console.print(table)

    summary = f"{len(result.replacements)} of {result.proposed} proposed replacements applied"
    if result.aborted:
        summary += f", stopped at line {result.aborted_at}"
    console.print(summary)

    if dry_run:
        console.print("[yellow]Dry run: nothing written.[/yellow]")
    else:
        for written in result.written:
            console.print(f"[dim]wrote {escape(written)}[/dim]")


@app.command()
def check(
    path: Path = typer.Argument(..., help="HAML template to inspect"),
):
    """Validate a template and show what would be extracted from each line."""
    settings = _build_settings()
    classifier = ComponentFactory(settings).get_classifier()

    if not path.is_file():
        console.print(f"[red]Error:[/] file not found: {escape(str(path))}", style="bold")
        raise typer.Exit(1)
    text = path.read_text(encoding="utf-8")

    try:
        classifier.validate(text, str(path))
        metadata = classifier.classify(text)
        rows = []
        for line_no, raw in enumerate(split_lines(text), start=1):
            _, content = split_whitespace(raw.rstrip("\r"))
            found = find_text(content, metadata.get(line_no), line_no)
            rows.append((line_no, metadata[line_no].role.value, content, found.text if found else ""))
    except ExtractorError as e:
        console.print(f"[red]Error:[/] {escape(str(e))}", style="bold")
        raise typer.Exit(1)

    table = Table(title=escape(str(path)))
    table.add_column("Line", justify="right", style="cyan")
    table.add_column("Role", style="magenta")
    table.add_column("Content")
    table.add_column("Text", style="green")
    for line_no, role, content, found_text in rows:
        table.add_row(str(line_no), role, escape(content), escape(found_text))
    console.print(table)
    console.print(f"[green]OK[/green] {sum(1 for r in rows if r[3])} lines with translatable text")


if __name__ == "__main__":
    app()
