"""CLI entry point for Daily Bread."""

from __future__ import annotations

import asyncio
import logging
import sys
from typing import NoReturn

import click
import yaml
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from dailybread import __version__
from dailybread.catalog.books import BookCatalog, Language
from dailybread.catalog.versions import VersionCatalog, VersionData
from dailybread.config import Settings
from dailybread.errors import DailyBreadError
from dailybread.fetch.planner import plan_queries
from dailybread.fetch.source import FixtureSource
from dailybread.reader import DailyBread, GetOptions
from dailybread.reference.cleaner import clean_passage_reference
from dailybread.reference.formatter import format_passage_reference
from dailybread.reference.parser import parse_passage_references

console = Console()
settings = Settings()


def _fail(message: str) -> NoReturn:
    console.print(f"[red]Error: {escape(message)}[/red]")
    sys.exit(1)


def _active_version(
    versions: VersionCatalog, abbreviation: str | None
) -> VersionData:
    abbreviation = abbreviation or settings.default_version or versions.default
    if not abbreviation:
        _fail("No default version configured")
    try:
        return versions.find(abbreviation)
    except DailyBreadError as e:
        _fail(str(e))


@click.group()
@click.version_option(version=__version__)
@click.option(
    "--log-level",
    default="warning",
    type=click.Choice(["debug", "info", "warning", "error"], case_sensitive=False),
    help="Log level",
)
def cli(log_level: str):
    """Daily Bread - look up passages by reference."""
    logging.basicConfig(
        level=log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@cli.command()
@click.argument("passages", nargs=-1, required=True)
@click.option(
    "--fixtures",
    "-f",
    type=click.Path(exists=True, dir_okay=False),
    required=True,
    help="YAML file of range texts to read from",
)
@click.option("--bible-version", "-v", default=None, help="Version abbreviation")
@click.option("--strict", is_flag=True, help="Fail if any passage cannot be found")
@click.option("--spacing", type=int, default=None, help="Newlines between paragraphs")
@click.option(
    "--verse-numbers/--no-verse-numbers",
    "-n/-N",
    default=True,
    help="Show verse numbers in the text",
)
def read(
    passages: tuple[str, ...],
    fixtures: str,
    bible_version: str | None,
    strict: bool,
    spacing: int | None,
    verse_numbers: bool,
):
    """Read one or more passages.

    Example: dailybread read -f fixtures.yaml "John 3:16; Obadiah 1-4"
    """
    overrides: dict = {"show_verse_numbers": verse_numbers}
    if spacing is not None:
        overrides["paragraph_spacing"] = spacing

    try:
        source = FixtureSource.from_yaml(fixtures)
        reader = DailyBread(lambda version, formatting: source, settings=settings)
        if bible_version:
            reader.set_version(bible_version)
        reader.set_formatting(**overrides)
        found = asyncio.run(reader.get(" ".join(passages), GetOptions(strict=strict)))
    except (DailyBreadError, ValueError, yaml.YAMLError) as e:
        _fail(str(e))

    if not found:
        _fail("No passages found")

    for passage in found:
        console.print(f"[bold]{escape(passage.reference)}[/bold]")
        console.print()
        console.print(passage.text, markup=False, highlight=False)
        console.print()


@cli.command()
@click.argument("name", nargs=-1, required=True)
@click.option("--bible-version", "-v", default=None, help="Version abbreviation")
def book(name: tuple[str, ...], bible_version: str | None):
    """Show information on a book.

    Example: dailybread book 1 sam
    """
    versions = VersionCatalog.load(settings.versions_path)
    version = _active_version(versions, bible_version)
    books = BookCatalog.load(settings.books_path)

    query = " ".join(name)
    found = books.lookup(query, version.language, version.deuterocanon)
    if found is None:
        _fail(f"Book not found: {query}")

    table = Table(title=found.name(version.language))
    table.add_column("Property", style="cyan", no_wrap=True)
    table.add_column("Value", style="green")
    table.add_row("Abbreviation", found.abbreviation)
    table.add_row("Chapters", str(found.chapters))
    table.add_row("Testament", found.testament.value.capitalize())
    table.add_row("Canon", found.canon.value.capitalize())
    table.add_row(
        "Categories",
        ", ".join(c.value.replace("_", " ").title() for c in found.categories),
    )
    console.print(table)


@cli.command()
@click.option(
    "--language",
    "-l",
    type=click.Choice([lang.value for lang in Language]),
    default=None,
    help="Only list versions in this language",
)
def versions(language: str | None):
    """List supported versions."""
    catalog = VersionCatalog.load(settings.versions_path)

    table = Table(title="Supported Versions")
    table.add_column("Abbreviation", style="cyan", no_wrap=True)
    table.add_column("Name")
    table.add_column("Language")
    table.add_column("Deuterocanon", justify="center")

    for version in catalog.versions(Language(language) if language else None):
        table.add_row(
            version.abbreviation,
            version.name,
            version.language.value.capitalize(),
            "✓" if version.deuterocanon else "",
        )
    console.print(table)


@cli.command()
@click.argument("passages", nargs=-1, required=True)
@click.option("--bible-version", "-v", default=None, help="Version abbreviation")
@click.option(
    "--max-verse",
    type=int,
    default=settings.max_verse_number,
    show_default=True,
    help="Verse number meaning 'end of chapter'",
)
@click.option(
    "--chapters-per-query",
    type=int,
    default=settings.chapters_per_query,
    show_default=True,
    help="Maximum whole chapters per query",
)
def plan(
    passages: tuple[str, ...],
    bible_version: str | None,
    max_verse: int,
    chapters_per_query: int,
):
    """Show the range queries planned for each passage, without fetching.

    Example: dailybread plan "Isaiah 52:13-53:12"
    """
    versions = VersionCatalog.load(settings.versions_path)
    version = _active_version(versions, bible_version)
    books = BookCatalog.load(settings.books_path)

    references = parse_passage_references(" ".join(passages))
    if not references:
        _fail("No passages found")

    failed = 0
    for reference in references:
        try:
            found = books.find(reference.book, version.language, version.deuterocanon)
            cleaned = clean_passage_reference(reference, found, version.language)
            queries = plan_queries(cleaned, found, max_verse, chapters_per_query)
        except (DailyBreadError, ValueError) as e:
            console.print(f"[red]✗ {escape(reference.book)}: {escape(str(e))}[/red]")
            failed += 1
            continue

        label = escape(format_passage_reference(cleaned))
        console.print(f"[bold blue]{label}[/bold blue]")
        for query in queries:
            console.print(f"  • {escape(query)}")

    if failed:
        sys.exit(1)


if __name__ == "__main__":
    cli()
