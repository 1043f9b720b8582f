"""Command-line interface for managing Gone patterns and the miss log.

Example:
    $ gone-links add "http://example.com/deleted-page/"
    $ gone-links add "http://example.com/*/old-section/"
    $ gone-links list
    $ gone-links set-limit 100
"""

import json
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import Optional

import typer

from gone_links.config import configure_logging
from gone_links.entities import AddResult
from gone_links.errors import StoreUnavailable
from gone_links.migration import import_legacy
from gone_links.repositories import RedisEntryRepository
from gone_links.services import GoneEngine

# Paths seeded by the self-test commands, relative to the site home URL
TEST_PATHS = (
    "/test-410-deleted-page/",
    "/test-section/deleted-item/",
    "/*/test-410-wildcard/",
)

app = typer.Typer(
    name="gone-links",
    help="Manage HTTP 410 (Gone) URL patterns and logged 404s",
    no_args_is_help=True,
)


@app.callback()
def main(
    ctx: typer.Context,
    log_level: Optional[str] = typer.Option(None, "--log-level", help="Logging level, e.g. DEBUG"),
) -> None:
    """Connect to the configured entry store."""
    configure_logging(log_level)
    if ctx.obj is None:
        ctx.obj = GoneEngine.create(store=RedisEntryRepository.create())


@contextmanager
def _store_errors() -> Iterator[None]:
    try:
        yield
    except StoreUnavailable as e:
        typer.secho(f"Error: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1) from e


def _site_url(engine: GoneEngine, path: str) -> str:
    return engine.settings.home_url.rstrip("/") + path


@app.command("list")
def list_entries(ctx: typer.Context) -> None:
    """List all Gone patterns and logged misses."""
    engine: GoneEngine = ctx.obj
    with _store_errors():
        gone = engine.list_gone()
        misses = engine.list_miss()

    typer.echo("")
    typer.echo("=== Gone Entries ===")
    if not gone:
        typer.echo("No Gone entries found.")
    else:
        for entry in gone:
            suffix = " (wildcard)" if entry.is_wildcard else ""
            typer.echo(f"  {entry.key}{suffix}")
        typer.echo(f"Total: {len(gone)} entries")

    typer.echo("")
    typer.echo("=== Logged 404s ===")
    if not misses:
        typer.echo("No logged 404s found.")
    else:
        for entry in misses:
            typer.echo(f"  {entry.key}")
        typer.echo(f"Total: {len(misses)} entries")
    typer.echo("")


@app.command()
def add(
    ctx: typer.Context,
    url: str = typer.Argument(..., help="The URL to add (supports wildcards with *)"),
) -> None:
    """Add a Gone pattern."""
    engine: GoneEngine = ctx.obj
    if not engine.is_handled_url(url):
        typer.secho(
            "Warning: URL may not be served by this site, but adding anyway.",
            fg=typer.colors.YELLOW,
        )

    with _store_errors():
        result = engine.add_gone(url)

    if result is AddResult.ALREADY_EXISTS:
        typer.secho("Warning: URL already exists in the list.", fg=typer.colors.YELLOW)
    else:
        typer.secho(f"URL added: {url}", fg=typer.colors.GREEN)


@app.command()
def remove(
    ctx: typer.Context,
    url: str = typer.Argument(..., help="Exact key to remove (Gone or logged 404)"),
) -> None:
    """Remove an entry by exact key."""
    engine: GoneEngine = ctx.obj
    with _store_errors():
        deleted = engine.remove_gone(url)

    if deleted:
        typer.secho(f"Removed {deleted} entries.", fg=typer.colors.GREEN)
    else:
        typer.secho(f"Warning: no entry for {url}.", fg=typer.colors.YELLOW)


@app.command()
def promote(
    ctx: typer.Context,
    url: str = typer.Argument(..., help="Logged 404 to move to the Gone list"),
) -> None:
    """Promote a logged 404 to a Gone entry."""
    engine: GoneEngine = ctx.obj
    with _store_errors():
        promoted = engine.promote(url)

    if promoted:
        typer.secho(f"Promoted: {url}", fg=typer.colors.GREEN)
    else:
        typer.secho(f"Warning: {url} is not a logged 404.", fg=typer.colors.YELLOW)


@app.command("purge-misses")
def purge_misses(ctx: typer.Context) -> None:
    """Clear all logged 404 entries."""
    engine: GoneEngine = ctx.obj
    with _store_errors():
        deleted = engine.purge_miss()
    typer.secho(f"Purged {deleted} logged 404s.", fg=typer.colors.GREEN)


@app.command("set-limit")
def set_limit(
    ctx: typer.Context,
    max_entries: int = typer.Argument(..., min=0, help="Logged 404s to keep (0 disables logging)"),
) -> None:
    """Set the maximum number of logged 404s."""
    engine: GoneEngine = ctx.obj
    with _store_errors():
        trimmed = engine.set_max_miss_entries(max_entries)
    typer.secho(f"Limit set to {max_entries} ({trimmed} trimmed).", fg=typer.colors.GREEN)


@app.command()
def check(
    ctx: typer.Context,
    url: str = typer.Argument(..., help="Normalized, percent-decoded request URL"),
) -> None:
    """Classify a URL as if a request for it found no content.

    An unmatched URL is logged as a 404, exactly like live traffic.
    """
    engine: GoneEngine = ctx.obj
    with _store_errors():
        result = engine.classify(url)

    if result.is_gone:
        typer.secho(f"410 Gone (matched {result.witness})", fg=typer.colors.GREEN)
    else:
        typer.secho("404 Not Found", fg=typer.colors.YELLOW)


@app.command("seed-test-data")
def seed_test_data(ctx: typer.Context) -> None:
    """Seed test Gone and wildcard entries."""
    engine: GoneEngine = ctx.obj
    with _store_errors():
        for path in TEST_PATHS:
            engine.add_gone(_site_url(engine, path))
    typer.secho("Seed test data added.", fg=typer.colors.GREEN)


@app.command("clear-test-data")
def clear_test_data(ctx: typer.Context) -> None:
    """Remove the seeded test entries (does not touch other data)."""
    engine: GoneEngine = ctx.obj
    with _store_errors():
        for path in TEST_PATHS:
            engine.remove_gone(_site_url(engine, path))
    typer.secho("Seeded test data removed.", fg=typer.colors.GREEN)


@app.command("test")
def self_test(ctx: typer.Context) -> None:
    """Seed test data, list entries, then clean up."""
    typer.echo("")
    typer.echo("=== Seeding test data ===")
    seed_test_data(ctx)

    typer.echo("")
    typer.echo("=== Current entries ===")
    list_entries(ctx)

    typer.echo("=== Cleaning up test data ===")
    clear_test_data(ctx)

    typer.echo("")
    typer.secho("Test completed!", fg=typer.colors.GREEN)


@app.command("import-legacy")
def import_legacy_links(
    ctx: typer.Context,
    path: Path = typer.Argument(..., exists=True, dir_okay=False, help="JSON file with legacy links"),
    format_version: int = typer.Option(..., "--format-version", help="Legacy format version (0, 1 or 2)"),
) -> None:
    """Import links saved by an older release."""
    engine: GoneEngine = ctx.obj
    data = json.loads(path.read_text(encoding="utf-8"))

    try:
        with _store_errors():
            results = import_legacy(engine, data, format_version)
    except ValueError as e:
        typer.secho(f"Error: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=2) from e

    typer.secho(
        f"Imported {results[AddResult.INSERTED]} links "
        f"({results[AddResult.ALREADY_EXISTS]} already present).",
        fg=typer.colors.GREEN,
    )


if __name__ == "__main__":
    app()
