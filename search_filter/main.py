"""
CLI entry point for search-filter.
"""

import click
import sys
from datetime import datetime
from typing import Iterable, List, Optional

from . import __version__
from .config import Settings, get_settings
from .core import FilteredSearch
from .models import DEFAULT_MAX_RESULTS, FilterCriteria
from .output import export_to_json, print_results, results_to_json
from .search import GoogleSearchClient, SearchClient, parse_timestamp
from .utils import (
    ConfigurationError,
    InvalidArgumentError,
    ProviderError,
    SearchFilterError,
    configure_logging,
)


class IsoDateTime(click.ParamType):
    """ISO-8601 timestamp with a UTC offset, e.g. 2024-01-01T00:00:00Z."""

    name = "datetime"

    def convert(self, value, param, ctx) -> datetime:
        if isinstance(value, datetime):
            return value
        parsed = parse_timestamp(value)
        if parsed is None:
            self.fail(
                f"{value!r} is not an ISO-8601 timestamp with a UTC offset "
                f"(e.g. 2024-01-01T00:00:00Z)",
                param,
                ctx
            )
        return parsed


def split_values(values: Iterable[str]) -> List[str]:
    """Flatten repeated and comma-separated option values."""
    items = []
    for value in values:
        items.extend(part.strip() for part in value.split(",") if part.strip())
    return items


def create_client(settings: Settings) -> SearchClient:
    """Build the search provider client."""
    return GoogleSearchClient.from_settings(settings)


def _load_settings() -> Settings:
    try:
        return get_settings()
    except ConfigurationError as e:
        click.echo(f"❌ Configuration error: {e}", err=True)
        sys.exit(1)


@click.group()
@click.version_option(version=__version__)
def cli():
    """
    Search Filter

    Queries Google Custom Search and filters the results by date,
    domain, MIME type, language and safety.
    """
    pass


@cli.command()
@click.argument('query')
@click.option('--max-results', '-n', type=click.IntRange(min=1), default=None,
              help='Number of results to fetch and keep (default from settings)')
@click.option('--from-date', type=IsoDateTime(), help='Earliest indexed time (ISO-8601)')
@click.option('--to-date', type=IsoDateTime(), help='Latest indexed time (ISO-8601)')
@click.option('--whitelist', '-w', multiple=True, help='Allowed domains (repeatable or comma-separated)')
@click.option('--blacklist', '-b', multiple=True, help='Blocked domains (repeatable or comma-separated)')
@click.option('--mime-type', '-m', multiple=True, help='Allowed MIME types, e.g. application/pdf')
@click.option('--language', '-l', multiple=True, help='Allowed language prefixes, e.g. en')
@click.option('--safe-only/--allow-unsafe', default=True, help='Keep only safe results')
@click.option('--output', '-o', 'output_format', type=click.Choice(['text', 'json']), default='text')
@click.option('--output-file', type=click.Path(dir_okay=False), help='Also export results to a JSON file')
@click.option('--log-level', type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR']), default=None)
@click.option('--log-file', type=click.Path(), help='Optional log file path')
@click.option('--json-logs', is_flag=True, help='Output logs as JSON')
def search(
    query: str,
    max_results: Optional[int],
    from_date: Optional[datetime],
    to_date: Optional[datetime],
    whitelist: tuple,
    blacklist: tuple,
    mime_type: tuple,
    language: tuple,
    safe_only: bool,
    output_format: str,
    output_file: Optional[str],
    log_level: Optional[str],
    log_file: Optional[str],
    json_logs: bool
):
    """
    Run a single filtered search.

    \b
    Examples:
        search-filter search "python packaging" -n 25
        search-filter search "climate report" -m application/pdf -l en
        search-filter search "rust async" -w github.com,docs.rs --from-date 2024-01-01T00:00:00Z
    """
    settings = _load_settings()

    level = log_level or settings.log_level
    configure_logging(
        log_level=level,
        log_file=log_file or settings.log_file,
        json_logs=json_logs or settings.json_logs
    )

    criteria = FilterCriteria(
        from_date=from_date,
        to_date=to_date,
        domain_whitelist=split_values(whitelist),
        domain_blacklist=split_values(blacklist),
        mime_types=split_values(mime_type),
        language_codes=split_values(language),
        safe_only=safe_only,
        max_results=max_results or settings.default_max_results
    )

    try:
        with create_client(settings) as client:
            results = FilteredSearch(client).run(query, criteria)

        if output_format == 'json':
            click.echo(results_to_json(results))
        else:
            print_results(results)

        if output_file:
            path = export_to_json(results, output_file)
            click.echo(f"📄 JSON exported: {path}", err=True)

    except InvalidArgumentError as e:
        click.echo(f"❌ Invalid argument: {e}", err=True)
        sys.exit(1)
    except ProviderError as e:
        click.echo(f"❌ Search failed: {e}", err=True)
        sys.exit(1)
    except KeyboardInterrupt:
        click.echo("\n⚠️  Interrupted by user.", err=True)
        sys.exit(130)


@cli.command()
@click.option('--log-level', type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR']), default=None)
@click.option('--log-file', type=click.Path(), help='Optional log file path')
def interactive(log_level: Optional[str], log_file: Optional[str]):
    """Prompt for queries and filters until 'quit'."""
    settings = _load_settings()
    configure_logging(
        log_level=log_level or settings.log_level,
        log_file=log_file or settings.log_file,
        json_logs=settings.json_logs
    )

    click.echo("=" * 60)
    click.echo(" Search Filter (interactive)")
    click.echo("=" * 60)

    with create_client(settings) as client:
        _prompt_loop(FilteredSearch(client))

    click.echo("\nGoodbye.")


def _prompt_loop(pipeline: FilteredSearch) -> None:
    """Read queries and filters until 'quit', 'exit' or end of input."""
    try:
        while True:
            query = _ask("\n> Enter search query (or 'quit' to exit)")
            if query.lower() in ("quit", "exit"):
                break
            if not query:
                click.echo("[WARN] Query must not be empty.")
                continue

            criteria = _ask_criteria()

            try:
                results = pipeline.run(query, criteria)
            except SearchFilterError as e:
                click.echo(f"[ERROR] Search failed: {e}", err=True)
                continue
            print_results(results)
    except (click.Abort, KeyboardInterrupt):
        # End of input or Ctrl-C ends the session like 'quit'
        return


def _ask(text: str) -> str:
    """Prompt for a line; blank input means skip."""
    return click.prompt(text, default="", show_default=False).strip()


def _ask_date(text: str, label: str) -> Optional[datetime]:
    raw = _ask(text)
    if not raw:
        return None
    parsed = parse_timestamp(raw)
    if parsed is None:
        click.echo(f"[WARN] Invalid date format. Ignoring {label}.")
    return parsed


def _ask_criteria() -> FilterCriteria:
    """Ask for each filter in turn and build the criteria."""
    max_results = DEFAULT_MAX_RESULTS
    raw_max = _ask(f"Max results [{DEFAULT_MAX_RESULTS}]")
    if raw_max:
        try:
            max_results = int(raw_max)
            if max_results <= 0:
                raise ValueError(raw_max)
        except ValueError:
            click.echo(f"[WARN] Invalid number. Using default {DEFAULT_MAX_RESULTS}.")
            max_results = DEFAULT_MAX_RESULTS

    from_date = _ask_date(
        "Filter by from-date (ISO-8601, e.g., 2024-01-01T00:00:00Z) [skip]", "from-date"
    )
    to_date = _ask_date("Filter by to-date (ISO-8601) [skip]", "to-date")

    whitelist = _ask("Domain whitelist (comma-separated, e.g., example.com,github.com) [skip]")
    blacklist = _ask("Domain blacklist (comma-separated) [skip]")
    mime_types = _ask("Restrict MIME types (comma-separated, e.g., application/pdf,text/html) [skip]")
    languages = _ask("Restrict languages (comma-separated, e.g., en,fa,de) [skip]")
    safe = _ask("Safe results only? [Y/n]")

    return FilterCriteria(
        from_date=from_date,
        to_date=to_date,
        domain_whitelist=split_values([whitelist]),
        domain_blacklist=split_values([blacklist]),
        mime_types=split_values([mime_types]),
        language_codes=split_values([languages]),
        safe_only=safe.lower() != "n",
        max_results=max_results
    )


def main():
    """Main entry point."""
    cli()


if __name__ == "__main__":
    main()
