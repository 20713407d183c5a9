"""
Plain enumerated console rendering of search results.
"""

from typing import List, Optional

from rich.console import Console
from rich.markup import escape

from ..models import SearchResult


def print_results(results: List[SearchResult], console: Optional[Console] = None) -> None:
    """
    Print filtered results as a numbered list.

    Args:
        results: Results to print
        console: Rich console to write to (stdout by default)
    """
    console = console or Console()

    if not results:
        console.print("\n[INFO] No results matched the filter criteria.", markup=False)
        return

    console.print(f"\nFiltered results ({len(results)}):", style="bold")
    console.rule()
    for index, result in enumerate(results, start=1):
        console.print(f"#{index}", style="bold cyan")
        fields = [
            ("Title ", result.title),
            ("URL   ", result.link),
            ("Host  ", result.display_link),
            ("Date  ", result.indexed_time.isoformat() if result.indexed_time else None),
            ("MIME  ", result.mime_type),
            ("Lang  ", result.language_code),
        ]
        for label, value in fields:
            if value is not None:
                console.print(f"{label}: {escape(value)}")
        if result.snippet is not None:
            console.print(f"Snippet:\n{escape(result.snippet)}")
        console.rule()
