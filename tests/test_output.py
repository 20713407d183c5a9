"""Console rendering and JSON export."""

from __future__ import annotations

import io
import json

import pytest
from rich.console import Console

from helpers import make_result
from search_filter.output import export_to_json, print_results, results_to_json

pytestmark = pytest.mark.unit


def _render(results) -> str:
    buffer = io.StringIO()
    print_results(results, console=Console(file=buffer, width=200))
    return buffer.getvalue()


def test_empty_results_message() -> None:
    assert "No results matched the filter criteria." in _render([])


def test_results_are_enumerated_with_present_fields(utc) -> None:
    results = [
        make_result(1, indexed_time=utc(2024, 2, 3)),
        make_result(2, mime_type=None, language_code=None, snippet=None),
    ]

    text = _render(results)

    assert "Filtered results (2):" in text
    assert "#1" in text and "#2" in text
    assert "URL   : https://example.com/page/1" in text
    assert "Date  : 2024-02-03T00:00:00+00:00" in text
    assert text.count("MIME  :") == 1
    assert text.count("Lang  :") == 1
    assert text.count("Snippet:") == 1


def test_markup_in_titles_is_printed_literally() -> None:
    text = _render([make_result(1, title="[bold]Tricky[/bold]")])

    assert "[bold]Tricky[/bold]" in text


def test_results_to_json(utc) -> None:
    results = [make_result(1, indexed_time=utc(2024, 1, 1)), make_result(2)]

    data = json.loads(results_to_json(results))

    assert [d["link"] for d in data] == [r.link for r in results]
    assert data[0]["indexed_time"] == "2024-01-01T00:00:00Z"
    assert data[1]["indexed_time"] is None


def test_export_to_json_creates_parent_dirs(tmp_path) -> None:
    path = export_to_json([make_result(1)], tmp_path / "out" / "results.json")

    assert path.exists()
    assert json.loads(path.read_text(encoding="utf-8"))[0]["title"] == "Result 1"
