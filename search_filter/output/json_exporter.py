"""
JSON exporter for search results.
"""

import json
from pathlib import Path
from typing import List, Union
import logging

from ..models import SearchResult

logger = logging.getLogger(__name__)


def results_to_json(results: List[SearchResult], indent: int = 2) -> str:
    """
    Serialize results to a JSON array string.

    Args:
        results: Results to serialize
        indent: JSON indentation level

    Returns:
        JSON text
    """
    data = [r.model_dump(mode='json') for r in results]
    return json.dumps(data, indent=indent, ensure_ascii=False)


def export_to_json(
    results: List[SearchResult],
    output_path: Union[str, Path],
    indent: int = 2
) -> Path:
    """
    Export results to a JSON file.

    Args:
        results: Results to export
        output_path: Path for output file
        indent: JSON indentation level

    Returns:
        Path to exported file
    """
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    with open(output_path, 'w', encoding='utf-8') as f:
        f.write(results_to_json(results, indent=indent))

    logger.info(f"Exported JSON: {output_path}")
    return output_path
