"""
Output rendering and export.
"""

from .console_printer import print_results
from .json_exporter import export_to_json, results_to_json

__all__ = [
    "print_results",
    "export_to_json",
    "results_to_json",
]
