"""
Reporting Package

Text and JSON rendering of puzzle results.
"""

from .reporter import format_json, format_text, report

__all__ = ["format_text", "format_json", "report"]
