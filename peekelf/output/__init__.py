"""
peekelf Output Module
======================

readelf-style formatting, console display and JSON report generation.
"""

from peekelf.output.console import PeekConsoleOutput
from peekelf.output.report import PeekReportGenerator

__all__ = [
    "PeekConsoleOutput",
    "PeekReportGenerator",
]
