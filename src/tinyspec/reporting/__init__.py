"""Reporting exports."""
from typing import IO, Optional

from tinyspec.settings import RunSettings

from .base import ReportManager, Reporter
from .json_reporter import JsonReporter
from .terminal import TerminalReporter

__all__ = [
    "ReportManager",
    "Reporter",
    "JsonReporter",
    "TerminalReporter",
    "build_reporter",
]


def build_reporter(settings: RunSettings, stream: Optional[IO[str]] = None) -> Reporter:
    """Return the reporter selected by ``settings.report_format``."""

    if settings.report_format == "json":
        return JsonReporter(stream=stream)
    return TerminalReporter(stream=stream, use_color=settings.color, show_summary=settings.show_summary)
