"""Terminal reporter streaming one line per group and case."""
from __future__ import annotations

from typing import IO, Optional, Sequence

import click

from tinyspec.core.models import ERROR, FAILED, PASSED, Group
from tinyspec.core.results import CaseResult, RunSummary

from .base import Reporter


STATUS_WORDS = {
    PASSED: "Passed!",
    FAILED: "Failed!",
    ERROR: "Errored!",
}

STATUS_COLORS = {
    PASSED: "green",
    FAILED: "red",
    ERROR: "yellow",
}


class TerminalReporter(Reporter):
    """Human-readable reporter; group labels verbatim, cases as ``label: Passed!``."""

    def __init__(
        self,
        *,
        stream: Optional[IO[str]] = None,
        use_color: bool = True,
        show_summary: bool = True,
    ) -> None:
        self._stream = stream
        self._use_color = use_color
        self._show_summary = show_summary

    def on_start(self, total: int) -> None:
        pass

    def on_group(self, group: Group, depth: int) -> None:
        self._echo(group.label)

    def on_case_result(self, result: CaseResult, index: int, total: int) -> None:
        word = self._styled(STATUS_WORDS[result.status], result.status)
        self._echo(f"{result.label}: {word}")
        if result.status == ERROR:
            self._echo(f"    {result.error_type}: {result.error}")

    def on_complete(self, results: Sequence[CaseResult], summary: RunSummary) -> None:
        if not self._show_summary:
            return
        line = (
            f"Summary: total={summary.total} passed={summary.passed} "
            f"failed={summary.failed} errors={summary.errors} duration={summary.duration_s:.2f}s"
        )
        self._echo(self._styled(line, force_color="cyan"))

    def _styled(self, text: str, status: str = "", *, force_color: str | None = None) -> str:
        if not self._use_color:
            return text
        color = force_color or STATUS_COLORS.get(status)
        if color:
            return click.style(text, fg=color)
        return text

    def _echo(self, text: str) -> None:
        click.echo(text, file=self._stream)
