"""Reporter lifecycle hooks shared by the runner and eager sessions."""
from __future__ import annotations

from typing import List, Sequence

from tinyspec.core.models import Group
from tinyspec.core.results import CaseResult, RunSummary


class Reporter:
    """Receives run events in declaration order: groups and case results, then one summary."""

    def on_start(self, total: int) -> None:  # pragma: no cover - interface
        raise NotImplementedError

    def on_group(self, group: Group, depth: int) -> None:  # pragma: no cover - interface
        raise NotImplementedError

    def on_case_result(self, result: CaseResult, index: int, total: int) -> None:  # pragma: no cover
        raise NotImplementedError

    def on_complete(self, results: Sequence[CaseResult], summary: RunSummary) -> None:  # pragma: no cover
        raise NotImplementedError


class ReportManager:
    """Forwards each event to every reporter, in registration order."""

    def __init__(self, reporters: Sequence[Reporter]) -> None:
        self._reporters = list(reporters)

    def start(self, total: int) -> None:
        for reporter in self._reporters:
            reporter.on_start(total)

    def enter_group(self, group: Group, depth: int) -> None:
        for reporter in self._reporters:
            reporter.on_group(group, depth)

    def handle_result(self, result: CaseResult, index: int, total: int) -> None:
        for reporter in self._reporters:
            reporter.on_case_result(result, index, total)

    def complete(self, results: Sequence[CaseResult], summary: RunSummary) -> None:
        for reporter in self._reporters:
            reporter.on_complete(results, summary)

    def reporters(self) -> List[Reporter]:
        return list(self._reporters)
