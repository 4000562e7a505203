"""Eager ``describe``/``it`` API: every case runs as soon as it is declared.

Usage::

    from tinyspec import describe, it

    describe("fizzbuzz", lambda: (
        it("returns Fizz for 3", lambda: fizzbuzz(3) == "Fizz"),
        it("returns Buzz for 5", lambda: fizzbuzz(5) == "Buzz"),
    ))

prints::

    fizzbuzz
    returns Fizz for 3: Passed!
    returns Buzz for 5: Passed!
"""
from __future__ import annotations

import logging
import time
from typing import IO, List, Optional

from tinyspec.core.builder import SuiteBuilder
from tinyspec.core.models import Body, Group, Predicate
from tinyspec.core.results import CaseResult, RunSummary
from tinyspec.core.runner import SpecRunner
from tinyspec.reporting import Reporter, build_reporter
from tinyspec.settings import RunSettings

logger = logging.getLogger(__name__)


class Session:
    """Interleaves declaration, evaluation and reporting.

    ``settings.fail_fast`` has no effect here: a case is already reported by
    the time the next one is declared. Use :func:`tinyspec.run_suite` for it.
    """

    def __init__(
        self,
        *,
        settings: Optional[RunSettings] = None,
        reporter: Optional[Reporter] = None,
        stream: Optional[IO[str]] = None,
    ) -> None:
        self._settings = settings or RunSettings()
        self._reporter = reporter or build_reporter(self._settings, stream)
        self._builder = SuiteBuilder()
        self._runner = SpecRunner()
        self._results: List[CaseResult] = []
        self._start_time = time.perf_counter()
        self._finished = False
        self._reporter.on_start(0)

    @property
    def results(self) -> List[CaseResult]:
        return list(self._results)

    def describe(self, label: str, body: Body) -> None:
        """Announce ``label`` and run ``body`` right away."""

        self._builder.group(label, body, on_open=self._announce)

    def it(self, label: str, predicate: Predicate) -> CaseResult:
        """Register ``predicate`` in the open group, evaluate it once and report."""

        case = self._builder.case(label, predicate)
        result = self._runner.evaluate(case, self._builder.path)
        self._results.append(result)
        index = len(self._results)
        self._reporter.on_case_result(result, index, index)
        return result

    group = describe
    case = it

    def tree(self) -> Group:
        """Declarations recorded so far.

        A group whose body raised is left out, although the cases it ran
        before raising stay in :attr:`results` and were already reported.
        """

        return self._builder.build()

    def summary(self) -> RunSummary:
        return RunSummary.from_results(self._results, time.perf_counter() - self._start_time)

    def finish(self) -> int:
        """Close the run and return a process exit code (0 when all passed)."""

        summary = self.summary()
        if not self._finished:
            self._reporter.on_complete(self.results, summary)
            self._finished = True
        else:
            logger.debug("Session already finished; summary not reported again")
        return summary.exit_code()

    def _announce(self, label: str, depth: int) -> None:
        self._reporter.on_group(Group(label=label), depth)


_default_session: Optional[Session] = None


def default_session() -> Session:
    """Process-scoped session used by the module-level helpers."""

    global _default_session
    if _default_session is None:
        _default_session = Session(settings=RunSettings(show_summary=False))
    return _default_session


def reset_default_session(session: Optional[Session] = None) -> Session:
    """Replace the process-scoped session, returning the new one."""

    global _default_session
    _default_session = session or Session(settings=RunSettings(show_summary=False))
    return _default_session


def describe(label: str, body: Body) -> None:
    default_session().describe(label, body)


def it(label: str, predicate: Predicate) -> CaseResult:
    return default_session().it(label, predicate)


group = describe
case = it
