"""tinyspec package initialization."""
from __future__ import annotations

import logging
import time
from typing import IO, Optional

from .core import Case, CaseResult, Group, RunSummary, SpecRunner, SuiteBuilder
from .errors import DeclarationError, ReportError, TinySpecError
from .reporting import ReportManager, build_reporter
from .session import Session, case, default_session, describe, group, it, reset_default_session
from .settings import RunSettings
from .version import __version__

__all__ = [
    "__version__",
    "Case",
    "CaseResult",
    "DeclarationError",
    "Group",
    "ReportError",
    "RunSettings",
    "RunSummary",
    "Session",
    "SpecRunner",
    "SuiteBuilder",
    "TinySpecError",
    "case",
    "default_session",
    "describe",
    "group",
    "it",
    "reset_default_session",
    "run_suite",
]

logging.getLogger(__name__).addHandler(logging.NullHandler())


def run_suite(
    root: Group,
    settings: Optional[RunSettings] = None,
    *,
    stream: Optional[IO[str]] = None,
) -> int:
    """Run a built tree with the configured reporter; returns exit code (0 success, 1 failures)."""

    settings = settings or RunSettings()
    manager = ReportManager([build_reporter(settings, stream)])
    runner = SpecRunner(fail_fast=settings.fail_fast)
    start = time.perf_counter()
    manager.start(root.count_cases())
    results = runner.run(root, on_group=manager.enter_group, on_result=manager.handle_result)
    summary = RunSummary.from_results(results, time.perf_counter() - start)
    manager.complete(results, summary)
    return summary.exit_code()
