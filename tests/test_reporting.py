from __future__ import annotations

import io
import json

import click
import pytest
from jsonschema import validate

from tinyspec import ReportError, RunSettings, SuiteBuilder, run_suite
from tinyspec.core.models import Group
from tinyspec.core.results import CaseResult, RunSummary
from tinyspec.reporting import JsonReporter, ReportManager, TerminalReporter, build_reporter
from tinyspec.reporting.schema import JSON_SCHEMA_V1, SCHEMA_VERSION


def _mixed_tree() -> Group:
    builder = SuiteBuilder()

    def body() -> None:
        builder.it("passes", lambda: True)
        builder.it("fails", lambda: 0)
        builder.it("errors", lambda: int("x"))

    builder.describe("mixed", body)
    return builder.build()


def test_terminal_reporter_renders_statuses() -> None:
    stream = io.StringIO()
    reporter = TerminalReporter(stream=stream, use_color=False)
    reporter.on_group(Group(label="numbers"), 0)
    reporter.on_case_result(CaseResult(label="one", status="passed", duration_s=0.0), 1, 2)
    reporter.on_case_result(
        CaseResult(label="two", status="error", duration_s=0.0, error="boom", error_type="RuntimeError"), 2, 2
    )
    reporter.on_complete([], RunSummary(total=2, passed=1, failed=0, errors=1, duration_s=0.5))
    assert stream.getvalue().splitlines() == [
        "numbers",
        "one: Passed!",
        "two: Errored!",
        "    RuntimeError: boom",
        "Summary: total=2 passed=1 failed=0 errors=1 duration=0.50s",
    ]


def test_terminal_reporter_styles_status_words() -> None:
    reporter = TerminalReporter(use_color=True)
    assert reporter._styled("Passed!", "passed") == click.style("Passed!", fg="green")
    assert reporter._styled("Failed!", "failed") == click.style("Failed!", fg="red")
    assert TerminalReporter(use_color=False)._styled("Failed!", "failed") == "Failed!"


def test_json_reporter_writes_valid_document() -> None:
    stream = io.StringIO()
    exit_code = run_suite(_mixed_tree(), RunSettings(report_format="json"), stream=stream)
    assert exit_code == 1
    payload = json.loads(stream.getvalue())
    validate(instance=payload, schema=JSON_SCHEMA_V1)
    assert payload["schema_version"] == SCHEMA_VERSION
    assert payload["generated_at"].endswith("Z")
    assert payload["summary"]["total"] == 3
    assert payload["summary"]["errors"] == 1
    assert [case["label"] for case in payload["cases"]] == ["passes", "fails", "errors"]
    assert [case["index"] for case in payload["cases"]] == [1, 2, 3]
    assert payload["cases"][0]["groups"] == ["mixed"]
    assert payload["cases"][2]["error_type"] == "ValueError"
    assert "error" not in payload["cases"][0]


def test_json_reporter_rejects_invalid_records() -> None:
    reporter = JsonReporter(stream=io.StringIO())
    reporter.on_start(1)
    reporter.on_case_result(CaseResult(label="odd", status="skipped", duration_s=0.0), 1, 1)
    with pytest.raises(ReportError, match="schema validation"):
        reporter.on_complete([], RunSummary(total=1, passed=0, failed=0, errors=0))
    assert reporter.payload is None


def test_report_manager_fans_out() -> None:
    first, second = io.StringIO(), io.StringIO()
    manager = ReportManager(
        [
            TerminalReporter(stream=first, use_color=False, show_summary=False),
            TerminalReporter(stream=second, use_color=False, show_summary=False),
        ]
    )
    manager.enter_group(Group(label="g"), 0)
    manager.handle_result(CaseResult(label="c", status="failed", duration_s=0.0), 1, 1)
    manager.complete([], RunSummary(total=1, passed=0, failed=1, errors=0))
    assert first.getvalue() == second.getvalue() == "g\nc: Failed!\n"
    assert len(manager.reporters()) == 2


def test_build_reporter_selects_by_format() -> None:
    assert isinstance(build_reporter(RunSettings()), TerminalReporter)
    assert isinstance(build_reporter(RunSettings(report_format="json")), JsonReporter)


def test_schema_status_enum_matches_runner_statuses() -> None:
    status_schema = JSON_SCHEMA_V1["properties"]["cases"]["items"]["properties"]["status"]
    assert status_schema["enum"] == ["passed", "failed", "error"]
