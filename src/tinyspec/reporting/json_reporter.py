"""JSON reporter emitting structured run results."""
from __future__ import annotations

import datetime as dt
import json
from typing import IO, Any, Dict, Optional, Sequence

import click
from jsonschema import ValidationError, validate

from tinyspec.core.models import Group
from tinyspec.core.results import CaseResult, RunSummary
from tinyspec.errors import ReportError

from .base import Reporter
from .schema import JSON_SCHEMA_V1, SCHEMA_VERSION


class JsonReporter(Reporter):
    """Buffers results and writes one schema-validated JSON document on completion."""

    def __init__(self, *, stream: Optional[IO[str]] = None) -> None:
        self._stream = stream
        self._records: list[Dict[str, Any]] = []
        self._payload: Dict[str, Any] | None = None

    @property
    def payload(self) -> Dict[str, Any] | None:
        """Last document written, if any."""

        return self._payload

    def on_start(self, total: int) -> None:
        self._records.clear()
        self._payload = None

    def on_group(self, group: Group, depth: int) -> None:
        pass

    def on_case_result(self, result: CaseResult, index: int, total: int) -> None:
        self._records.append(_result_to_dict(result, index))

    def on_complete(self, results: Sequence[CaseResult], summary: RunSummary) -> None:
        payload = {
            "schema_version": SCHEMA_VERSION,
            "generated_at": dt.datetime.now(dt.timezone.utc).isoformat(timespec="seconds").replace("+00:00", "Z"),
            "summary": {
                "total": summary.total,
                "passed": summary.passed,
                "failed": summary.failed,
                "errors": summary.errors,
                "duration_s": summary.duration_s,
            },
            "cases": list(self._records),
        }
        try:
            validate(instance=payload, schema=JSON_SCHEMA_V1)
        except ValidationError as exc:
            raise ReportError(f"JSON report failed schema validation: {exc.message}") from exc
        try:
            click.echo(json.dumps(payload, indent=2), file=self._stream)
        except OSError as exc:  # pragma: no cover - stream protection
            raise ReportError(f"Failed to write JSON report: {exc}") from exc
        self._payload = payload


def _result_to_dict(result: CaseResult, index: int) -> Dict[str, Any]:
    record: Dict[str, Any] = {
        "index": index,
        "label": result.label,
        "groups": list(result.group_path),
        "status": result.status,
        "duration_ms": result.duration_s * 1000,
    }
    if result.error is not None:
        record["error"] = result.error
    if result.error_type is not None:
        record["error_type"] = result.error_type
    return record
