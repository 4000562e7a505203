"""Run configuration."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional

REPORT_FORMATS = ("terminal", "json")


@dataclass(frozen=True)
class RunSettings:
    fail_fast: bool = False
    color: bool = True
    report_format: str = "terminal"
    show_summary: bool = True

    def __post_init__(self) -> None:
        if self.report_format not in REPORT_FORMATS:
            raise ValueError(
                f"Unknown report format '{self.report_format}'; expected one of {', '.join(REPORT_FORMATS)}"
            )

    @classmethod
    def from_mapping(cls, data: Optional[Mapping[str, Any]]) -> "RunSettings":
        if not data:
            return cls()
        unknown = set(data) - {"fail_fast", "color", "report_format", "show_summary"}
        if unknown:
            raise ValueError(f"Unknown setting(s): {', '.join(sorted(unknown))}")
        return cls(
            fail_fast=_flag(data, "fail_fast", False),
            color=_flag(data, "color", True),
            report_format=str(data.get("report_format", "terminal")),
            show_summary=_flag(data, "show_summary", True),
        )


def _flag(data: Mapping[str, Any], key: str, default: bool) -> bool:
    value = data.get(key, default)
    if not isinstance(value, bool):
        raise ValueError(f"Setting '{key}' must be true or false, got {value!r}")
    return value
