"""Result data structures produced by the runner."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

from .models import ERROR, FAILED, PASSED


@dataclass
class CaseResult:
    """Outcome of evaluating a single case."""

    label: str
    status: str
    duration_s: float
    group_path: Tuple[str, ...] = tuple()
    error: Optional[str] = None
    error_type: Optional[str] = None

    @property
    def passed(self) -> bool:
        return self.status == PASSED

    def identifier(self) -> str:
        return " / ".join(part for part in (*self.group_path, self.label) if part)


@dataclass(frozen=True)
class RunSummary:
    total: int
    passed: int
    failed: int
    errors: int
    duration_s: float = 0.0

    @classmethod
    def from_results(cls, results: Sequence[CaseResult], duration_s: float = 0.0) -> "RunSummary":
        return cls(
            total=len(results),
            passed=sum(1 for result in results if result.status == PASSED),
            failed=sum(1 for result in results if result.status == FAILED),
            errors=sum(1 for result in results if result.status == ERROR),
            duration_s=duration_s,
        )

    @property
    def ok(self) -> bool:
        return self.passed == self.total

    def exit_code(self) -> int:
        return 0 if self.ok else 1
