"""Runner walking a built spec tree and evaluating each case once."""
from __future__ import annotations

import logging
import time
from typing import Callable, Iterator, List, Optional, Tuple, Union

from .models import ERROR, Case, Group, classify
from .results import CaseResult

logger = logging.getLogger(__name__)

GroupCallback = Callable[[Group, int], None]
ResultCallback = Callable[[CaseResult, int, int], None]


class SpecRunner:
    """Evaluates cases sequentially in declaration order."""

    def __init__(self, *, fail_fast: bool = False) -> None:
        self._fail_fast = fail_fast

    def run(
        self,
        root: Group,
        *,
        on_group: Optional[GroupCallback] = None,
        on_result: Optional[ResultCallback] = None,
    ) -> List[CaseResult]:
        results: List[CaseResult] = []
        total = root.count_cases()
        index = 0
        for depth, path, entry in _walk(root):
            if isinstance(entry, Group):
                if on_group:
                    on_group(entry, depth)
                continue
            index += 1
            result = self.evaluate(entry, path)
            results.append(result)
            if on_result:
                on_result(result, index, total)
            if self._fail_fast and not result.passed:
                logger.debug("Stopping after %r (fail_fast)", result.label)
                break
        return results

    def evaluate(self, case: Case, group_path: Tuple[str, ...] = tuple()) -> CaseResult:
        """Invoke ``case.predicate`` exactly once and classify the outcome."""

        logger.debug("Evaluating case %r", case.label)
        start = time.perf_counter()
        try:
            outcome = case.predicate()
        except Exception as exc:
            duration = time.perf_counter() - start
            logger.debug("Case %r raised %s", case.label, type(exc).__name__, exc_info=True)
            return CaseResult(
                label=case.label,
                status=ERROR,
                duration_s=duration,
                group_path=group_path,
                error=str(exc) or repr(exc),
                error_type=type(exc).__name__,
            )
        duration = time.perf_counter() - start
        return CaseResult(
            label=case.label,
            status=classify(outcome),
            duration_s=duration,
            group_path=group_path,
        )


def _walk(
    group: Group, depth: int = 0, path: Tuple[str, ...] = tuple()
) -> Iterator[Tuple[int, Tuple[str, ...], Union[Case, Group]]]:
    # The root group itself is never announced; its children sit at depth 0.
    for entry in group.entries:
        if isinstance(entry, Group):
            yield depth, path, entry
            yield from _walk(entry, depth + 1, path + (entry.label,))
        else:
            yield depth, path, entry
