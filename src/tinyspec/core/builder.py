"""Builder collecting group/case declarations into an immutable tree."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable, List, Optional, Tuple, Union

from tinyspec.errors import DeclarationError

from .models import Body, Case, Group, Predicate, validate_label

logger = logging.getLogger(__name__)

ROOT_LABEL = ""


@dataclass
class _OpenGroup:
    label: str
    entries: List[Union[Case, Group]] = field(default_factory=list)

    def freeze(self) -> Group:
        return Group(label=self.label, entries=tuple(self.entries))


class SuiteBuilder:
    """Collects declarations without running any predicate.

    ``group`` invokes its body immediately so nested ``case``/``group`` calls
    land in the right place; predicates are only stored. Cases declared with
    no open group go to an implicit root group labelled ``""``.
    """

    def __init__(self) -> None:
        self._stack: List[_OpenGroup] = [_OpenGroup(ROOT_LABEL)]

    @property
    def depth(self) -> int:
        """Number of user groups currently open."""

        return len(self._stack) - 1

    @property
    def path(self) -> Tuple[str, ...]:
        """Labels of the open user groups, outermost first."""

        return tuple(frame.label for frame in self._stack[1:])

    def group(self, label: str, body: Body, *, on_open: Optional[Callable[[str, int], None]] = None) -> None:
        validate_label(label, kind="group")
        if not callable(body):
            raise DeclarationError(f"Body for group '{label}' is not callable")
        logger.debug("Declaring group %r at depth %d", label, self.depth)
        if on_open:
            on_open(label, self.depth)
        self._stack.append(_OpenGroup(label))
        # A body that raises leaves no trace in the tree, not even its finished cases.
        try:
            body()
        finally:
            frame = self._stack.pop()
        self._stack[-1].entries.append(frame.freeze())

    def case(self, label: str, predicate: Predicate) -> Case:
        case = Case(label=label, predicate=predicate)
        self._stack[-1].entries.append(case)
        return case

    def build(self) -> Group:
        if self.depth:
            open_label = self._stack[-1].label
            raise DeclarationError(f"Cannot build while group '{open_label}' is still open")
        return self._stack[0].freeze()

    # BDD-flavoured aliases.
    describe = group
    it = case
