"""Core dataclasses describing a declared spec tree."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Iterator, Tuple, Union

from tinyspec.errors import DeclarationError


Predicate = Callable[[], Any]  # Zero-argument check; truthy return means pass.
Body = Callable[[], None]

PASSED = "passed"
FAILED = "failed"
ERROR = "error"


@dataclass(frozen=True)
class Case:
    """A single named check."""

    label: str
    predicate: Predicate

    def __post_init__(self) -> None:
        validate_label(self.label, kind="case")
        if not callable(self.predicate):
            raise DeclarationError(f"Predicate for case '{self.label}' is not callable")


@dataclass(frozen=True)
class Group:
    """A named, ordered collection of cases and nested groups."""

    label: str
    entries: Tuple[Union[Case, "Group"], ...] = field(default_factory=tuple)

    @property
    def cases(self) -> Tuple[Case, ...]:
        return tuple(entry for entry in self.entries if isinstance(entry, Case))

    @property
    def groups(self) -> Tuple["Group", ...]:
        return tuple(entry for entry in self.entries if isinstance(entry, Group))

    def walk_cases(self) -> Iterator[Case]:
        """Yield every case below this group in declaration order."""

        for entry in self.entries:
            if isinstance(entry, Group):
                yield from entry.walk_cases()
            else:
                yield entry

    def count_cases(self) -> int:
        return sum(1 for _ in self.walk_cases())


def validate_label(label: Any, *, kind: str) -> str:
    if not isinstance(label, str):
        raise DeclarationError(f"{kind.capitalize()} label must be a string, got {type(label).__name__}")
    return label


def classify(value: Any) -> str:
    """Map a predicate's return value onto a status."""

    return PASSED if value else FAILED
