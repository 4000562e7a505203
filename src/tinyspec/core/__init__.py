"""Core models and helpers exposed at the package level."""
from .builder import SuiteBuilder
from .models import ERROR, FAILED, PASSED, Case, Group, Predicate, classify
from .results import CaseResult, RunSummary
from .runner import SpecRunner

__all__ = [
    "Case",
    "CaseResult",
    "ERROR",
    "FAILED",
    "Group",
    "PASSED",
    "Predicate",
    "RunSummary",
    "SpecRunner",
    "SuiteBuilder",
    "classify",
]
