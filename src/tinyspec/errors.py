"""Exception types raised by tinyspec."""
from __future__ import annotations


class TinySpecError(Exception):
    """Base class for all tinyspec errors."""


class DeclarationError(TinySpecError, ValueError):
    """Raised when a group or case declaration is malformed."""


class ReportError(TinySpecError, RuntimeError):
    """Raised when a report cannot be rendered or written."""
