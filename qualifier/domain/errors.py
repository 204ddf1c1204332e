"""
Error taxonomy for the qualifier flow.

`RegistrationError`, `SelectorError` and `StoreError` abort the run.
`SubmissionWarning` is raised by the transport but caught and logged by the
orchestrator; it never escapes `run_flow`.
"""
from __future__ import annotations

from typing import Optional


class QualifierError(Exception):
    """Base class for all flow errors."""


class RegistrationError(QualifierError):
    """Registration call failed: transport, status, unparseable or empty body."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class SelectorError(QualifierError):
    """No artifact could be selected for the identifier."""


class StoreError(QualifierError):
    """The selected artifact could not be written to the output path."""


class SubmissionWarning(QualifierError):
    """Final submission failed. Non-fatal."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


__all__ = [
    "QualifierError",
    "RegistrationError",
    "SelectorError",
    "StoreError",
    "SubmissionWarning",
]
