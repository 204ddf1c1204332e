"""
Domain package for the qualifier flow.

Exports the wire models and the error taxonomy used across the selector,
store, transport and orchestrator. Keep this package free of I/O.
"""

from qualifier.domain.errors import (
    QualifierError,
    RegistrationError,
    SelectorError,
    StoreError,
    SubmissionWarning,
)
from qualifier.domain.models import (
    Artifact,
    IdentityPayload,
    RegistrationResponse,
    SubmissionPayload,
)

__all__ = [
    # Models
    "Artifact",
    "IdentityPayload",
    "RegistrationResponse",
    "SubmissionPayload",
    # Errors
    "QualifierError",
    "RegistrationError",
    "SelectorError",
    "StoreError",
    "SubmissionWarning",
]
