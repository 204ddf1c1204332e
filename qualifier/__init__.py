"""
Qualifier - one-shot registration, query selection and submission flow.

The flow registers a candidate identity with a remote service to obtain a
webhook and access token, picks one of two precomputed SQL queries from the
parity of the registration number, writes it to disk and submits it to the
webhook (or a configured fallback) with the token as Authorization.
"""

from __future__ import annotations

__version__ = "0.1.0"
__license__ = "MIT"

# Public API exports
from qualifier.config import Settings, get_settings
from qualifier.domain.errors import (
    QualifierError,
    RegistrationError,
    SelectorError,
    StoreError,
    SubmissionWarning,
)
from qualifier.infrastructure.api import HttpQualifierApi, QualifierApi
from qualifier.orchestrator import FlowResult, FlowState, run_flow
from qualifier.utils.logging import configure_logging, get_logger

__all__ = [
    # Version info
    "__version__",
    "__license__",
    # Configuration
    "Settings",
    "get_settings",
    # Orchestration
    "FlowResult",
    "FlowState",
    "run_flow",
    # Transport
    "HttpQualifierApi",
    "QualifierApi",
    # Errors
    "QualifierError",
    "RegistrationError",
    "SelectorError",
    "StoreError",
    "SubmissionWarning",
    # Logging
    "configure_logging",
    "get_logger",
]
