"""
Infrastructure package for the qualifier flow.

Centralizes the HTTP transport to the remote service. Keep this layer focused
on I/O, decoupled from selection and orchestration logic.
"""

from qualifier.infrastructure.api import REQUEST_TIMEOUT, HttpQualifierApi, QualifierApi

__all__ = [
    "HttpQualifierApi",
    "QualifierApi",
    "REQUEST_TIMEOUT",
]
