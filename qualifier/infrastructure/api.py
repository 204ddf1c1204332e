"""
HTTP transport for the two remote calls of the qualifier flow.

`QualifierApi` is the narrow capability the orchestrator depends on, so the
flow can be exercised against an in-process double. `HttpQualifierApi` is the
real implementation on top of a `requests.Session`.

Usage:
    with HttpQualifierApi(timeout=30) as api:
        reg = api.register("http://host/hiring/generateWebhook", identity)
        body = api.submit(reg.submission_target(fallback), payload, reg.token)
"""

from __future__ import annotations

import json
from typing import Any, Dict, Optional, Protocol, runtime_checkable

import requests
from pydantic import ValidationError

from qualifier.domain.errors import RegistrationError, SubmissionWarning
from qualifier.domain.models import IdentityPayload, RegistrationResponse, SubmissionPayload
from qualifier.utils.logging import get_logger

log = get_logger(__name__)

# Request timeout in seconds
REQUEST_TIMEOUT = 30.0


@runtime_checkable
class QualifierApi(Protocol):
    """
    Capability interface for the remote service.

    Implementations raise `RegistrationError` from `register` and
    `SubmissionWarning` from `submit`; nothing else should escape.
    """

    def register(self, url: str, payload: IdentityPayload) -> RegistrationResponse:
        ...

    def submit(
        self,
        url: str,
        payload: SubmissionPayload,
        token: Optional[str] = None,
    ) -> str:
        ...


class HttpQualifierApi:
    """requests-backed `QualifierApi`."""

    def __init__(
        self,
        timeout: float = REQUEST_TIMEOUT,
        final_query_field: str = "finalQuery",
        session: Optional[requests.Session] = None,
    ) -> None:
        self.timeout = timeout
        self.final_query_field = final_query_field
        self._session = session or requests.Session()
        self._session.headers.update(
            {
                "Accept": "application/json",
                "Content-Type": "application/json",
            }
        )

    def _post(
        self,
        url: str,
        body: Dict[str, Any],
        headers: Optional[Dict[str, str]] = None,
    ) -> requests.Response:
        response = self._session.request(
            "POST",
            url,
            data=json.dumps(body),
            headers=headers,
            timeout=self.timeout,
        )
        response.raise_for_status()
        return response

    def register(self, url: str, payload: IdentityPayload) -> RegistrationResponse:
        """
        POST the identity and parse the webhook/token pair.

        Raises:
            RegistrationError: On timeout, connection failure, non-2xx status,
                an empty body, or a body that is not a JSON object of the
                expected shape.
        """
        try:
            response = self._post(url, payload.to_wire())
        except requests.exceptions.Timeout as exc:
            raise RegistrationError(f"Registration request to {url} timed out") from exc
        except requests.exceptions.ConnectionError as exc:
            raise RegistrationError(f"Could not connect to registration endpoint {url}") from exc
        except requests.exceptions.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            raise RegistrationError(
                f"Registration failed with HTTP {status}", status_code=status
            ) from exc
        except requests.exceptions.RequestException as exc:
            raise RegistrationError(f"Registration request failed: {exc}") from exc

        if not response.content or not response.content.strip():
            raise RegistrationError(
                "Registration returned an empty body", status_code=response.status_code
            )

        try:
            data = response.json()
        except ValueError as exc:
            raise RegistrationError(
                "Registration body is not valid JSON", status_code=response.status_code
            ) from exc

        if data is None:
            raise RegistrationError(
                "Registration returned a null body", status_code=response.status_code
            )
        if not isinstance(data, dict):
            raise RegistrationError(
                f"Registration body must be a JSON object, got {type(data).__name__}",
                status_code=response.status_code,
            )

        try:
            return RegistrationResponse.model_validate(data)
        except ValidationError as exc:
            raise RegistrationError(
                f"Registration body has unexpected shape: {exc}",
                status_code=response.status_code,
            ) from exc

    def submit(
        self,
        url: str,
        payload: SubmissionPayload,
        token: Optional[str] = None,
    ) -> str:
        """
        POST the final query and return the raw response text.

        `token` is sent verbatim as the Authorization header; a blank or
        missing token means no header at all.

        Raises:
            SubmissionWarning: On timeout, connection failure or non-2xx status.
        """
        headers: Dict[str, str] = {}
        if token is not None and token.strip():
            headers["Authorization"] = token

        try:
            response = self._post(url, payload.to_wire(self.final_query_field), headers=headers)
        except requests.exceptions.Timeout as exc:
            raise SubmissionWarning(f"Submission to {url} timed out") from exc
        except requests.exceptions.ConnectionError as exc:
            raise SubmissionWarning(f"Could not connect to submission endpoint {url}") from exc
        except requests.exceptions.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            body = exc.response.text if exc.response is not None else ""
            raise SubmissionWarning(
                f"Submission failed with HTTP {status}: {body}", status_code=status
            ) from exc
        except requests.exceptions.RequestException as exc:
            raise SubmissionWarning(f"Submission request failed: {exc}") from exc

        return response.text

    def close(self) -> None:
        self._session.close()

    def __enter__(self) -> "HttpQualifierApi":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


__all__ = [
    "HttpQualifierApi",
    "QualifierApi",
    "REQUEST_TIMEOUT",
]
