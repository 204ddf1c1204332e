"""
Domain models for the qualifier flow.

Defines the two JSON exchanges with the remote service (identity registration
and final query submission) and the selected SQL artifact. Wire field names are
a contract with the remote service and are expressed as pydantic aliases.
"""
from __future__ import annotations

from typing import Any, Dict, Literal, Optional

from pydantic import BaseModel, Field


def _blank_to_none(value: Optional[str]) -> Optional[str]:
    if value is None or not value.strip():
        return None
    return value


class IdentityPayload(BaseModel):
    """
    Candidate identity sent to the registration endpoint.
    """

    name: str = Field(..., description="Candidate full name.")
    registration_id: str = Field(..., alias="regNo", description="Registration number.")
    email: str = Field(..., description="Candidate e-mail address.")

    model_config = {
        "frozen": True,
        "populate_by_name": True,
    }

    def to_wire(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True)


class RegistrationResponse(BaseModel):
    """
    Registration result: the callback endpoint and its access token.

    Both fields may be absent or blank; that is a degraded but valid outcome.
    Use `webhook_url` and `token` rather than the raw fields so absence and
    blankness go through the same path.
    """

    webhook: Optional[str] = Field(None, description="Submission URL issued by the service.")
    access_token: Optional[str] = Field(
        None, alias="accessToken", description="Value for the Authorization header."
    )

    model_config = {
        "frozen": True,
        "populate_by_name": True,
        "extra": "ignore",
    }

    @property
    def webhook_url(self) -> Optional[str]:
        return _blank_to_none(self.webhook)

    @property
    def token(self) -> Optional[str]:
        return _blank_to_none(self.access_token)

    def submission_target(self, fallback_url: str) -> str:
        """Resolve where the final query goes: the webhook, else the fallback."""
        return self.webhook_url or fallback_url


class Artifact(BaseModel):
    """
    One of the two precomputed SQL queries, already loaded and trimmed.
    """

    name: Literal["A", "B"] = Field(..., description="A for odd identifiers, B for even.")
    location: str = Field(..., description="Where the content was read from.")
    content: str = Field(..., description="Query text, surrounding whitespace trimmed.")

    model_config = {"frozen": True}


class SubmissionPayload(BaseModel):
    """
    Body of the final submission. The wire field name is configured.
    """

    query: str

    model_config = {"frozen": True}

    @classmethod
    def from_artifact(cls, artifact: Artifact) -> "SubmissionPayload":
        return cls(query=artifact.content)

    def to_wire(self, field_name: str = "finalQuery") -> Dict[str, Any]:
        return {field_name: self.query}


__all__ = [
    "Artifact",
    "IdentityPayload",
    "RegistrationResponse",
    "SubmissionPayload",
]
