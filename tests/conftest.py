"""
Pytest configuration for the qualifier flow.

Provides fixtures for:
- Settings with artifacts and output redirected into tmp_path
- A capturing QualifierApi double
"""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional, Tuple

import pytest

from qualifier.config import Settings
from qualifier.domain.errors import RegistrationError, SubmissionWarning
from qualifier.domain.models import IdentityPayload, RegistrationResponse, SubmissionPayload

ODD_QUERY = "SELECT 'odd' AS artifact;"
EVEN_QUERY = "SELECT 'even' AS artifact;"


class CapturingApi:
    """
    In-process QualifierApi double that records every call.

    Configure `registration` (or `register_error`) and `submit_response`
    (or `submit_error`) before running the flow.
    """

    def __init__(
        self,
        registration: Optional[RegistrationResponse] = None,
        register_error: Optional[RegistrationError] = None,
        submit_response: str = '{"success": true}',
        submit_error: Optional[SubmissionWarning] = None,
    ) -> None:
        self.registration = registration or RegistrationResponse(
            webhook="http://callback.test/webhook", access_token="token-123"
        )
        self.register_error = register_error
        self.submit_response = submit_response
        self.submit_error = submit_error
        self.register_calls: List[Tuple[str, IdentityPayload]] = []
        self.submit_calls: List[Tuple[str, SubmissionPayload, Optional[str]]] = []

    def register(self, url: str, payload: IdentityPayload) -> RegistrationResponse:
        self.register_calls.append((url, payload))
        if self.register_error is not None:
            raise self.register_error
        return self.registration

    def submit(
        self,
        url: str,
        payload: SubmissionPayload,
        token: Optional[str] = None,
    ) -> str:
        self.submit_calls.append((url, payload, token))
        if self.submit_error is not None:
            raise self.submit_error
        return self.submit_response


@pytest.fixture()
def artifact_files(tmp_path: Path) -> Tuple[Path, Path]:
    q1 = tmp_path / "q1.sql"
    q2 = tmp_path / "q2.sql"
    q1.write_text(f"\n  {ODD_QUERY}  \n", encoding="utf-8")
    q2.write_text(f"{EVEN_QUERY}\n\n", encoding="utf-8")
    return q1, q2


@pytest.fixture()
def test_settings(tmp_path: Path, artifact_files: Tuple[Path, Path]) -> Settings:
    """
    Settings with local artifacts and an output file under tmp_path.
    """
    q1, q2 = artifact_files
    return Settings(
        api_base_url="http://service.test",
        generate_endpoint="/hiring/generateWebhook",
        submit_fallback_endpoint="/hiring/testWebhook",
        candidate_name="Jane Doe",
        candidate_reg_no="AB1234CD45",
        candidate_email="jane@example.com",
        sql_q1=str(q1),
        sql_q2=str(q2),
        output_store_file=str(tmp_path / "out" / "final_query.sql"),
        request_timeout_seconds=5.0,
        log_level="DEBUG",
    )


@pytest.fixture()
def output_dir(test_settings: Settings) -> Path:
    path = Path(test_settings.output_store_file).parent
    path.mkdir(parents=True, exist_ok=True)
    return path


@pytest.fixture()
def capturing_api() -> CapturingApi:
    return CapturingApi()


@pytest.fixture()
def odd_query() -> str:
    return ODD_QUERY


@pytest.fixture()
def even_query() -> str:
    return EVEN_QUERY
