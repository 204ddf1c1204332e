"""
Orchestrator for the one-shot qualifier flow.

Stages run strictly in order:

    Start -> Registered -> Selected -> Stored -> Submitted -> Done

Registration, selection and store errors abort the run and propagate to the
caller. A failed submission is logged and the run still reaches Done.

Usage (example from CLI):
    from qualifier.orchestrator import run_flow

    result = run_flow()
    print(result["submit_url"], result["response"])
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Optional, TypedDict

from qualifier.config import Settings, get_settings
from qualifier.domain.errors import SubmissionWarning
from qualifier.domain.models import SubmissionPayload
from qualifier.infrastructure.api import HttpQualifierApi, QualifierApi
from qualifier.selector import select_artifact
from qualifier.store import store_artifact
from qualifier.utils.logging import get_logger

log = get_logger(__name__)


class FlowState(str, Enum):
    START = "start"
    REGISTERED = "registered"
    SELECTED = "selected"
    STORED = "stored"
    SUBMITTED = "submitted"
    DONE = "done"
    FAILED = "failed"


class FlowResult(TypedDict, total=False):
    """
    Summary of a completed run.

    `submission_error` is set (and `response` is None) when the final POST
    failed; the run is still considered complete.
    """

    state: str
    reg_no: str
    artifact: str
    artifact_location: str
    output_path: str
    submit_url: str
    authorized: bool
    response: Optional[str]
    submission_error: Optional[str]


def _advance(state: FlowState, **extra: object) -> FlowState:
    log.debug(f"[STATE] {state.value}", extra={"state": state.value, **extra})
    return state


def run_flow(
    settings: Optional[Settings] = None,
    api: Optional[QualifierApi] = None,
    output_path: Path | str | None = None,
) -> FlowResult:
    """
    Run registration, selection, store and submission once.

    Parameters
    ----------
    settings : Settings | None
        Configuration. Defaults to the cached `get_settings()`.
    api : QualifierApi | None
        Transport. When None an `HttpQualifierApi` is created from settings
        and closed when the run ends.
    output_path : Path | str | None
        Overrides `settings.output_store_file`.

    Returns
    -------
    FlowResult
        What was selected, where it was written and submitted, and the raw
        submission response (or the submission error).

    Raises
    ------
    RegistrationError, SelectorError, StoreError
        The run aborts at the failing stage. No retries.
    """
    settings = settings or get_settings()
    target = Path(output_path or settings.output_store_file)
    if api is not None:
        return _run(settings, api, target)

    with HttpQualifierApi(
        timeout=settings.request_timeout_seconds,
        final_query_field=settings.final_query_field,
    ) as http_api:
        return _run(settings, http_api, target)


def _run(settings: Settings, api: QualifierApi, output_path: Path) -> FlowResult:
    identity = settings.identity()
    state = _advance(FlowState.START)
    log.info("Starting qualifier flow...", extra={"reg_no": identity.registration_id})

    try:
        registration = api.register(settings.generate_url, identity)
        state = _advance(FlowState.REGISTERED)
        log.info(
            f"[REGISTERED] Received webhook: {registration.webhook}",
            extra={"webhook": registration.webhook, "has_token": registration.token is not None},
        )

        artifact = select_artifact(identity.registration_id, settings.sql_q1, settings.sql_q2)
        state = _advance(FlowState.SELECTED, artifact=artifact.name)
        log.info(
            f"[SELECTED] Artifact {artifact.name} from {artifact.location}",
            extra={"artifact": artifact.name, "location": artifact.location},
        )

        stored_path = store_artifact(artifact, output_path)
        state = _advance(FlowState.STORED, path=str(stored_path))
        log.info(f"[STORED] {stored_path}", extra={"path": str(stored_path)})
    except Exception:
        log.error(f"[FLOW FAILED] after stage '{state.value}'", extra={"state": state.value})
        _advance(FlowState.FAILED)
        raise

    submit_url = registration.submission_target(settings.submit_fallback_url)
    token = registration.token
    log.info(f"Submitting final query to: {submit_url}", extra={"submit_url": submit_url})

    result = FlowResult(
        reg_no=identity.registration_id,
        artifact=artifact.name,
        artifact_location=artifact.location,
        output_path=str(stored_path),
        submit_url=submit_url,
        authorized=token is not None,
        response=None,
        submission_error=None,
    )

    try:
        response = api.submit(submit_url, SubmissionPayload.from_artifact(artifact), token)
        result["response"] = response
        log.info(f"[SUBMITTED] Submission response: {response}", extra={"submit_url": submit_url})
    except SubmissionWarning as exc:
        result["submission_error"] = str(exc)
        log.error(
            f"[SUBMISSION FAILED] {exc}",
            exc_info=True,
            extra={"submit_url": submit_url, "status_code": exc.status_code},
        )
    state = _advance(FlowState.SUBMITTED)

    state = _advance(FlowState.DONE)
    result["state"] = state.value
    log.info("Flow complete.")
    return result


__all__ = [
    "FlowResult",
    "FlowState",
    "run_flow",
]
