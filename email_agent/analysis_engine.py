"""
Analysis engine: wires the heuristics into the analyze and compose pipelines.

Core pieces:
- analyze_email: signals -> synthesis -> recommended reply
- compose_email: outbound draft from intent fields
- handle_request / respond: mode dispatch for plain request mappings
"""

import logging
from typing import Any, Dict, Iterable, List, Mapping, Optional, Union

from pydantic import ValidationError

from .compose import compose_draft
from .models import (
    AgentResult,
    AnalysisResult,
    AnalyzeRequest,
    ComposeRequest,
    ComposeResult,
    ErrorResponse,
    Tone,
)
from .reply import generate_reply
from .signals import detect_sentiment, determine_priority, extract_tasks
from .synthesis import (
    build_follow_up_recommendation,
    build_subject,
    build_tags,
    summarize,
)

logger = logging.getLogger(__name__)


class AgentError(Exception):
    """Base class for request errors raised by the engine."""


class MissingInputError(AgentError):
    """A required text field was absent or blank."""


class UnsupportedModeError(AgentError):
    """The request named a mode the engine does not handle."""


class InvalidRequestError(AgentError):
    """The request payload did not validate."""


# ---------------------------------------------------------------------------
# Pipelines
# ---------------------------------------------------------------------------


def _strip_optional(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    return value.strip() or None


def _key_point_lines(key_points) -> List[str]:
    # A single string is the raw text area: one point per line.
    if isinstance(key_points, str):
        return key_points.splitlines()
    return list(key_points or [])


def analyze_email(
    content: Optional[str],
    thread_history: Optional[str] = None,
    persona: Optional[str] = None,
) -> AnalysisResult:
    """
    Triage one email.

    Raises:
        MissingInputError: if content is missing or whitespace-only.
    """
    content = (content or "").strip()
    if not content:
        raise MissingInputError("Email content is required.")

    persona = _strip_optional(persona)

    sentiment = detect_sentiment(content)
    priority = determine_priority(content)
    tasks = extract_tasks(content)
    summary = summarize(content, thread_history)

    result = AnalysisResult(
        summary=summary,
        sentiment=sentiment,
        priority=priority,
        tags=build_tags(priority, sentiment, tasks),
        subject_suggestion=build_subject(tasks, priority, sentiment),
        tasks=tasks,
        follow_up_recommendation=build_follow_up_recommendation(priority, tasks, content),
        recommended_reply=generate_reply(priority, tasks, summary, persona),
    )

    logger.info(
        "Analyzed email: priority=%s sentiment=%s tasks=%d",
        priority.value,
        sentiment.value,
        len(tasks),
    )
    return result


def compose_email(
    audience: str,
    objective: str,
    tone: Tone,
    key_points: Union[str, Iterable[str]],
    call_to_action: Optional[str] = None,
    signature: Optional[str] = None,
) -> ComposeResult:
    """
    Draft an outbound email.

    An empty objective is not an error here; the tone's template subject is
    used instead.
    """
    tone = Tone(tone)
    result = compose_draft(
        audience=(audience or "").strip(),
        objective=(objective or "").strip(),
        tone=tone,
        key_points=_key_point_lines(key_points),
        call_to_action=_strip_optional(call_to_action),
        signature=_strip_optional(signature),
    )

    logger.info("Composed draft: tone=%s subject=%r", tone.value, result.subject)
    return result


# ---------------------------------------------------------------------------
# Mode dispatch
# ---------------------------------------------------------------------------


def _validate(model, payload: Mapping[str, Any]):
    try:
        return model.model_validate(dict(payload))
    except ValidationError as e:
        logger.warning("Rejected %s payload: %s", model.__name__, e)
        raise InvalidRequestError(f"Invalid request: {e.errors()[0]['msg']}") from e


def handle_request(payload: Mapping[str, Any]) -> AgentResult:
    """
    Dispatch a request mapping on its "mode" field.

    Raises:
        MissingInputError: analyze request without content.
        UnsupportedModeError: mode other than "analyze" or "compose".
        InvalidRequestError: payload fields failed validation.
    """
    mode = payload.get("mode") if isinstance(payload, Mapping) else None

    if mode == "analyze":
        req: AnalyzeRequest = _validate(AnalyzeRequest, payload)
        return analyze_email(req.content, req.thread_history, req.persona)

    if mode == "compose":
        creq: ComposeRequest = _validate(ComposeRequest, payload)
        return compose_email(
            audience=creq.audience,
            objective=creq.objective,
            tone=creq.tone,
            key_points=creq.key_points,
            call_to_action=creq.call_to_action,
            signature=creq.signature,
        )

    logger.warning("Rejected request with unsupported mode=%r", mode)
    raise UnsupportedModeError("Unsupported mode.")


def respond(payload: Mapping[str, Any]) -> Dict[str, Any]:
    """
    Run a request and return its wire-form payload.

    Failures come back as {"error": message} rather than raising.
    """
    try:
        result = handle_request(payload)
    except AgentError as e:
        return ErrorResponse(error=str(e)).model_dump()
    return result.model_dump(mode="json", by_alias=True, exclude_none=True)


__all__ = [
    "AgentError",
    "MissingInputError",
    "UnsupportedModeError",
    "InvalidRequestError",
    "analyze_email",
    "compose_email",
    "handle_request",
    "respond",
]
