"""
Pydantic models for triage results, outbound drafts, and agent requests.
"""

from enum import Enum
from typing import List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------


class Tone(str, Enum):
    PROFESSIONAL = "professional"
    FRIENDLY = "friendly"
    CONCISE = "concise"
    ASSERTIVE = "assertive"
    WARM = "warm"


class Sentiment(str, Enum):
    POSITIVE = "positive"
    NEUTRAL = "neutral"
    NEGATIVE = "negative"


class Priority(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


# ---------------------------------------------------------------------------
# Templates
# ---------------------------------------------------------------------------


class Template(BaseModel):
    """
    Fixed subject / opening / closing triple associated with a Tone.
    """

    subject: str
    opening: str
    closing: str

    model_config = ConfigDict(frozen=True)


# ---------------------------------------------------------------------------
# Analysis results
# ---------------------------------------------------------------------------


class Task(BaseModel):
    """
    A single actionable item extracted from one line of the email.

    due and owner are best-effort captures; either may be missing.
    """

    description: str
    due: Optional[str] = None
    owner: Optional[str] = None

    @field_validator("description")
    @classmethod
    def validate_description(cls, v: str) -> str:
        if not v:
            raise ValueError("description must not be empty")
        return v

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        arbitrary_types_allowed=False,
    )


class RecommendedReply(BaseModel):
    subject: str
    body: str

    model_config = ConfigDict(
        populate_by_name=True,
        arbitrary_types_allowed=False,
    )


class AnalysisResult(BaseModel):
    """
    Structured triage data for one email.

    Fully determined by (content, thread_history, persona).
    """

    summary: str
    sentiment: Sentiment
    priority: Priority
    tags: List[str] = Field(default_factory=list)
    subject_suggestion: str
    tasks: List[Task] = Field(default_factory=list)
    follow_up_recommendation: str
    recommended_reply: RecommendedReply

    @field_validator("tags")
    @classmethod
    def validate_tags(cls, v: List[str]) -> List[str]:
        if len(set(v)) != len(v):
            raise ValueError("tags must not contain duplicates")
        return v

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        arbitrary_types_allowed=False,
    )


# ---------------------------------------------------------------------------
# Compose results
# ---------------------------------------------------------------------------


class ComposeResult(BaseModel):
    """
    Outbound draft synthesized from structured intent fields.
    """

    subject: str
    preview: str
    body: str
    cadence_tip: str

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        arbitrary_types_allowed=False,
    )


# ---------------------------------------------------------------------------
# Requests and error payload
# ---------------------------------------------------------------------------


class AnalyzeRequest(BaseModel):
    """
    Request for the analyze mode.

    content may be missing, null or blank; the engine rejects all three
    with the same error.
    """

    mode: Literal["analyze"] = "analyze"
    content: Optional[str] = None
    thread_history: Optional[str] = None
    persona: Optional[str] = None

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        arbitrary_types_allowed=False,
    )


class ComposeRequest(BaseModel):
    """
    Request for the compose mode.
    """

    mode: Literal["compose"] = "compose"
    audience: str = ""
    objective: str = ""
    tone: Tone
    key_points: List[str] = Field(default_factory=list)
    call_to_action: Optional[str] = None
    signature: Optional[str] = None

    @field_validator("key_points", mode="before")
    @classmethod
    def split_key_points(cls, v):
        # The editor sends the whole text area; accept it as-is.
        if isinstance(v, str):
            return v.splitlines()
        return v

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        arbitrary_types_allowed=False,
    )


class ErrorResponse(BaseModel):
    error: str


AgentResult = Union[AnalysisResult, ComposeResult]


__all__ = [
    "Tone",
    "Sentiment",
    "Priority",
    "Template",
    "Task",
    "RecommendedReply",
    "AnalysisResult",
    "ComposeResult",
    "AnalyzeRequest",
    "ComposeRequest",
    "ErrorResponse",
    "AgentResult",
]
