"""Tests for the pydantic models and the tone template catalog."""

import pytest
from pydantic import ValidationError

from email_agent.models import (
    AnalysisResult,
    ComposeRequest,
    Priority,
    RecommendedReply,
    Sentiment,
    Task,
    Tone,
)
from email_agent.templates import TEMPLATES, get_template


def make_result(**kwargs: object) -> AnalysisResult:
    defaults: dict[str, object] = dict(
        summary="Summary.",
        sentiment=Sentiment.NEUTRAL,
        priority=Priority.LOW,
        tags=["Backlog", "Neutral"],
        subject_suggestion="Subject",
        tasks=[],
        follow_up_recommendation="Archive",
        recommended_reply=RecommendedReply(subject="s", body="b"),
    )
    return AnalysisResult(**{**defaults, **kwargs})  # type: ignore[arg-type]


# ── Task ───────────────────────────────────────────────────────────────────────


class TestTask:
    def test_empty_description_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Task(description="")

    def test_is_frozen(self) -> None:
        task = Task(description="Send deck")
        with pytest.raises(ValidationError):
            task.description = "Other"  # type: ignore[misc]

    def test_optional_fields_default_none(self) -> None:
        task = Task(description="Send deck")
        assert task.due is None
        assert task.owner is None


# ── AnalysisResult ─────────────────────────────────────────────────────────────


class TestAnalysisResult:
    def test_duplicate_tags_rejected(self) -> None:
        with pytest.raises(ValidationError):
            make_result(tags=["Hot", "Hot"])

    def test_camel_case_aliases(self) -> None:
        data = make_result().model_dump(by_alias=True)
        assert "subjectSuggestion" in data
        assert "followUpRecommendation" in data
        assert "recommendedReply" in data

    def test_accepts_wire_form(self) -> None:
        wire = make_result().model_dump(mode="json", by_alias=True)
        assert AnalysisResult.model_validate(wire) == make_result()

    def test_unknown_sentiment_rejected(self) -> None:
        with pytest.raises(ValidationError):
            make_result(sentiment="mixed")


# ── ComposeRequest ─────────────────────────────────────────────────────────────


class TestComposeRequest:
    def test_tone_required(self) -> None:
        with pytest.raises(ValidationError):
            ComposeRequest.model_validate({"mode": "compose"})

    def test_key_points_text_split(self) -> None:
        req = ComposeRequest.model_validate({"tone": "concise", "keyPoints": "a\r\nb"})
        assert req.key_points == ["a", "b"]
        assert req.tone == Tone.CONCISE


# ── Templates ──────────────────────────────────────────────────────────────────


class TestTemplates:
    def test_every_tone_has_a_template(self) -> None:
        assert set(TEMPLATES) == set(Tone)

    def test_get_template_accepts_string(self) -> None:
        assert get_template("warm") is TEMPLATES[Tone.WARM]

    def test_catalog_is_read_only(self) -> None:
        with pytest.raises(TypeError):
            TEMPLATES[Tone.WARM] = TEMPLATES[Tone.CONCISE]  # type: ignore[index]

    def test_unknown_tone(self) -> None:
        with pytest.raises(ValueError):
            get_template("sarcastic")  # type: ignore[arg-type]
