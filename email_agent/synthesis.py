"""
Content synthesis: subject suggestion, summary, tags, and follow-up advice.
"""

from typing import Dict, List, Optional, Sequence

from .models import Priority, Sentiment, Task
from .patterns import AWAITING_RESPONSE, NEWLINE_RUN, SENTENCE_BOUNDARY

SUMMARY_SENTENCES = 3
SUMMARY_FALLBACK = "No summary available."

_FALLBACK_SUBJECTS: Dict[Priority, str] = {
    Priority.HIGH: "[Urgent] Action required on latest request",
    Priority.MEDIUM: "Next steps for your email",
    Priority.LOW: "Thanks for the update — here's the plan",
}

_PRIORITY_TAGS: Dict[Priority, str] = {
    Priority.HIGH: "Hot",
    Priority.MEDIUM: "Follow-up",
    Priority.LOW: "Backlog",
}

_SENTIMENT_TAGS: Dict[Sentiment, str] = {
    Sentiment.POSITIVE: "Relationship",
    Sentiment.NEGATIVE: "Risk",
    Sentiment.NEUTRAL: "Neutral",
}

FOLLOW_UP_URGENT = "Follow up within 4 business hours and confirm ownership of each task."
FOLLOW_UP_AWAITING = "Schedule a reminder in 2 days to check for updates."
FOLLOW_UP_TASKS = "Log tasks in your system and share a progress update within 24 hours."
FOLLOW_UP_ARCHIVE = "Archive for now, revisit over the weekend for any broader updates."


# ---------------------------------------------------------------------------
# Subject
# ---------------------------------------------------------------------------


def build_subject(
    tasks: Sequence[Task],
    priority: Priority,
    sentiment: Sentiment,
) -> str:
    """Suggest a subject line led by the first task, if there is one."""
    if tasks:
        if priority == Priority.HIGH:
            tag = "Urgent"
        elif sentiment == Sentiment.POSITIVE:
            tag = "Update"
        else:
            tag = "Follow-up"
        return f"[{tag}] {tasks[0].description}"

    return _FALLBACK_SUBJECTS[priority]


# ---------------------------------------------------------------------------
# Summary
# ---------------------------------------------------------------------------


def split_sentences(content: str) -> List[str]:
    flattened = NEWLINE_RUN.pattern.sub(" ", content)
    return [s for s in SENTENCE_BOUNDARY.pattern.split(flattened) if s]


def summarize(content: str, thread_history: Optional[str] = None) -> str:
    """
    First three sentences of the content.

    The thread-context note only ever decorates the fallback text; a real
    summary is returned without it.
    """
    summary = " ".join(split_sentences(content)[:SUMMARY_SENTENCES])
    if summary:
        return summary

    history_note = ""
    if thread_history:
        word_count = len(thread_history.split())
        history_note = f" Thread context considered ({word_count} words)."
    return SUMMARY_FALLBACK + history_note


# ---------------------------------------------------------------------------
# Tags
# ---------------------------------------------------------------------------


class TagSet:
    """Insertion-ordered set of tags; repeated adds are no-ops."""

    def __init__(self) -> None:
        self._tags: Dict[str, None] = {}

    def add(self, tag: str) -> None:
        self._tags.setdefault(tag, None)

    def __contains__(self, tag: object) -> bool:
        return tag in self._tags

    def __iter__(self):
        return iter(self._tags)

    def __len__(self) -> int:
        return len(self._tags)

    def to_list(self) -> List[str]:
        return list(self._tags)


def build_tags(
    priority: Priority,
    sentiment: Sentiment,
    tasks: Sequence[Task],
) -> List[str]:
    tags = TagSet()
    tags.add(_PRIORITY_TAGS[priority])
    tags.add(_SENTIMENT_TAGS[sentiment])

    if tasks:
        tags.add("Action items")

    if any(task.owner for task in tasks):
        tags.add("Delegation")

    return tags.to_list()


# ---------------------------------------------------------------------------
# Follow-up recommendation
# ---------------------------------------------------------------------------


def build_follow_up_recommendation(
    priority: Priority,
    tasks: Sequence[Task],
    content: str,
) -> str:
    if priority == Priority.HIGH:
        return FOLLOW_UP_URGENT

    if AWAITING_RESPONSE.matches(content):
        return FOLLOW_UP_AWAITING

    if tasks:
        return FOLLOW_UP_TASKS

    return FOLLOW_UP_ARCHIVE


__all__ = [
    "SUMMARY_FALLBACK",
    "build_subject",
    "split_sentences",
    "summarize",
    "TagSet",
    "build_tags",
    "build_follow_up_recommendation",
]
