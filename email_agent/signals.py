"""
Signal extraction: sentiment, priority, and task lines from raw email text.
"""

import logging
from typing import List, Optional

from .models import Priority, Sentiment, Task
from .patterns import (
    BULLET_LINE,
    BULLET_MARKER,
    DATE_TOKEN,
    DUE_BY,
    DUE_DEADLINE,
    LINE_BREAK,
    NEGATIVE_WORDS,
    OWNER,
    POSITIVE_WORDS,
    REQUEST_LINE,
    SCHEDULING_PHRASE,
    URGENCY_WORDS,
    capitalize,
    contains_any,
    count_word_hits,
    title_case,
)

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Sentiment
# ---------------------------------------------------------------------------


def detect_sentiment(content: str) -> Sentiment:
    """
    Compare positive and negative word-list hits.

    Ties, including no hits at all, are neutral.
    """
    positive_hits = count_word_hits(POSITIVE_WORDS, content)
    negative_hits = count_word_hits(NEGATIVE_WORDS, content)
    logger.debug("Sentiment hits: positive=%d negative=%d", positive_hits, negative_hits)

    if positive_hits == negative_hits:
        return Sentiment.NEUTRAL
    if positive_hits > negative_hits:
        return Sentiment.POSITIVE
    return Sentiment.NEGATIVE


# ---------------------------------------------------------------------------
# Priority
# ---------------------------------------------------------------------------


def determine_priority(content: str) -> Priority:
    """
    Classify priority; the first matching rule wins.

    1. urgency words           -> high
    2. a d/d date token        -> medium
    3. next week / soon / follow up -> medium
    4. otherwise               -> low
    """
    if contains_any(URGENCY_WORDS, content):
        return Priority.HIGH
    if DATE_TOKEN.matches(content):
        return Priority.MEDIUM
    if SCHEDULING_PHRASE.matches(content):
        return Priority.MEDIUM
    return Priority.LOW


# ---------------------------------------------------------------------------
# Tasks
# ---------------------------------------------------------------------------


def is_task_line(line: str) -> bool:
    return BULLET_LINE.matches(line.strip()) or REQUEST_LINE.matches(line)


def _find_due(description: str, line: str) -> Optional[str]:
    due = DUE_BY.capture(description) or DUE_DEADLINE.capture(line)
    return title_case(due) if due else None


def parse_task_line(line: str) -> Optional[Task]:
    """
    Turn one qualifying line into a Task, or None if nothing is left once
    the bullet marker is stripped.
    """
    stripped = BULLET_MARKER.pattern.sub("", line.strip(), count=1).strip()
    if not stripped:
        return None

    # Owner names are matched case-sensitively against the text as written.
    return Task(
        description=capitalize(stripped),
        due=_find_due(stripped, line),
        owner=OWNER.capture(stripped),
    )


def extract_tasks(content: str) -> List[Task]:
    """Extract tasks in source-line order."""
    tasks: List[Task] = []
    for line in LINE_BREAK.pattern.split(content):
        if not is_task_line(line):
            continue
        task = parse_task_line(line)
        if task is None:
            logger.debug("Skipping task line with empty description: %r", line)
            continue
        tasks.append(task)
    return tasks


__all__ = [
    "detect_sentiment",
    "determine_priority",
    "is_task_line",
    "parse_task_line",
    "extract_tasks",
]
