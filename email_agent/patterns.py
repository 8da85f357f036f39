"""
Named pattern rules used by the signal extractors.

Every word list and regular expression the heuristics rely on lives here so
the matching logic can be read (and tested) in one place.
"""

import re
from dataclasses import dataclass
from typing import Iterable, Optional, Pattern, Tuple


# ---------------------------------------------------------------------------
# Word lists
# ---------------------------------------------------------------------------

POSITIVE_WORDS: Tuple[str, ...] = (
    "thank",
    "appreciate",
    "great",
    "glad",
    "pleased",
    "happy",
    "excited",
)

NEGATIVE_WORDS: Tuple[str, ...] = (
    "concern",
    "issue",
    "problem",
    "delayed",
    "delay",
    "blocked",
    "urgent",
    "frustrated",
    "disappointed",
)

URGENCY_WORDS: Tuple[str, ...] = (
    "urgent",
    "asap",
    "immediately",
    "priority",
    "important",
)


def count_word_hits(words: Iterable[str], text: str) -> int:
    """
    Count how many list words occur in text (case-insensitive substring).

    Each word contributes at most 1, however often it repeats.
    """
    normalized = text.lower()
    return sum(1 for word in words if word in normalized)


def contains_any(words: Iterable[str], text: str) -> bool:
    normalized = text.lower()
    return any(word in normalized for word in words)


# ---------------------------------------------------------------------------
# Regex rules
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class PatternRule:
    """A named, compiled regular expression."""

    name: str
    pattern: Pattern[str]

    def matches(self, text: str) -> bool:
        return self.pattern.search(text) is not None

    def capture(self, text: str) -> Optional[str]:
        """Return the first capture group of the first match, if any."""
        match = self.pattern.search(text)
        if match is None:
            return None
        return match.group(1)


def _rule(name: str, expr: str, flags: int = 0) -> PatternRule:
    return PatternRule(name=name, pattern=re.compile(expr, flags))


_WEEKDAY = r"(?:mon|tues|wednes|thurs|fri|satur|sun)day\b"

# Priority
DATE_TOKEN = _rule("date_token", r"\b\d{1,2}/\d{1,2}\b", re.ASCII)
SCHEDULING_PHRASE = _rule(
    "scheduling_phrase", r"\b(?:next week|soon|follow up)\b", re.IGNORECASE
)

# Task lines
BULLET_LINE = _rule("bullet_line", r"^(?:\*|-|\d+\.)", re.ASCII)
REQUEST_LINE = _rule("request_line", r"please|can you|could you|action", re.IGNORECASE)
BULLET_MARKER = _rule("bullet_marker", r"^(?:\*|-|\d+\.)\s*", re.ASCII)

# Task details
DUE_BY = _rule(
    "due_by",
    r"\bby\s+(next\s+week|tomorrow|today|\d{1,2}/\d{1,2}|\w+\s+\d{1,2}|"
    + _WEEKDAY
    + r")",
    re.IGNORECASE | re.ASCII,
)
DUE_DEADLINE = _rule(
    "due_deadline", r"\b(?:due|deadline)\s+(\w+\s+\d{1,2})", re.IGNORECASE | re.ASCII
)
OWNER = _rule("owner", r"\bfor\s+([A-Z][a-z]+)")

# Follow-up
AWAITING_RESPONSE = _rule(
    "awaiting_response", r"\b(?:wait|await|response|hear back)\b", re.IGNORECASE
)

# Text shaping
NEWLINE_RUN = _rule("newline_run", r"\n+")
WHITESPACE_RUN = _rule("whitespace_run", r"\s+")
SENTENCE_BOUNDARY = _rule("sentence_boundary", r"(?<=[.?!])\s+")
LINE_BREAK = _rule("line_break", r"\r?\n")
LEADING_THANKS = _rule("leading_thanks", r"^(Thank you|Thanks)")


RULES: Tuple[PatternRule, ...] = (
    DATE_TOKEN,
    SCHEDULING_PHRASE,
    BULLET_LINE,
    REQUEST_LINE,
    BULLET_MARKER,
    DUE_BY,
    DUE_DEADLINE,
    OWNER,
    AWAITING_RESPONSE,
    NEWLINE_RUN,
    WHITESPACE_RUN,
    SENTENCE_BOUNDARY,
    LINE_BREAK,
    LEADING_THANKS,
)


# ---------------------------------------------------------------------------
# Text helpers
# ---------------------------------------------------------------------------


def capitalize(value: str) -> str:
    """Upper-case the first character only; the rest is left untouched."""
    if not value:
        return value
    return value[0].upper() + value[1:]


def title_case(value: str) -> str:
    return " ".join(capitalize(part) for part in value.lower().split())


def collapse_whitespace(value: str) -> str:
    return WHITESPACE_RUN.pattern.sub(" ", value).strip()


__all__ = [
    "POSITIVE_WORDS",
    "NEGATIVE_WORDS",
    "URGENCY_WORDS",
    "count_word_hits",
    "contains_any",
    "PatternRule",
    "RULES",
    "DATE_TOKEN",
    "SCHEDULING_PHRASE",
    "BULLET_LINE",
    "REQUEST_LINE",
    "BULLET_MARKER",
    "DUE_BY",
    "DUE_DEADLINE",
    "OWNER",
    "AWAITING_RESPONSE",
    "NEWLINE_RUN",
    "WHITESPACE_RUN",
    "SENTENCE_BOUNDARY",
    "LINE_BREAK",
    "LEADING_THANKS",
    "capitalize",
    "title_case",
    "collapse_whitespace",
]
