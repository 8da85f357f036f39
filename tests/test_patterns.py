"""Tests for the named pattern rules and text helpers."""

import pytest

from email_agent.patterns import (
    AWAITING_RESPONSE,
    BULLET_LINE,
    DATE_TOKEN,
    DUE_BY,
    DUE_DEADLINE,
    OWNER,
    POSITIVE_WORDS,
    REQUEST_LINE,
    RULES,
    SCHEDULING_PHRASE,
    capitalize,
    collapse_whitespace,
    count_word_hits,
    title_case,
)


# ── Word lists ─────────────────────────────────────────────────────────────────


class TestCountWordHits:
    def test_repeated_word_counts_once(self) -> None:
        assert count_word_hits(["thank"], "Thanks, thank you, THANK YOU") == 1

    def test_substring_match(self) -> None:
        assert count_word_hits(["great"], "That is the greatest") == 1

    def test_each_word_counted_independently(self) -> None:
        assert count_word_hits(POSITIVE_WORDS, "Glad and happy, thanks!") == 3

    def test_no_hits(self) -> None:
        assert count_word_hits(POSITIVE_WORDS, "") == 0


# ── Regex rules ────────────────────────────────────────────────────────────────


class TestRuleTable:
    def test_rule_names_are_unique(self) -> None:
        names = [rule.name for rule in RULES]
        assert len(names) == len(set(names))


class TestDateToken:
    @pytest.mark.parametrize("text", ["ship by 5/12", "on 12/31.", "1/1"])
    def test_matches(self, text: str) -> None:
        assert DATE_TOKEN.matches(text)

    @pytest.mark.parametrize("text", ["version 10/100", "2024/05", "no date"])
    def test_rejects(self, text: str) -> None:
        assert not DATE_TOKEN.matches(text)


class TestSchedulingPhrase:
    @pytest.mark.parametrize("text", ["see you NEXT WEEK", "talk soon", "I'll follow up"])
    def test_matches(self, text: str) -> None:
        assert SCHEDULING_PHRASE.matches(text)

    def test_requires_whole_word(self) -> None:
        assert not SCHEDULING_PHRASE.matches("soonish")


class TestTaskLineRules:
    @pytest.mark.parametrize("line", ["- item", "* item", "12. item"])
    def test_bullets(self, line: str) -> None:
        assert BULLET_LINE.matches(line)

    def test_plain_line_is_not_bullet(self) -> None:
        assert not BULLET_LINE.matches("item - with dash")

    @pytest.mark.parametrize("line", ["PLEASE send", "Can you check", "could you", "Action: x"])
    def test_requests(self, line: str) -> None:
        assert REQUEST_LINE.matches(line)


class TestDueRules:
    @pytest.mark.parametrize(
        "text,expected",
        [
            ("finish by tomorrow", "tomorrow"),
            ("done by next  week", "next  week"),
            ("ship by 5/12", "5/12"),
            ("ready by March 3rd", "March 3"),
            ("send it by Thursday.", "Thursday"),
            ("BY today", "today"),
        ],
    )
    def test_due_by(self, text: str, expected: str) -> None:
        assert DUE_BY.capture(text) == expected

    def test_word_digits_beats_weekday(self) -> None:
        assert DUE_BY.capture("send it by Friday 12 at noon") == "Friday 12"

    def test_weekday_only_when_nothing_else_matches(self) -> None:
        assert DUE_BY.capture("send it by Friday morning") == "Friday"

    def test_due_by_without_phrase(self) -> None:
        assert DUE_BY.capture("pass by the office") is None

    def test_deadline(self) -> None:
        assert DUE_DEADLINE.capture("Deadline June 30 for this") == "June 30"
        assert DUE_DEADLINE.capture("report due March 3") == "March 3"


class TestOwnerRule:
    def test_capitalized_name(self) -> None:
        assert OWNER.capture("draft notes for Maria today") == "Maria"

    def test_lowercase_word_ignored(self) -> None:
        assert OWNER.capture("coordinate for the release") is None


class TestAwaitingResponse:
    def test_matches_hear_back(self) -> None:
        assert AWAITING_RESPONSE.matches("Let me know when you hear back")

    def test_requires_whole_word(self) -> None:
        assert not AWAITING_RESPONSE.matches("still waiting on legal")


# ── Text helpers ───────────────────────────────────────────────────────────────


class TestTextHelpers:
    def test_capitalize_only_first_letter(self) -> None:
        assert capitalize("ship by friday") == "Ship by friday"
        assert capitalize("iPhone launch") == "IPhone launch"

    def test_capitalize_empty(self) -> None:
        assert capitalize("") == ""

    def test_title_case(self) -> None:
        assert title_case("next  WEEK") == "Next Week"
        assert title_case("5/12") == "5/12"

    def test_collapse_whitespace(self) -> None:
        assert collapse_whitespace("  a\n\n b\t c  ") == "a b c"
