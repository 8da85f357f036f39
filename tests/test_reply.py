"""Tests for the recommended reply composer."""

from email_agent.models import Priority, Task, Tone
from email_agent.reply import (
    format_task_bullet,
    generate_reply,
    personalize_opening,
    select_reply_tone,
)
from email_agent.templates import TEMPLATES


class TestSelectReplyTone:
    def test_high_is_assertive(self) -> None:
        assert select_reply_tone(Priority.HIGH) == Tone.ASSERTIVE

    def test_others_are_professional(self) -> None:
        assert select_reply_tone(Priority.MEDIUM) == Tone.PROFESSIONAL
        assert select_reply_tone(Priority.LOW) == Tone.PROFESSIONAL


class TestPersonalizeOpening:
    def test_thank_you(self) -> None:
        opening = TEMPLATES[Tone.PROFESSIONAL].opening
        assert personalize_opening(opening, "Alex") == (
            "Hi Alex, thank you for reaching out. I wanted to follow up on your note."
        )

    def test_thanks(self) -> None:
        opening = TEMPLATES[Tone.ASSERTIVE].opening
        assert personalize_opening(opening, "Alex").startswith("Hi Alex, thanks for the details.")

    def test_no_persona(self) -> None:
        opening = TEMPLATES[Tone.PROFESSIONAL].opening
        assert personalize_opening(opening, None) == opening
        assert personalize_opening(opening, "") == opening

    def test_only_leading_occurrence(self) -> None:
        assert personalize_opening("Noted. Thanks again.", "Alex") == "Noted. Thanks again."

    def test_persona_with_backslash_is_literal(self) -> None:
        assert personalize_opening("Thanks!", r"A\1") == r"Hi A\1, thanks!"


class TestFormatTaskBullet:
    def test_plain(self) -> None:
        assert format_task_bullet(Task(description="Send deck")) == "• Send deck"

    def test_due_and_owner(self) -> None:
        task = Task(description="Send deck", due="5/12", owner="Maria")
        assert format_task_bullet(task) == "• Send deck (due 5/12) — owner: Maria"


class TestGenerateReply:
    def test_full_body(self) -> None:
        task = Task(description="Send the deck by 5/12 for Maria", due="5/12", owner="Maria")
        reply = generate_reply(Priority.MEDIUM, [task], "Summary here.")

        assert reply.subject == "Quick follow-up on your message"
        assert reply.body == (
            "Thank you for reaching out. I wanted to follow up on your note.\n"
            "\n"
            "Summary here.\n"
            "\n"
            "Here's what I'm tracking:\n"
            "• Send the deck by 5/12 for Maria (due 5/12) — owner: Maria\n"
            "\n"
            "Let me know if you need anything else in the meantime and I'll happily assist.\n"
            "\n"
            "Best,\n"
            "Your Email Agent"
        )

    def test_no_tasks_skips_tracking_section(self) -> None:
        reply = generate_reply(Priority.HIGH, [], "Summary.", persona="Jordan")
        assert reply.subject == "Action needed"
        assert "Here's what I'm tracking" not in reply.body
        assert reply.body.startswith("Hi Jordan, thanks for the details.")
        assert reply.body.endswith("\n\nBest,\nYour Email Agent")
