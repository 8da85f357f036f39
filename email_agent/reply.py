"""
Recommended reply assembly for analyzed emails.
"""

from typing import Optional, Sequence

from .models import Priority, RecommendedReply, Task, Tone
from .patterns import LEADING_THANKS
from .templates import get_template

REPLY_SIGNOFF = "Best,\nYour Email Agent"
TRACKING_HEADER = "Here's what I'm tracking:"


def select_reply_tone(priority: Priority) -> Tone:
    return Tone.ASSERTIVE if priority == Priority.HIGH else Tone.PROFESSIONAL


def personalize_opening(opening: str, persona: Optional[str]) -> str:
    """
    Rewrite a leading "Thanks" / "Thank you" into a greeting for persona.

    Openings that don't start with either phrase are returned unchanged.
    """
    if not persona:
        return opening

    def _greet(match) -> str:
        return f"Hi {persona}, {match.group(1).lower()}"

    return LEADING_THANKS.pattern.sub(_greet, opening, count=1)


def format_task_bullet(task: Task) -> str:
    due = f" (due {task.due})" if task.due else ""
    owner = f" — owner: {task.owner}" if task.owner else ""
    return f"• {task.description}{due}{owner}"


def generate_reply(
    priority: Priority,
    tasks: Sequence[Task],
    summary: str,
    persona: Optional[str] = None,
) -> RecommendedReply:
    template = get_template(select_reply_tone(priority))
    intro = personalize_opening(template.opening, persona)

    bullet_section = ""
    if tasks:
        bullets = "\n".join(format_task_bullet(task) for task in tasks)
        bullet_section = f"\n\n{TRACKING_HEADER}\n{bullets}"

    body = (
        f"{intro}\n\n"
        f"{summary}{bullet_section}\n\n"
        f"{template.closing}\n\n"
        f"{REPLY_SIGNOFF}"
    )

    return RecommendedReply(subject=template.subject, body=body)


__all__ = [
    "select_reply_tone",
    "personalize_opening",
    "format_task_bullet",
    "generate_reply",
]
