"""
Outbound draft composition from structured intent fields.

The composer turns an audience, an objective, a tone and a handful of
talking points into a complete email: subject, body, a short preview for
list views, and a cadence tip for when to follow up.
"""

from typing import Iterable, List, Optional, Tuple

from .models import ComposeResult, Tone
from .patterns import capitalize, collapse_whitespace
from .templates import get_template

PREVIEW_LENGTH = 140
NO_POINTS_BULLET = "• Key details are included in the attachments."

# Checked in order against the lower-cased objective; first hit wins.
_OBJECTIVE_SUBJECTS: Tuple[Tuple[str, str], ...] = (
    ("update", "Quick project update"),
    ("intro", "Introduction and next steps"),
    ("meeting", "Proposed agenda for our meeting"),
    ("feedback", "Feedback and proposed improvements"),
)

_INFORMAL_TONES = (Tone.FRIENDLY, Tone.WARM)

CADENCE_ASSERTIVE = "Set a reminder to nudge the recipient within 1 business day."
CADENCE_CONCISE = "Share a short recap if you do not hear back within 2 days."
CADENCE_DEFAULT = "Send a friendly check-in if there's no response within 3 days."
CADENCE_SCANNING_TIP = " Consider bolding the key decisions to make scanning easier."


def clean_key_points(key_points: Iterable[str]) -> List[str]:
    """Trim points, drop blank ones, and strip a single leading "-" marker."""
    cleaned: List[str] = []
    for point in key_points:
        point = point.strip()
        if not point:
            continue
        if point.startswith("-"):
            point = point[1:].strip()
        cleaned.append(point)
    return cleaned


def craft_subject(objective: str, fallback: str) -> str:
    if not objective:
        return fallback

    normalized = objective.lower()
    for keyword, subject in _OBJECTIVE_SUBJECTS:
        if keyword in normalized:
            return subject
    return capitalize(objective)


def craft_opening(template_opening: str, audience: str, tone: Tone) -> str:
    recipient = audience.strip()
    if not recipient:
        return template_opening

    greeting = "Hi" if tone in _INFORMAL_TONES else "Hello"
    softened = template_opening
    if softened.startswith("Thank you"):
        softened = "thank you" + softened[len("Thank you"):]
    elif softened.startswith("Thanks"):
        softened = "thanks" + softened[len("Thanks"):]
    return f"{greeting} {recipient}, {softened}"


def default_signoff(tone: Tone) -> str:
    if tone in _INFORMAL_TONES:
        return "All the best,\nYour Email Agent"
    return "Best regards,\nYour Email Agent"


def build_preview(body: str) -> str:
    condensed = collapse_whitespace(body)
    if len(condensed) > PREVIEW_LENGTH:
        return condensed[:PREVIEW_LENGTH] + "..."
    return condensed


def build_cadence_tip(tone: Tone, clean_points: List[str]) -> str:
    if tone == Tone.ASSERTIVE:
        base = CADENCE_ASSERTIVE
    elif tone == Tone.CONCISE:
        base = CADENCE_CONCISE
    else:
        base = CADENCE_DEFAULT

    if len(clean_points) > 2:
        return base + CADENCE_SCANNING_TIP
    return base


def compose_draft(
    audience: str,
    objective: str,
    tone: Tone,
    key_points: Iterable[str],
    call_to_action: Optional[str] = None,
    signature: Optional[str] = None,
) -> ComposeResult:
    """
    Assemble the outbound draft.

    Inputs are taken as given; trimming of free-text fields happens in the
    engine before this is called.
    """
    tone = Tone(tone)
    template = get_template(tone)
    clean_points = clean_key_points(key_points)

    lines: List[str] = [craft_opening(template.opening, audience, tone), ""]

    if objective:
        lines.append(f"Objective: {capitalize(objective)}")
        lines.append("")

    if clean_points:
        lines.extend(f"• {capitalize(point)}" for point in clean_points)
    else:
        lines.append(NO_POINTS_BULLET)

    if call_to_action:
        lines.append("")
        lines.append(f"Next up: {capitalize(call_to_action)}.")

    lines.append("")
    lines.append(template.closing)
    lines.append("")
    lines.append(signature if signature else default_signoff(tone))

    body = "\n".join(lines)

    return ComposeResult(
        subject=craft_subject(objective, template.subject),
        preview=build_preview(body),
        body=body,
        cadence_tip=build_cadence_tip(tone, clean_points),
    )


__all__ = [
    "PREVIEW_LENGTH",
    "clean_key_points",
    "craft_subject",
    "craft_opening",
    "default_signoff",
    "build_preview",
    "build_cadence_tip",
    "compose_draft",
]
