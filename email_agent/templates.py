"""
Tone template catalog shared by the reply and outbound composers.
"""

from types import MappingProxyType
from typing import Mapping

from .models import Template, Tone


TEMPLATES: Mapping[Tone, Template] = MappingProxyType(
    {
        Tone.PROFESSIONAL: Template(
            subject="Quick follow-up on your message",
            opening="Thank you for reaching out. I wanted to follow up on your note.",
            closing=(
                "Let me know if you need anything else in the meantime and "
                "I'll happily assist."
            ),
        ),
        Tone.FRIENDLY: Template(
            subject="Thanks for the update!",
            opening=(
                "Thanks a bunch for the message. I wanted to keep the momentum going."
            ),
            closing="Looking forward to hearing back when you have a moment.",
        ),
        Tone.CONCISE: Template(
            subject="Following up",
            opening="Appreciate the note. Here's what we'll do next:",
            closing="Ping me if priorities change.",
        ),
        Tone.ASSERTIVE: Template(
            subject="Action needed",
            opening=(
                "Thanks for the details. To keep us on schedule we need to "
                "tackle the following:"
            ),
            closing=(
                "Please confirm the action items so we can close the loop "
                "without delay."
            ),
        ),
        Tone.WARM: Template(
            subject="Appreciate the note",
            opening=(
                "Thank you so much for your thoughtful message. Here's how "
                "I'll move things forward:"
            ),
            closing="Let me know how it all lands—always glad to support where I can.",
        ),
    }
)


def get_template(tone: Tone) -> Template:
    """Return the template for a tone (accepts the enum or its string value)."""
    return TEMPLATES[Tone(tone)]


__all__ = ["TEMPLATES", "get_template"]
