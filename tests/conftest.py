"""Shared pytest fixtures."""

import pytest


@pytest.fixture
def demo_email() -> str:
    """A realistic launch-coordination email with three bullet tasks."""
    return (
        "Hey team,\n"
        "\n"
        "Thanks for the sprint updates. We're close, but there are a few items "
        "we need to close before launch:\n"
        "\n"
        "- Update onboarding docs so customers understand the new analytics beta "
        "(please finish by Thursday).\n"
        "- Coordinate with Jordan for the release checklist.\n"
        "- Could you also confirm with finance that the promo codes will stack by 5/12?\n"
        "\n"
        "This is pretty urgent because the announcement is queued up for Friday "
        "morning. Let me know once we're squared away.\n"
        "\n"
        "Really appreciate the hard work here.\n"
        "\n"
        "Best,\n"
        "Alex"
    )


@pytest.fixture
def demo_history() -> str:
    return (
        "Thread summary:\n"
        "- Kickoff call scheduled for May 15\n"
        "- Jordan owns release communication\n"
        "- Finance expects new promo codes by May 12"
    )


@pytest.fixture
def compose_payload() -> dict[str, object]:
    """A compose request in wire (camelCase) form."""
    return {
        "mode": "compose",
        "audience": "Alex",
        "objective": "Share next steps after receiving an update",
        "tone": "professional",
        "keyPoints": [
            "Confirm ownership of onboarding docs",
            "Align on release checklist",
            "Verify promo codes with finance",
        ],
        "callToAction": "Confirm timelines by Thursday EOD",
        "signature": "Jordan\nEngineering Lead",
    }
