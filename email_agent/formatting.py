"""
Markdown formatting and output helpers for analysis and compose results.
"""

from pathlib import Path

from .models import AnalysisResult, ComposeResult


def generate_analysis_text(result: AnalysisResult) -> str:
    """Convert an AnalysisResult into a human-readable markdown string."""
    lines: list[str] = []

    lines.append(f"# Email Triage — {result.subject_suggestion}")
    lines.append("")
    lines.append(f"- **Priority:** {result.priority.value}")
    lines.append(f"- **Sentiment:** {result.sentiment.value}")
    lines.append(f"- **Tags:** {', '.join(result.tags)}")
    lines.append("")

    # ------------------------------------------------------------------
    # Summary
    # ------------------------------------------------------------------
    lines.append("## Summary")
    lines.append("")
    lines.append(result.summary)
    lines.append("")

    # ------------------------------------------------------------------
    # Tasks
    # ------------------------------------------------------------------
    lines.append("## Tasks")
    lines.append("")
    if not result.tasks:
        lines.append("_No tasks found in this email._")
    else:
        for idx, task in enumerate(result.tasks, start=1):
            lines.append(f"{idx}. {task.description}")
            if task.due:
                lines.append(f"   - **Due:** {task.due}")
            if task.owner:
                lines.append(f"   - **Owner:** {task.owner}")
    lines.append("")

    # ------------------------------------------------------------------
    # Follow-up and reply
    # ------------------------------------------------------------------
    lines.append("## Follow-up")
    lines.append("")
    lines.append(result.follow_up_recommendation)
    lines.append("")

    lines.append("## Recommended Reply")
    lines.append("")
    lines.append(f"**Subject:** {result.recommended_reply.subject}")
    lines.append("")
    lines.append("```")
    lines.append(result.recommended_reply.body)
    lines.append("```")

    lines.append("")  # final newline

    return "\n".join(lines)


def generate_compose_text(result: ComposeResult) -> str:
    """Convert a ComposeResult into a human-readable markdown string."""
    lines = [
        f"# Draft — {result.subject}",
        "",
        f"_{result.preview}_",
        "",
        "```",
        result.body,
        "```",
        "",
        f"**Cadence:** {result.cadence_tip}",
        "",
    ]
    return "\n".join(lines)


def write_output_to_file(path: Path, text: str) -> Path:
    """Write rendered text to path, creating parent directories."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return path
