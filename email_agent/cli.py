import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from pydantic import ValidationError
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from .analysis_engine import AgentError, analyze_email, compose_email
from .config import load_config
from .formatting import (
    generate_analysis_text,
    generate_compose_text,
    write_output_to_file,
)
from .logging_config import setup_logging
from .models import AnalysisResult, ComposeResult, Tone
from .templates import TEMPLATES

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _read_text(source: str) -> str:
    if source == "-":
        return sys.stdin.read()
    return Path(source).read_text(encoding="utf-8")


def _render_analysis(result: AnalysisResult) -> None:
    console = Console()

    overview = Table(title="Triage", show_header=False)
    overview.add_column("Field")
    overview.add_column("Value")
    overview.add_row("Subject", Text(result.subject_suggestion))
    overview.add_row("Priority", result.priority.value)
    overview.add_row("Sentiment", result.sentiment.value)
    overview.add_row("Tags", Text(", ".join(result.tags)))
    overview.add_row("Summary", Text(result.summary))
    overview.add_row("Follow-up", result.follow_up_recommendation)
    console.print(overview)

    if result.tasks:
        tasks = Table(title="Tasks")
        tasks.add_column("#")
        tasks.add_column("Description")
        tasks.add_column("Due")
        tasks.add_column("Owner")
        for idx, t in enumerate(result.tasks, start=1):
            tasks.add_row(str(idx), Text(t.description), Text(t.due or ""), Text(t.owner or ""))
        console.print(tasks)

    console.print(
        Panel(
            Text(result.recommended_reply.body),
            title=Text(result.recommended_reply.subject),
            title_align="left",
        )
    )


def _render_compose(result: ComposeResult) -> None:
    console = Console()
    console.print(Panel(Text(result.body), title=Text(result.subject), title_align="left"))
    console.print(Text.assemble(("Preview: ", "bold"), result.preview))
    console.print(Text.assemble(("Cadence: ", "bold"), result.cadence_tip))


def _render_tones() -> None:
    console = Console()
    table = Table(title="Tone Templates")

    table.add_column("Tone")
    table.add_column("Subject")
    table.add_column("Opening")
    table.add_column("Closing")

    for tone, template in TEMPLATES.items():
        table.add_row(tone.value, template.subject, template.opening, template.closing)

    console.print(table)


def _emit(result, as_json: bool, output: Optional[str], text: str) -> None:
    if output:
        content = (
            result.model_dump_json(by_alias=True, exclude_none=True, indent=2)
            if as_json
            else text
        )
        path = write_output_to_file(Path(output), content)
        logger.info("Result written to %s", path)
        return

    if as_json:
        print(result.model_dump_json(by_alias=True, exclude_none=True, indent=2))
    elif isinstance(result, AnalysisResult):
        _render_analysis(result)
    else:
        _render_compose(result)


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------


def cmd_analyze(args: argparse.Namespace) -> None:
    config = load_config()
    content = _read_text(args.source)
    thread_history = _read_text(args.thread) if args.thread else None
    persona = args.persona or config.default_persona

    result = analyze_email(content, thread_history=thread_history, persona=persona)
    as_json = args.json or config.output_format == "json"
    _emit(result, as_json, args.output, generate_analysis_text(result))


def cmd_compose(args: argparse.Namespace) -> None:
    config = load_config()
    key_points: List[str] = list(args.point or [])
    if args.points_file:
        key_points.extend(_read_text(args.points_file).splitlines())

    tone = Tone(args.tone) if args.tone else config.default_tone

    result = compose_email(
        audience=args.audience,
        objective=args.objective,
        tone=tone,
        key_points=key_points,
        call_to_action=args.cta,
        signature=args.signature,
    )
    as_json = args.json or config.output_format == "json"
    _emit(result, as_json, args.output, generate_compose_text(result))


def cmd_tones() -> None:
    _render_tones()


# ---------------------------------------------------------------------------
# Main CLI entrypoint
# ---------------------------------------------------------------------------


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="email-agent",
        description="Rule-based email triage and draft composer.",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    # analyze
    p_analyze = subparsers.add_parser("analyze", help="Triage an incoming email.")
    p_analyze.add_argument(
        "source",
        nargs="?",
        default="-",
        help="File containing the email text, or '-' for stdin (default).",
    )
    p_analyze.add_argument(
        "--thread",
        type=str,
        default=None,
        help="Optional file with earlier messages in the thread.",
    )
    p_analyze.add_argument(
        "--persona",
        type=str,
        default=None,
        help="Name to greet in the recommended reply.",
    )

    # compose
    p_compose = subparsers.add_parser("compose", help="Draft an outbound email.")
    p_compose.add_argument(
        "--objective",
        type=str,
        default="",
        help="What the email should achieve.",
    )
    p_compose.add_argument(
        "--audience",
        type=str,
        default="",
        help="Recipient name used in the greeting.",
    )
    p_compose.add_argument(
        "--tone",
        type=str,
        choices=[t.value for t in Tone],
        default=None,
        help="Tone template. Default: DEFAULT_TONE or 'professional'.",
    )
    p_compose.add_argument(
        "-p",
        "--point",
        action="append",
        default=None,
        help="Key point to include (repeatable).",
    )
    p_compose.add_argument(
        "--points-file",
        type=str,
        default=None,
        help="File with one key point per line.",
    )
    p_compose.add_argument(
        "--cta",
        type=str,
        default=None,
        help="Call to action rendered as 'Next up: ...'.",
    )
    p_compose.add_argument(
        "--signature",
        type=str,
        default=None,
        help="Custom signature; defaults to a tone-based sign-off.",
    )

    for p in (p_analyze, p_compose):
        p.add_argument(
            "--json",
            action="store_true",
            help="Print the result as JSON instead of tables.",
        )
        p.add_argument(
            "-o",
            "--output",
            type=str,
            default=None,
            help="Write the result to this file instead of stdout.",
        )

    # tones
    subparsers.add_parser("tones", help="List the tone templates.")

    return parser


def main(argv: Optional[List[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = load_config()
    except ValidationError as e:
        print(f"Error: invalid configuration: {e.errors()[0]['msg']}", file=sys.stderr)
        sys.exit(1)
    setup_logging(config.log_level, log_to_file=config.log_to_file)

    try:
        if args.command == "analyze":
            cmd_analyze(args)
        elif args.command == "compose":
            cmd_compose(args)
        elif args.command == "tones":
            cmd_tones()
        else:
            parser.error(f"Unknown command: {args.command!r}")
    except AgentError as e:
        logger.warning("Request rejected: %s", e)
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
    except UnicodeDecodeError as e:
        print(f"Error: input is not valid UTF-8 text: {e}", file=sys.stderr)
        sys.exit(1)
    except OSError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
