"""
email_agent package

Rule-based email triage (analyze) and outbound draft composition (compose).
"""

from .analysis_engine import (
    AgentError,
    InvalidRequestError,
    MissingInputError,
    UnsupportedModeError,
    analyze_email,
    compose_email,
    handle_request,
    respond,
)

__all__ = [
    "config",
    "logging_config",
    "models",
    "patterns",
    "templates",
    "signals",
    "synthesis",
    "reply",
    "compose",
    "analysis_engine",
    "formatting",
    "cli",
    "AgentError",
    "InvalidRequestError",
    "MissingInputError",
    "UnsupportedModeError",
    "analyze_email",
    "compose_email",
    "handle_request",
    "respond",
]
