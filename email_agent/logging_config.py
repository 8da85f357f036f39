import logging
from pathlib import Path
from typing import List, Union

LOG_FORMAT = "[%(asctime)s] [%(levelname)s] %(name)s: %(message)s"
LOG_FILE = Path("logs") / "email_agent.log"


def resolve_level(level: Union[int, str]) -> int:
    """Map a level name such as "debug" to its number; unknown names give INFO."""
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.strip().upper())
    return resolved if isinstance(resolved, int) else logging.INFO


def setup_logging(level: Union[int, str] = logging.INFO, log_to_file: bool = False) -> None:
    """
    Configure root logging for the command line.

    Records go to stderr so JSON written to stdout stays parseable; with
    log_to_file they are also appended to logs/email_agent.log.
    """
    handlers: List[logging.Handler] = [logging.StreamHandler()]
    if log_to_file:
        LOG_FILE.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(LOG_FILE, encoding="utf-8"))

    logging.basicConfig(level=resolve_level(level), format=LOG_FORMAT, handlers=handlers)
