import logging

from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

from mastermind_solver.config import DEFAULT_LOG_LEVEL


def setup_logging(level: str = DEFAULT_LOG_LEVEL, console: Optional[Console] = None) -> None:
    """
    Routes the package's log records through rich. Game output is printed separately and is not affected.
    """
    handler = RichHandler(console=console or Console(stderr=True), show_path=False, rich_tracebacks=True)
    handler.setFormatter(logging.Formatter("%(message)s"))

    root = logging.getLogger("mastermind_solver")
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(getattr(logging, level.upper()))
