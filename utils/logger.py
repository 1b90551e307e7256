"""
Logging utilities
"""
import logging
from rich.logging import RichHandler
from rich.console import Console

from config.settings import LOG_LEVEL

# Global console for rich output
console = Console()

# Libraries whose INFO output would drown the sync progress lines
QUIET_LOGGERS = ("aiohttp.access", "aiohttp.client", "asyncio", "urllib3")


def setup_logging(level: str = LOG_LEVEL, rich_console: Console = console) -> int:
    """
    Route all logging through a rich handler with markup enabled, so
    progress lines can carry [red]...[/red] styling.

    Returns the numeric level in effect. Unknown level names fall back to INFO.
    """
    numeric_level = logging.getLevelName(level.upper())
    if not isinstance(numeric_level, int):
        numeric_level = logging.INFO

    logging.basicConfig(
        level=numeric_level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[
            RichHandler(
                console=rich_console,
                rich_tracebacks=True,
                show_path=False,
                markup=True
            )
        ],
        force=True,
    )

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(max(numeric_level, logging.WARNING))
    return numeric_level


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance"""
    return logging.getLogger(name)
