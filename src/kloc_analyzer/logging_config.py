"""
Logging for kloc-analyzer.

Records go through a RichHandler on stderr so stdout stays clean for
``--json``. The level comes from the configured verbosity:

    quiet    ERROR
    normal   WARNING
    verbose  DEBUG (with timestamps and source paths)
"""

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

ROOT_LOGGER = "kloc_analyzer"

LEVELS = {
    "quiet": logging.ERROR,
    "normal": logging.WARNING,
    "verbose": logging.DEBUG,
}


def setup_logging(verbosity: str = "normal", log_file: Optional[str] = None) -> logging.Logger:
    """
    Install the rich handler and set the package log level.

    Args:
        verbosity: One of ``quiet``, ``normal`` or ``verbose``
        log_file: Optional file that also receives every record at the same level

    Returns:
        The ``kloc_analyzer`` logger

    Raises:
        ValueError: If ``verbosity`` is not a known level name
    """
    if verbosity not in LEVELS:
        raise ValueError(f"Unknown verbosity: {verbosity!r}")
    level = LEVELS[verbosity]
    detailed = verbosity == "verbose"

    handlers: list[logging.Handler] = [
        RichHandler(
            console=Console(stderr=True),
            rich_tracebacks=True,
            tracebacks_show_locals=detailed,
            # Emails and commit subjects may contain [brackets]
            markup=False,
            show_time=detailed,
            show_path=detailed,
        )
    ]

    if log_file:
        file_handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
        file_handler.setFormatter(
            logging.Formatter(
                "%(asctime)s - %(name)s - %(levelname)s - %(message)s", datefmt="%Y-%m-%d %H:%M:%S"
            )
        )
        handlers.append(file_handler)

    # force=True so repeated runs in one process (tests, the API) replace old handlers
    logging.basicConfig(
        level=level, format="%(message)s", datefmt="[%X]", handlers=handlers, force=True
    )

    logger = logging.getLogger(ROOT_LOGGER)
    logger.setLevel(level)
    return logger


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return ``name`` as a child of the ``kloc_analyzer`` logger."""
    if name is None:
        return logging.getLogger(ROOT_LOGGER)
    if not name.startswith(ROOT_LOGGER):
        name = f"{ROOT_LOGGER}.{name}"
    return logging.getLogger(name)
