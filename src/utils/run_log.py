"""Run log: one logger mirrored to the console and to an append-only file.

The logger is handed to every component instead of module-level handles;
handlers only live for the duration of the `run_logging` block.
"""

from __future__ import annotations

import logging
import os
from contextlib import contextmanager
from typing import Iterator, Optional

from rich.console import Console
from rich.logging import RichHandler

LOGGER_NAME = "gpu_bench_installer"
FILE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


@contextmanager
def run_logging(
    log_path: str,
    console: Optional[Console] = None,
    level: int = logging.INFO,
) -> Iterator[logging.Logger]:
    """Attach file and console handlers for the duration of a run.

    The file is opened in append mode; both handlers are removed and closed on
    exit, including when the body raises.
    """
    directory = os.path.dirname(os.path.abspath(log_path))
    os.makedirs(directory, exist_ok=True)

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    logger.propagate = False

    file_handler = logging.FileHandler(log_path, mode="a", encoding="utf-8")
    file_handler.setFormatter(logging.Formatter(FILE_FORMAT))
    console_handler = RichHandler(
        console=console or Console(stderr=True),
        show_path=False,
        markup=False,
    )
    console_handler.setFormatter(logging.Formatter("%(message)s"))

    logger.addHandler(file_handler)
    logger.addHandler(console_handler)
    try:
        yield logger
    finally:
        for handler in (file_handler, console_handler):
            logger.removeHandler(handler)
            handler.close()
