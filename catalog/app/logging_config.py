"""
Logging setup for the catalog service.

``setup_logging`` attaches a console handler (and optionally a file
handler) to the root logger exactly once, so repeated app creation in
tests does not duplicate output.
"""
import logging
from pathlib import Path
from typing import Optional


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Configure the root logger if nothing has configured it yet.

    Parameters
    ----------
    level : str
        Logging level name, case insensitive. Unknown names fall back
        to ``INFO``.
    logfile : Optional[str]
        Optional path for an extra file handler.
    """
    logger = logging.getLogger()
    if logger.handlers:
        return

    logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    formatter = logging.Formatter(
        fmt="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if logfile:
        file_handler = logging.FileHandler(Path(logfile).resolve(), encoding="utf-8")
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)
