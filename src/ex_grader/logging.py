from __future__ import annotations

import sys

from loguru import logger


def setup_logging(level: str = "INFO") -> None:
    """
    Configures loguru for the ex_grader library.

    This function enables "ex_grader" logs and sets up a standard format
    that includes the bound `exercise_type`.
    """
    logger.remove()
    logger.configure(extra={"exercise_type": "-"})

    fmt = (
        "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
        "<level>{level: <8}</level> | "
        "<cyan>{extra[exercise_type]}</cyan> - "
        "<level>{message}</level>"
    )

    logger.add(sys.stderr, format=fmt, level=level)
    logger.enable("ex_grader")
