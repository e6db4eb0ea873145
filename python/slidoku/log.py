"""Loguru sink setup shared by the CLI and scripts.

Library modules only ever call ``logger.bind(component=...)``; the sink
and its format are installed here, once, by whoever owns the process.
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import TextIO

from loguru import logger

PALETTE = {
    "generator": "cyan",
    "gameplay": "green",
    "solver": "magenta",
    "scores": "yellow",
    "cli": "blue",
}

# The shuffle engine is chatty at DEBUG; keep it quiet unless asked.
LEVEL_PER_COMPONENT = {
    "generator": "INFO",
}


def component_filter(record) -> bool:
    comp = record["extra"].get("component", "")
    min_level = logger.level(LEVEL_PER_COMPONENT.get(comp, "DEBUG")).no
    return record["level"].no >= min_level


def formatter(record) -> str:
    comp = record["extra"].get("component", "")
    colour = PALETTE.get(comp, "white")
    return (
        "{time:HH:mm:ss} | "
        f"<{colour}>{comp:<10}</> | "
        "<level>{level: <7}</level> | "
        "<level>{message}</level>\n"
    )


def configure_logging(level: str = "INFO", sink: TextIO | Path | None = None) -> None:
    """Replace loguru's default handler with the slidoku format.

    *sink* is a stream or a file path; defaults to stderr.
    """
    target = sys.stderr if sink is None else sink
    logger.remove()
    logger.add(
        target,
        level=level,
        format=formatter,
        filter=component_filter,
        colorize=not isinstance(target, Path),
    )
