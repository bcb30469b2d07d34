"""Shared logging helpers for semschema."""

from __future__ import annotations

import logging

RESOLUTION_LOGGER = "semschema.domain.resolution"


def configure_logging(
    *,
    level: int = logging.INFO,
    force: bool = False,
    trace_resolution: bool = False,
) -> None:
    """Set up the root logger for report output.

    ``trace_resolution`` lowers only the resolution loggers to DEBUG so every
    linearization is logged without flooding the rest of the output.
    """

    logging.basicConfig(
        level=level,
        format="%(levelname)s [%(name)s] %(message)s",
        force=force,
    )
    if trace_resolution:
        logging.getLogger(RESOLUTION_LOGGER).setLevel(logging.DEBUG)
