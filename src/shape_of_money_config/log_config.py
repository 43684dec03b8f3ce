"""Logging setup for hosts embedding the engine."""

from __future__ import annotations

import logging

from .settings import Settings, get_settings


def configure_logging(settings: Settings | None = None) -> None:
    """Configure logging for the budget engine."""
    settings = settings or get_settings()
    log_level = getattr(logging, settings.log_level.upper(), logging.INFO)

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    # Set level for our package specifically
    logging.getLogger("shape_of_money").setLevel(log_level)
