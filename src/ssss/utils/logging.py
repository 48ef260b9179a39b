"""Logger factory shared by the package modules."""

from __future__ import annotations

import logging

ROOT_LOGGER = "ssss"

logging.getLogger(ROOT_LOGGER).addHandler(logging.NullHandler())


def get_logger(name: str) -> logging.Logger:
    """Return the ``ssss.<name>`` logger."""
    return logging.getLogger(f"{ROOT_LOGGER}.{name}")
