"""Structured logging for seqcollection.

The library only emits a handful of events (resets, type violations and
class-name resolution failures). Applications decide where they go with
structlog's own configuration, or with configure_logging() below.
"""

import logging

import structlog

__all__ = ["configure_logging", "get_logger"]


def get_logger() -> "structlog.typing.FilteringBoundLogger":
    """Return the structlog logger used by seqcollection modules."""
    return structlog.get_logger("seqcollection")


def configure_logging(level: int = logging.WARNING) -> None:
    """Filter structlog output below the given stdlib level.

    Args:
        level: Minimum level to emit, e.g. logging.DEBUG to see resets.
    """
    structlog.configure(
        wrapper_class=structlog.make_filtering_bound_logger(level),
    )
