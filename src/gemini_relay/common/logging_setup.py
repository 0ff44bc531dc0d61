"""Central logging setup for the relay."""
from __future__ import annotations
import logging
import sys

LOG_FORMAT = "[%(asctime)s] %(levelname)s %(name)s: %(message)s"

def resolve_level(level: int | str) -> int:
    """
    Turn a level name such as "debug" into its numeric value.

    Unknown names fall back to INFO.
    """
    if isinstance(level, int):
        return level
    value = logging.getLevelName(level.strip().upper())
    return value if isinstance(value, int) else logging.INFO

def setup_logging(level: int | str = logging.INFO) -> None:
    """
    Configure the root logger to write to stdout.

    Args:
        level: Logging level, numeric or by name.
    """
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(resolve_level(level))
    # httpx logs every outbound request line at INFO
    logging.getLogger("httpx").setLevel(logging.WARNING)
