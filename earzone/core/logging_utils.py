"""Logging utilities for earzone.

Provides a consistent logger hierarchy and formatting without modifying the
process root logger. All earzone code obtains loggers via get_logger().
"""
from __future__ import annotations

import logging
import sys
from typing import Optional, Union

_FORMAT = logging.Formatter('%(levelname)s %(name)s: %(message)s')


def _ensure_earzone_root() -> logging.Logger:
    """Ensure the 'earzone' logger has a single stream handler and is isolated
    from the process root logger. Returns the 'earzone' logger.
    """
    root = logging.getLogger('earzone')
    # NullHandler from the package __init__ would swallow output; replace it
    has_non_null = any(not isinstance(h, logging.NullHandler) for h in root.handlers)
    if not has_non_null:
        for h in list(root.handlers):
            root.removeHandler(h)
        handler = logging.StreamHandler(stream=sys.stdout)
        handler.setFormatter(_FORMAT)
        root.addHandler(handler)
    root.propagate = False
    return root


def _to_level(level: Union[str, int, None], default: int = logging.INFO) -> int:
    if level is None:
        return default
    if isinstance(level, int):
        return level
    lvl = getattr(logging, str(level).upper(), None)
    return lvl if isinstance(lvl, int) else default


def configure_logging(level: Union[str, int] = 'INFO', mute_external: bool = True) -> None:
    """Configure the 'earzone' logger family level and optional external noise suppression.

    This does NOT modify the process root logger.
    """
    root = _ensure_earzone_root()
    lvl = _to_level(level)
    root.setLevel(lvl)
    # matplotlib is chatty at DEBUG (font cache scans)
    if mute_external and lvl <= logging.DEBUG:
        for noisy in ('matplotlib', 'matplotlib.font_manager', 'PIL'):
            logging.getLogger(noisy).setLevel(logging.INFO)


def get_logger(name: str, level: Optional[Union[str, int]] = None) -> logging.Logger:
    """Return a logger under the 'earzone' namespace.

    Without an explicit level the logger is left at NOTSET so it inherits
    from the 'earzone' parent configured via configure_logging().
    """
    log = logging.getLogger(name)
    if level is not None:
        log.setLevel(_to_level(level))
    return log


__all__ = ['get_logger', 'configure_logging']
