"""Logging setup for applications driving the fixed-step engine."""

import logging
import sys
from typing import IO, Optional, Union

# marks the handler owned by setup_logging so repeated calls replace it
_HANDLER_FLAG = "_fixedstep_handler"

_FORMATS = {
    "structured": '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    "plain": '%(levelname)s - %(message)s',
}


def _resolve_level(level) -> int:
    # RunConfig carries its level as ``log_level``
    level = getattr(level, "log_level", level)
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(str(level).upper())
    return resolved if isinstance(resolved, int) else logging.INFO


def setup_logging(level: Union[str, int, object] = "INFO", format_type: str = "structured",
                  stream: Optional[IO] = None) -> logging.Logger:
    """Attach a stream handler to the ``fixedstep`` logger and return it.

    ``level`` may be a level name, a numeric level or a RunConfig. Unknown
    names fall back to INFO. Calling again swaps the handler installed by
    the previous call; the root logger and handlers added by the
    application are left alone.
    """
    logger = logging.getLogger('fixedstep')
    for h in list(logger.handlers):
        if getattr(h, _HANDLER_FLAG, False):
            logger.removeHandler(h)

    handler = logging.StreamHandler(stream if stream is not None else sys.stdout)
    handler.setFormatter(logging.Formatter(_FORMATS.get(format_type, _FORMATS["plain"])))
    setattr(handler, _HANDLER_FLAG, True)
    logger.addHandler(handler)
    logger.setLevel(_resolve_level(level))

    return logger
