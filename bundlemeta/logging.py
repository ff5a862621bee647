"""Logging helpers.

``PprintLogger`` wraps a standard :class:`logging.Logger` so that pydantic
models (descriptors, coordinates) and plain containers such as attribute
mappings are rendered readably when logged.
"""

import inspect
import logging
from pprint import pformat
from typing import Any, Optional

from pydantic import BaseModel

LOG_FORMAT = "%(asctime)s - %(name)s:%(lineno)d - %(levelname)s - %(message)s"


class PprintLogger:
    """A logger wrapper that pretty-prints non-string messages."""

    def __init__(self, logger: logging.Logger):
        self._logger = logger

    def _format_message(self, msg: Any, pprint: bool = True) -> Any:
        if isinstance(msg, str) or not pprint:
            return msg
        if isinstance(msg, BaseModel):
            return msg.model_dump_json(indent=2)
        return pformat(msg, width=120)

    def _log(self, level: int, msg: Any, *args, pprint: bool = True, **kwargs) -> None:
        if not self._logger.isEnabledFor(level):
            return
        kwargs.setdefault("stacklevel", 3)
        self._logger.log(level, self._format_message(msg, pprint=pprint), *args, **kwargs)

    def debug(self, msg: Any, *args, pprint: bool = True, **kwargs) -> None:
        self._log(logging.DEBUG, msg, *args, pprint=pprint, **kwargs)

    def info(self, msg: Any, *args, pprint: bool = True, **kwargs) -> None:
        self._log(logging.INFO, msg, *args, pprint=pprint, **kwargs)

    def warning(self, msg: Any, *args, pprint: bool = True, **kwargs) -> None:
        self._log(logging.WARNING, msg, *args, pprint=pprint, **kwargs)

    def error(self, msg: Any, *args, pprint: bool = True, **kwargs) -> None:
        self._log(logging.ERROR, msg, *args, pprint=pprint, **kwargs)

    def __getattr__(self, name: str) -> Any:
        """Delegate anything else (setLevel, handlers, ...) to the wrapped logger."""
        return getattr(self._logger, name)


def setup_logging(level: Optional[int] = None, name: Optional[str] = None) -> PprintLogger:
    """Return a ``PprintLogger`` for ``name`` (default: the calling module).

    When ``level`` is given, the logger is set to it and gets a stream
    handler if it has none. Library modules call this without a level so
    that the application keeps control of handlers.
    """
    if name is None:
        frame = inspect.currentframe().f_back  # type: ignore[union-attr]
        name = frame.f_globals.get("__name__", "bundlemeta")  # type: ignore[union-attr]
    logger = logging.getLogger(name)
    if level is not None:
        logger.setLevel(level)
        if not logger.handlers:
            handler = logging.StreamHandler()
            handler.setLevel(level)
            handler.setFormatter(logging.Formatter(LOG_FORMAT))
            logger.addHandler(handler)
    return PprintLogger(logger)
