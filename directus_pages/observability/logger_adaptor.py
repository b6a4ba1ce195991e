"""Named loguru loggers shared by the whole application.

Every record carries the component name in ``extra["logger_name"]``.
Levels are checked per component, so ``get_logger(name, "DEBUG")`` makes
one module verbose while the stderr sink stays at ``LOG_LEVEL``.
"""

import sys
from typing import Any, Dict, Optional

from loguru import logger as _loguru_logger

from directus_pages.constants import LOG_LEVEL

LOG_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> <blue>[{level}]</blue> "
    "<cyan>{extra[logger_name]}</cyan> - <level>{message}</level>"
)

ROOT_LOGGER_NAME = "directus_pages"

_loggers: Dict[str, "PagesLogger"] = {}
_default_level = LOG_LEVEL


class PagesLogger:
    """A loguru logger bound to one component, with its own threshold."""

    def __init__(self, name: str, level: Optional[str] = None) -> None:
        self.name = name
        self.level = (level or _default_level).upper()
        self._log = _loguru_logger.bind(logger_name=name)

    def enabled_for(self, level: str) -> bool:
        return _loguru_logger.level(level).no >= _loguru_logger.level(self.level).no

    def _emit(self, level: str, msg: str, *args: Any, exception: bool = False, **kwargs: Any) -> None:
        if not self.enabled_for(level):
            return
        # depth=2 attributes the record to the caller of info()/error()/...
        self._log.opt(depth=2, exception=exception).log(level, msg, *args, **kwargs)

    def debug(self, msg: str, *args: Any, **kwargs: Any) -> None:
        self._emit("DEBUG", msg, *args, **kwargs)

    def info(self, msg: str, *args: Any, **kwargs: Any) -> None:
        self._emit("INFO", msg, *args, **kwargs)

    def warning(self, msg: str, *args: Any, **kwargs: Any) -> None:
        self._emit("WARNING", msg, *args, **kwargs)

    def error(self, msg: str, *args: Any, **kwargs: Any) -> None:
        self._emit("ERROR", msg, *args, **kwargs)

    def exception(self, msg: str, *args: Any, **kwargs: Any) -> None:
        self._emit("ERROR", msg, *args, exception=True, **kwargs)


def setup_logging(level: str = LOG_LEVEL) -> int:
    """Replace loguru's sinks with one stderr sink and return its id.

    Every component logger is reset to ``level``.
    """
    global _default_level
    _default_level = level.upper()
    _loguru_logger.remove()
    _loguru_logger.configure(extra={"logger_name": ROOT_LOGGER_NAME})
    for existing in _loggers.values():
        existing.level = _default_level
    return _loguru_logger.add(sys.stderr, format=LOG_FORMAT, level=_default_level, colorize=True)


def get_logger(name: Optional[str] = None, level: Optional[str] = None) -> PagesLogger:
    """Return the cached logger for ``name``; ``level`` overrides its threshold."""
    name = name or ROOT_LOGGER_NAME
    if name not in _loggers:
        _loggers[name] = PagesLogger(name, level)
    elif level is not None:
        _loggers[name].level = level.upper()
    return _loggers[name]
