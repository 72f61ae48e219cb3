# src/html_inspector/utils/configure_logging.py
import logging
import sys
from typing import Any, Mapping, Optional, Union

from tqdm import tqdm

Level = Union[str, int]

LOG_FORMAT = "%(asctime)s - %(levelname)s - [%(name)s:%(lineno)d] - %(message)s"


class LogWithTqdm(logging.Handler):
    """
    Logging handler that writes through `tqdm.write()`, so log lines printed
    while several documents are inspected do not break the progress bar.
    """
    def emit(self, record):
        try:
            tqdm.write(self.format(record), file=sys.stderr)
            self.flush()
        except Exception:
            self.handleError(record)


def to_level(level: Optional[Level], fallback: int) -> int:
    """Turns a level name ('debug', 'WARNING') or number into a logging level."""
    if level is None:
        return fallback
    if isinstance(level, str):
        value = logging.getLevelName(level.upper())
        return value if isinstance(value, int) else fallback
    return level


def configure_logger(
        general_level: Level = 'WARNING',
        module_specific_levels: Optional[Mapping[str, Level]] = None,
        silenced_loggers: Optional[Mapping[str, Level]] = None
) -> logging.Logger:
    """
    Installs the tqdm-friendly handler on the root logger.

    Args:
        general_level: Root level (settings key `logging.level`).
        module_specific_levels: Logger name -> level, e.g.
            {"html_inspector.modules.css": "DEBUG"} (settings key `logging.modules`).
        silenced_loggers: Noisy third-party loggers such as urllib3 -> level,
            CRITICAL when the level is unknown (settings key `logging.silenced`).

    Returns:
        logging.Logger: The configured root logger.
    """
    handler = LogWithTqdm()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))

    root_logger = logging.getLogger()
    root_logger.setLevel(to_level(general_level, logging.WARNING))
    root_logger.handlers.clear()
    root_logger.addHandler(handler)

    for name, level in (module_specific_levels or {}).items():
        logging.getLogger(name).setLevel(to_level(level, logging.INFO))

    for name, level in (silenced_loggers or {}).items():
        logging.getLogger(name).setLevel(to_level(level, logging.CRITICAL))

    return root_logger


def configure_from_settings(settings: Any, level_override: Optional[Level] = None) -> logging.Logger:
    """
    Configures logging from the `logging` section of a SettingsManager.

    A level given on the command line wins over `logging.level`.
    """
    return configure_logger(
        general_level=level_override or settings.get_nested("logging.level", "WARNING"),
        module_specific_levels=settings.get_nested("logging.modules"),
        silenced_loggers=settings.get_nested("logging.silenced"),
    )
