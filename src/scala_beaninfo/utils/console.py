"""
Central Logging and Console Utilities.

Routes the package's diagnostics through the standard `logging` library,
formatted by `rich`.

The package never touches the root logger. Output only appears once an application
calls :func:`configure_logging` (or attaches its own handlers to the
``scala_beaninfo`` logger). Calling it again swaps the backend console, which is how
tests capture output into an in-memory buffer.
"""

import logging
from typing import Optional, Union

from rich.console import Console
from rich.logging import RichHandler
from rich.theme import Theme

PACKAGE_LOGGER = "scala_beaninfo"

_THEME = Theme(
  {
    "info": "dim cyan",
    "warning": "yellow",
    "error": "bold red",
  }
)

logger = logging.getLogger(PACKAGE_LOGGER)
logger.addHandler(logging.NullHandler())


def configure_logging(level: Union[int, str] = logging.WARNING, console: Optional[Console] = None) -> RichHandler:
  """
  Installs (or replaces) a RichHandler on the package logger.

  Args:
      level: Logging level name or number.
      console (Optional[Console]): Destination console. Defaults to a themed stdout console.

  Returns:
      RichHandler: The handler now attached to the package logger.
  """
  # Remove previous RichHandlers to prevent duplicate logs/wrong destinations
  for handler in list(logger.handlers):
    if isinstance(handler, RichHandler):
      logger.removeHandler(handler)

  rich_handler = RichHandler(
    console=console or Console(theme=_THEME),
    show_time=False,
    show_path=False,
    markup=False,
    rich_tracebacks=True,
  )
  logger.setLevel(level)
  logger.addHandler(rich_handler)
  return rich_handler


def log_debug(msg: str) -> None:
  """
  Logs a diagnostic message on the package logger.

  Args:
      msg (str): The message content.
  """
  logger.debug(msg)


def set_log_level(level: Union[int, str]) -> None:
  """
  Sets the threshold of the package logger without touching its handlers.

  Args:
      level: Logging level name or number.
  """
  logger.setLevel(level)
