"""
Logging and Console Utilities.

Transform outcomes reach the user through the standard `logging` library,
rendered by a `rich` handler. Editor hosts and tests swap the output console
with `set_console` to capture the informational messages of an invocation.
"""

import logging

from rich.console import Console
from rich.logging import RichHandler
from rich.theme import Theme

SUCCESS_LEVEL_NUM = 25
logging.addLevelName(SUCCESS_LEVEL_NUM, "SUCCESS")

_THEME = Theme({"logging.level.success": "green", "path": "bold blue"})


class _ConsoleProxy:
  """
  Holds the active `Console` and keeps the root logger's `RichHandler` bound to it.
  """

  def __init__(self) -> None:
    self.set_backend(Console(theme=_THEME))

  def set_backend(self, new_console: Console) -> None:
    self._backend = new_console

    root_logger = logging.getLogger()
    for handler in list(root_logger.handlers):
      if isinstance(handler, RichHandler):
        root_logger.removeHandler(handler)

    root_logger.setLevel(logging.INFO)
    root_logger.addHandler(
      RichHandler(
        console=new_console,
        show_time=False,
        show_path=False,
        markup=True,
        rich_tracebacks=True,
      )
    )

  @property
  def backend(self) -> Console:
    return self._backend


console = _ConsoleProxy()


def set_console(new_console: Console) -> None:
  """
  Routes all transform messages to `new_console`.

  Args:
      new_console (Console): e.g. a ``Console(record=True)`` owned by an editor host.
  """
  console.set_backend(new_console)


def reset_console() -> None:
  """Routes messages back to a fresh standard output console."""
  console.set_backend(Console(theme=_THEME))


def get_console() -> Console:
  return console.backend


def log_info(msg: str) -> None:
  """
  Logs an informational message verbatim.

  Markup is off so that brackets in class entries (``[`expr`]``) survive.
  """
  logging.info(msg, extra={"markup": False})


def log_success(msg: str) -> None:
  logging.log(SUCCESS_LEVEL_NUM, f"✅ {msg}", extra={"markup": True})


def log_error(msg: str) -> None:
  logging.error(f"❌ {msg}", extra={"markup": True})
