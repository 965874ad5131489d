import functools
import logging
import sys

from rich.console import Console
from rich.markup import escape

logging.basicConfig(level=logging.INFO, format="%(levelname)s: %(message)s")

logger = logging.getLogger("raur")
err_console = Console(stderr=True)


def set_verbose(enabled: bool):
    logging.getLogger().setLevel(logging.DEBUG if enabled else logging.INFO)


def handle_errors(func):
    """
    Turn an exception escaping a command handler into a printed error and
    exit status 1. Failed external commands never get here; handlers
    report those themselves and carry on.
    """

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except SystemExit:
            raise
        except Exception as e:
            logger.debug("%s raised", func.__name__, exc_info=True)
            logger.error("%s ▶ %s", func.__name__, e)
            err_console.print(f"[bold red]\\[!] {func.__name__} failed:[/] {escape(str(e))}")
            sys.exit(1)

    return wrapper
