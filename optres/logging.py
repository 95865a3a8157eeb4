import logging
import sys
from rich.highlighter import RegexHighlighter
from rich.logging import RichHandler


class BackTickHighlighter(RegexHighlighter):
    highlights = [r"`(?P<bold>[^`]*)`"]


def logger():
    return logging.getLogger("optres")


def configure_logger(debug: bool, rich: bool = True) -> logging.Logger:
    """Attach a single handler to the `optres` logger. Calling this again
    replaces the previous handler; the root logger is left alone, so host
    applications keep their own configuration."""
    log = logger()
    if rich:
        handler: logging.Handler = RichHandler(
            show_path=debug,
            highlighter=BackTickHighlighter(),
            log_time_format="[%X]",
        )
        handler.setFormatter(logging.Formatter("%(message)s"))
    else:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))

    log.handlers = [handler]
    log.setLevel(logging.DEBUG if debug else logging.INFO)
    return log
