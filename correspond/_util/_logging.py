import logging
import sys

import colorlog

_PRINTK_PREFIXES = {
    logging.CRITICAL: "<2>",
    logging.ERROR: "<3>",
    logging.WARNING: "<4>",
    logging.INFO: "<6>",
    logging.DEBUG: "<7>",
}
_LOG_COLORS = {
    "DEBUG": "light_black",
    "INFO": "reset",
    "WARNING": "yellow",
    "ERROR": "red",
    "CRITICAL": "bold_red",
}


def configure_logging(level, color=True):
    """Log to stderr, colored if it is a tty and `color` is enabled.

    Without colors, every line gets a printk style level prefix instead, so
    the level is still visible, e.g. in the journal.
    """
    root = logging.getLogger()
    root.setLevel(level)

    if len(root.handlers) == 0:
        handler = logging.StreamHandler()
        handler.setFormatter(_formatter(color and sys.stderr.isatty()))
        root.addHandler(handler)


def _formatter(color):
    if color:
        return colorlog.ColoredFormatter(
            "%(light_black)s%(name)s %(log_color)s%(message)s",
            log_colors=_LOG_COLORS,
        )
    return _PrintKFormatter("%(level_prefix)s%(name)s %(message)s")


class _PrintKFormatter(logging.Formatter):
    def format(self, record):
        record.level_prefix = _PRINTK_PREFIXES.get(record.levelno, "")
        return super().format(record)
