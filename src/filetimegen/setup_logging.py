import logging
import sys
from collections.abc import Collection
from logging import Formatter, Logger, StreamHandler

_Level = int | str

PACKAGE = __name__.split('.')[0]

LEVEL_NAMES = {
    logging.DEBUG: 'debug',
    logging.INFO: 'info',
    logging.WARNING: 'warn',
    logging.ERROR: 'error',
    logging.CRITICAL: 'crit'
}


def setup_logging(level: _Level = logging.WARNING) -> None:
    """
    Sends all log records of this package to stderr as `warn: message`.
    stdout is left alone, it only carries generated names.

    `level` applies to the package loggers, everything else stays at WARNING.
    Errors that reach the top are logged by `cli()` itself.
    """
    set_level([logging.getLogger('__main__'), logging.getLogger(PACKAGE)], level)

    rootlog = logging.getLogger()
    rootlog.setLevel(logging.WARNING)

    handler = StreamHandler(sys.stderr)
    handler.setFormatter(Formatter('%(levelname)s: %(message)s'))
    rootlog.addHandler(handler)

    for value, name in LEVEL_NAMES.items():
        logging.addLevelName(value, name)


def set_level(loggers: Logger | Collection[Logger], level: _Level):
    """Sets the log level of one or more loggers."""
    if isinstance(loggers, Logger):
        loggers = [loggers]

    for logger in loggers:
        logger.setLevel(level)
