"""Options and logging setup shared by all ``dogma`` commands"""

import logging
import sys

import click
import tqdm
from coloredlogs import ColoredFormatter

log = logging.getLogger(__name__)  # pylint: disable=invalid-name

context_settings = {
    'help_option_names': ['-h', '--help']
}

#: Level of the ``dogma`` logger before ``-v``/``-q`` are applied
DEFAULT_LEVEL = logging.WARNING


class TqdmHandler(logging.StreamHandler):
    """Writes log records through tqdm so they don't break progress bars"""
    def emit(self, record):
        tqdm.tqdm.write(self.format(record), file=sys.stderr)


class LogFormatter(ColoredFormatter):
    """Colors by level, prefixing records from our own loggers"""
    level_styles = {
        'debug': {'color': 'blue'},
        'info': {'color': 'green'},
        'warning': {'color': 'yellow'},
        'error': {'color': 'red'},
        'critical': {'color': 'red', 'bold': True},
    }

    def __init__(self):
        super().__init__("%(prefix)s%(message)s", level_styles=self.level_styles)

    def format(self, record):
        record.prefix = "dogma: " if record.name.startswith("dogma") else ""
        return super().format(record)


class LogState:
    """Logging settings collected from the command line

    One instance lives on the click context. Creating it resets the
    ``dogma`` logger to `DEFAULT_LEVEL` and makes sure the console
    handler is installed exactly once.
    """
    def __init__(self):
        self.logger = logging.getLogger("dogma")
        self.logger.setLevel(DEFAULT_LEVEL)
        root = logging.getLogger()
        if not any(isinstance(hdl, TqdmHandler) for hdl in root.handlers):
            handler = TqdmHandler()
            handler.setFormatter(LogFormatter())
            root.addHandler(handler)

    def shift(self, steps):
        """Raise (positive) or lower (negative) the level by ``steps``"""
        level = self.logger.getEffectiveLevel() + steps * 10
        self.logger.setLevel(min(max(level, logging.DEBUG), logging.CRITICAL))

    def add_file(self, filename):
        handler = logging.FileHandler(filename)
        handler.setFormatter(logging.Formatter(
            "%(asctime)s %(name)s %(levelname)s %(message)s"))
        logging.getLogger().addHandler(handler)


def _shift_level(ctx, param, val):
    state = ctx.ensure_object(LogState)
    if val:
        state.shift(-val if param.name == "verbose" else val)


def _log_file(ctx, _param, val):
    state = ctx.ensure_object(LogState)
    if val:
        state.add_file(val)


def log_options(f):
    """Add ``--verbose``, ``--quiet`` and ``--log-file`` to command ``f``"""
    options = [
        click.option("--verbose", "-v", count=True, expose_value=False,
                     callback=_shift_level, help="Increase log verbosity"),
        click.option("--quiet", "-q", count=True, expose_value=False,
                     callback=_shift_level, help="Decrease log verbosity"),
        click.option("--log-file", metavar="FILE", expose_value=False,
                     callback=_log_file, help="Also write log to FILE"),
    ]
    for option in reversed(options):
        f = option(f)
    return f


def command(*args, **kwargs):
    """Like `click.command`, adding the shared log options"""
    def wrapper(f):
        return click.command(*args, context_settings=context_settings,
                             **kwargs)(log_options(f))
    return wrapper


def group(*args, **kwargs):
    return command(*args, cls=click.Group, **kwargs)