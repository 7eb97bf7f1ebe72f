import os

from importlib.metadata import version as _dist_version, PackageNotFoundError

try:
    __version__ = _dist_version(__name__)
except PackageNotFoundError:
    __version__ = "0.0.0"


# Paths to files distributed with the package
_rsc_dir = __path__[0]
_etc_dir = os.path.join(_rsc_dir, "etc")
_defaults_file = os.path.join(_etc_dir, "defaults.yml")


from dogma.pipeline import (  # noqa: E402
    validate, transcribe, translate, run, format_protein, Expression
)


def get_config() -> 'dogma.config.ConfigMgr':
    """Access the current dogma configuration object.

    The object is created on first access. Call
    ``dogma.config.ConfigMgr.unload()`` to have it re-read from disk on
    next access (unit tests do this between tests).
    """
    from dogma.config import ConfigMgr
    return ConfigMgr.instance()
