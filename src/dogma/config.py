import io
import logging
import os

from collections.abc import Mapping
from typing import List, Tuple

from ruamel.yaml import YAML  # type: ignore
from ruamel.yaml.error import YAMLError  # type: ignore
from xdg import xdg_config_home  # type: ignore

import dogma
from dogma.common import AttrDict, MixedTypeError, merge_layer
from dogma.exceptions import DogmaConfigError

log = logging.getLogger(__name__)  # pylint: disable=invalid-name

safe_yaml = YAML(typ="safe", pure=True)
safe_yaml.default_flow_style = False


def _plain(obj):
    """Turn AttrDicts and tuples into types the YAML dumper knows"""
    if isinstance(obj, Mapping):
        return {key: _plain(val) for key, val in obj.items()}
    if isinstance(obj, (list, tuple)):
        return [_plain(val) for val in obj]
    return obj


def to_yaml(obj) -> str:
    """Render a config value as YAML"""
    buf = io.StringIO()
    safe_yaml.dump(_plain(obj), buf)
    text = buf.getvalue()
    # plain scalars at document level get an end marker
    if text.endswith("\n...\n"):
        text = text[:-len("...\n")]
    return text


def read_layers(conffiles: List[str]) -> List[Tuple[str, Mapping]]:
    """Parse each file in ``conffiles``

    Empty files are skipped.

    Returns:
      List of filename and parsed content
    """
    layers = []
    for fname in conffiles:
        log.debug("Loading config file '%s'", fname)
        try:
            with open(fname, "r") as fdes:
                data = safe_yaml.load(fdes)
        except YAMLError as exc:
            raise DogmaConfigError(fname, f"Malformed config file:\n{exc}") from exc
        except OSError as exc:
            raise DogmaConfigError(fname, f"Unable to read config file: {exc}") from exc
        if data is None:
            continue
        if not isinstance(data, Mapping):
            raise DogmaConfigError(
                fname, "Config file must contain a mapping at the top level")
        layers.append((fname, data))
    return layers


def merge_layers(layers: List[Tuple[str, Mapping]]) -> AttrDict:
    """Merge parsed config layers, later layers taking precedence"""
    config: dict = {}
    for fname, data in layers:
        try:
            merge_layer(config, data)
        except MixedTypeError as exc:
            raise DogmaConfigError(fname, str(exc), exc.key) from exc
    return AttrDict(config)


def load(conffiles: List[str]) -> AttrDict:
    """Load and merge the YAML files in ``conffiles``

    Files later in the list override values from earlier ones, key by
    key for nested mappings.
    """
    return merge_layers(read_layers(conffiles))


class ConfigMgr(object):
    """Manages dogma configuration

    This is a singleton object of which only one instance should be
    around at a given time. It is available via `dogma.get_config()`.

    ConfigMgr loads the configuration from the ``dogma.yml`` in the
    work directory (or a parent), the user config folder
    (``$XDG_CONFIG_HOME/dogma``) and the installation ``etc`` folder.
    """
    CONF_FNAME = 'dogma.yml'
    CONF_DEFAULT_FNAME = dogma._defaults_file
    CONF_USER_FNAME = os.path.join(str(xdg_config_home()), "dogma", CONF_FNAME)

    __instance = None

    @classmethod
    def find_config(cls):
        """Locates dogma config files

        The stack of config files comprises 1. the default config
        ``ConfigMgr.CONF_DEFAULT_FNAME``, 2. the user config
        ``ConfigMgr.CONF_USER_FNAME`` and 3. the first ``dogma.yml``
        found in the current directory or its parents.

        Returns:
          root: Directory holding the local config, or the CWD
          conffiles: list of active configuration files
        """
        # always include defaults
        conffiles = [cls.CONF_DEFAULT_FNAME]

        # include user config if present
        if os.path.exists(cls.CONF_USER_FNAME):
            conffiles.append(cls.CONF_USER_FNAME)

        filename = cls.CONF_FNAME
        log.debug("Locating '%s'", filename)
        curpath = os.path.abspath(os.getcwd())
        while not os.path.exists(os.path.join(curpath, filename)):
            log.debug("  not in '%s'", curpath)
            curpath, removed = os.path.split(curpath)
            if not removed:
                break
        if os.path.exists(os.path.join(curpath, filename)):
            root = curpath
            log.debug("  Found '%s' in '%s'", filename, curpath)
            conffiles.append(os.path.join(root, filename))
        else:
            root = os.path.abspath(os.getcwd())
            log.debug("  No '%s' found; using %s as root", filename, root)

        return root, conffiles

    @classmethod
    def instance(cls):
        """Returns the active ConfigMgr instance"""
        if cls.__instance is None:
            cls.__instance = cls(*cls.find_config())
        return cls.__instance

    @classmethod
    def unload(cls):
        log.debug("Unloading ConfigMgr")
        cls.__instance = None

    def __init__(self, root, conffiles):
        log.debug("Initializing ConfigMgr")
        self.root = root
        self.conffiles = conffiles
        self._layers = read_layers(conffiles)
        self._config = merge_layers(self._layers)

    def to_yaml(self, show_source=False):
        """Render the merged config, or each file separately"""
        if not show_source:
            return to_yaml(self._config)
        buf = io.StringIO()
        for fname, layer in self._layers:
            buf.write(f"--- # from '{fname}' # ---\n")
            buf.write(to_yaml(layer))
        return buf.getvalue()

    def _section(self, key):
        try:
            return getattr(self._config, key)
        except AttributeError:
            raise DogmaConfigError(
                self.conffiles[-1] if self.conffiles else None,
                f"Missing config section '{key}'", key
            ) from None

    @property
    def display(self):
        """
        Settings for showing sequences on the terminal
        """
        return self._section("display")

    @property
    def fasta(self):
        """
        Settings for FASTA output
        """
        return self._section("fasta")

    @property
    def help(self):
        """
        Hints explaining each stage to a learner
        """
        return self._section("help")

    @property
    def separator(self) -> str:
        """
        String placed between amino acid codes
        """
        return str(self.display.separator)
