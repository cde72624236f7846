"""
Load package configuration from yaml, with optional user overrides.
"""

# std
from pathlib import Path

# third-party
import yaml
from loguru import logger
from platformdirs import user_config_path


# ---------------------------------------------------------------------------- #
CACHE = {}
FILENAME = 'config.yaml'
SOURCE = Path(__file__).parent / FILENAME


# ---------------------------------------------------------------------------- #

def user_file(pkg='inkwell'):
    """Path to the (optional) user config file for the package."""
    return user_config_path(pkg) / FILENAME


def load_yaml(filename):
    with Path(filename).open('r', encoding='utf-8') as file:
        return yaml.safe_load(file) or {}


def load(filename):
    """Load a yaml config file, caching the result by path."""
    filename = Path(filename)
    if filename not in CACHE:
        CACHE[filename] = _load(filename)

    return CACHE[filename]


def _load(filename):
    if filename.exists():
        logger.debug("Loading config file: '{}'.", filename)
        return load_yaml(filename)

    raise FileNotFoundError(f"Non-existent file: '{filename!s}'")


def merge(defaults, overrides):
    """Recursively update nested mapping `defaults` with `overrides`."""
    merged = dict(defaults)
    for key, val in dict(overrides).items():
        if isinstance(val, dict) and isinstance(merged.get(key), dict):
            merged[key] = merge(merged[key], val)
        else:
            merged[key] = val
    return merged


# Node
# ---------------------------------------------------------------------------- #

class ConfigNode(dict):
    """
    Nested config mapping that also supports attribute access to its items.
    """

    @classmethod
    def load(cls, filename=None, defaults=SOURCE):
        assert filename or defaults
        config = load(defaults) if defaults else {}
        if filename and Path(filename).exists():
            logger.info("Found user config file: '{}'.", filename)
            config = merge(config, load(filename))
        return cls(config)

    def __init__(self, *args, **kws):
        super().__init__(*args, **kws)
        for key, val in self.items():
            if isinstance(val, dict) and not isinstance(val, ConfigNode):
                super().__setitem__(key, type(self)(val))

    def __getattr__(self, key):
        """
        Try to get the value in the dict associated with key `key`. If `key`
        is not a key in the dict, try get the attribute from the parent class.
        """
        return self[key] if key in self else super().__getattribute__(key)


# ---------------------------------------------------------------------------- #
CONFIG = ConfigNode.load(user_file())
