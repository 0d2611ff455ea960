"""
INI-backed settings for jsarray.

Usage (example):
    from jsarray import Array, config
    cfg = config.load_config("jsarray.ini")
    config.configure_logging(cfg)
    Array.configure(config=cfg)

The INI file uses a single section:

    [jsarray]
    iterator_module = jsarray.array_iterator
    iterator_factory = new_iterator
    log_level = WARNING

A missing file or missing keys fall back to the defaults above.
"""
from __future__ import annotations

import configparser
import importlib
import logging
from typing import Callable, Optional

from .errors import ArrayError

_log = logging.getLogger("jsarray.config")

SECTION = "jsarray"
DEFAULTS = {
    "iterator_module": "jsarray.array_iterator",
    "iterator_factory": "new_iterator",
    "log_level": "WARNING",
}


def ensure_section(config) -> None:
    """Ensure the 'jsarray' section exists in the given ConfigParser."""
    if not config.has_section(SECTION):
        config.add_section(SECTION)


def load_config(ini_path: Optional[str] = None) -> configparser.ConfigParser:
    """Return a ConfigParser seeded with DEFAULTS and overlaid with `ini_path` if it exists."""
    cfg = configparser.ConfigParser()
    cfg.read_dict({SECTION: DEFAULTS})
    if ini_path:
        found = cfg.read(ini_path, encoding="utf-8")
        if not found:
            _log.debug("load_config: %s not found, using defaults", ini_path)
    return cfg


def resolve_iterator_factory(config) -> Callable:
    """Import the configured iterator module and return its factory callable."""
    ensure_section(config)
    module_name = config.get(SECTION, "iterator_module", fallback=DEFAULTS["iterator_module"])
    attr_name = config.get(SECTION, "iterator_factory", fallback=DEFAULTS["iterator_factory"])
    try:
        module = importlib.import_module(module_name)
    except ImportError as e:
        raise ArrayError(f"cannot import iterator module '{module_name}': {e}") from e

    factory = getattr(module, attr_name, None)
    if not callable(factory):
        raise ArrayError(f"'{module_name}.{attr_name}' is not a callable iterator factory")
    _log.debug("resolved iterator factory %s.%s", module_name, attr_name)
    return factory


def configure_logging(config) -> int:
    """Apply `log_level` to the 'jsarray' logger. Unknown level names fall back to WARNING."""
    ensure_section(config)
    name = config.get(SECTION, "log_level", fallback=DEFAULTS["log_level"]).strip().upper()
    level = logging.getLevelName(name)
    if not isinstance(level, int):
        _log.warning("unknown log_level %r, using WARNING", name)
        level = logging.WARNING
    logging.getLogger("jsarray").setLevel(level)
    return level
