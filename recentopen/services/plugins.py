"""Plugin loading.

A plugin is a module exposing ``init(host)`` (or another function named
as ``module:function``). It receives the EditorHost and registers its
commands and mode flags, e.g. ``host.define_command("helm-recentf", ...)``
and ``host.set_mode("helm-mode")``.

Plugins come from the "plugins" list in config.json and from installed
distributions advertising the ``recentopen.plugins`` entry point group.
"""
from __future__ import annotations

import importlib
import logging
from importlib.metadata import entry_points
from typing import Callable, Sequence

from recentopen.core.errors import PluginError
from recentopen.services.editor_host import EditorHost

ENTRY_POINT_GROUP = "recentopen.plugins"
DEFAULT_SETUP_FUNCTION = "init"

logger = logging.getLogger(__name__)


def load_plugins(host: EditorHost, specs: Sequence[str]) -> None:
    for spec in specs:
        _setup(host, spec, _resolve(spec))


def load_entry_point_plugins(host: EditorHost) -> None:
    for ep in entry_points(group=ENTRY_POINT_GROUP):
        try:
            setup = ep.load()
        except Exception as exc:
            raise PluginError(f"Cannot load plugin {ep.name!r}: {exc}") from exc
        _setup(host, ep.name, setup)


def _resolve(spec: str) -> Callable[[EditorHost], object]:
    module_name, _, attr = spec.partition(":")
    try:
        module = importlib.import_module(module_name)
    except ImportError as exc:
        raise PluginError(f"Cannot import plugin {spec!r}: {exc}") from exc
    setup = getattr(module, attr or DEFAULT_SETUP_FUNCTION, None)
    if not callable(setup):
        raise PluginError(f"Plugin {spec!r} has no {attr or DEFAULT_SETUP_FUNCTION}(host) function")
    return setup


def _setup(host: EditorHost, name: str, setup: Callable[[EditorHost], object]) -> None:
    try:
        setup(host)
    except Exception as exc:
        raise PluginError(f"Plugin {name!r} failed to initialize: {exc}") from exc
    logger.info("Plugin loaded", extra={"plugin": name})


__all__ = ["load_plugins", "load_entry_point_plugins", "ENTRY_POINT_GROUP"]
