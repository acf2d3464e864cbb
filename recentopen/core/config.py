from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, Mapping, Optional, Sequence, Tuple

from recentopen.core.errors import ConfigurationError
from recentopen.core.interfaces import Interface

Command = Callable[[], object]


@dataclass(frozen=True)
class OpenerConfig:
    # None means auto-detect; strings are validated only at dispatch time
    interface: Interface | str | None = None
    override_command: Optional[Command] = None
    use_idle_timer: bool = False
    before_hooks: Tuple[Command, ...] = ()
    after_hooks: Tuple[Command, ...] = ()
    recent_files_enabled: bool = True
    plugins: Tuple[str, ...] = ()


def load_config(
    path: Path,
    *,
    commands: Mapping[str, Command],
    load_plugins: Optional[Callable[[Sequence[str]], None]] = None,
) -> OpenerConfig:
    """Read an OpenerConfig from a JSON file.

    The "plugins" list goes to ``load_plugins`` first, so commands the
    plugins define can be named by the override and hook settings, which
    are looked up in ``commands``. A missing file yields the default
    configuration.
    """
    if not path.exists():
        return OpenerConfig()

    try:
        payload = json.loads(path.read_text(encoding="utf-8"))
    except (json.JSONDecodeError, OSError) as exc:
        raise ConfigurationError(f"Cannot read configuration file {path}: {exc}") from exc

    if not isinstance(payload, dict):
        raise ConfigurationError(f"Configuration file {path} must contain a JSON object")

    interface = payload.get("interface")
    if interface is not None and not isinstance(interface, str):
        raise ConfigurationError("'interface' must be a string or null")

    plugins = payload.get("plugins") or []
    if not isinstance(plugins, list) or not all(isinstance(spec, str) for spec in plugins):
        raise ConfigurationError("'plugins' must be a list of module names")
    if plugins and load_plugins is not None:
        load_plugins(plugins)

    override_name = payload.get("override_command")
    override = _lookup(commands, override_name, "override_command") if override_name else None

    return OpenerConfig(
        interface=interface,
        override_command=override,
        use_idle_timer=_flag(payload, "use_idle_timer", False),
        before_hooks=_hooks(commands, payload, "before_hooks"),
        after_hooks=_hooks(commands, payload, "after_hooks"),
        recent_files_enabled=_flag(payload, "recent_files_enabled", True),
        plugins=tuple(plugins),
    )


def _flag(payload: dict[str, Any], key: str, default: bool) -> bool:
    value = payload.get(key, default)
    if not isinstance(value, bool):
        raise ConfigurationError(f"'{key}' must be true or false")
    return value


def _hooks(commands: Mapping[str, Command], payload: dict[str, Any], key: str) -> Tuple[Command, ...]:
    names = payload.get(key) or []
    if not isinstance(names, list):
        raise ConfigurationError(f"'{key}' must be a list of command names")
    return tuple(_lookup(commands, name, key) for name in names)


def _lookup(commands: Mapping[str, Command], name: Any, key: str) -> Command:
    if not isinstance(name, str) or name not in commands:
        raise ConfigurationError(
            f"Unknown command {name!r} in '{key}'",
            remediation="Define the command before loading the configuration.",
        )
    return commands[name]


__all__ = ["Command", "OpenerConfig", "load_config"]
