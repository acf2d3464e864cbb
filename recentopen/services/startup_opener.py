from __future__ import annotations

import logging
from typing import Any, Callable, Optional, Sequence

from recentopen.core.config import Command, OpenerConfig
from recentopen.core.errors import HookPhaseError, SubsystemDisabledError, UserFacingError
from recentopen.core.interfaces import Interface, parse_interface
from recentopen.services.host import Host
from recentopen.services.providers import (
    DEFAULT_PROVIDERS,
    InterfaceProvider,
    detect_interface,
    provider_for,
)

IDLE_DELAY_SECONDS = 0.1


class StartupRecentOpener:
    """Opens a recent-files picker when startup left no file-backed buffer.

    ``register`` attaches ``run`` to the host's startup lifecycle: as a
    command-line hook by default, or as a one-shot idle timer when the
    config asks for it. Each registration fires once.
    """

    def __init__(
        self,
        host: Host,
        config: OpenerConfig,
        *,
        providers: Sequence[InterfaceProvider] = DEFAULT_PROVIDERS,
        on_error: Optional[Callable[[UserFacingError], None]] = None,
    ) -> None:
        self.host = host
        self.config = config
        self.providers = providers
        self._on_error = on_error
        self._logger = logging.getLogger(__name__)

    def register(self) -> None:
        if self.config.use_idle_timer:
            self.host.run_when_idle(IDLE_DELAY_SECONDS, self._fire)
            self._logger.debug("Startup opener scheduled on idle", extra={"delay": IDLE_DELAY_SECONDS})
        else:
            self.host.add_command_line_hook(self._fire)
            self._logger.debug("Startup opener attached to command-line processing")

    def _fire(self) -> None:
        try:
            self.run()
        except UserFacingError as exc:
            if self._on_error is None:
                raise
            self._logger.warning("Recent files at startup failed: %s", exc)
            self._on_error(exc)

    def run(self) -> Optional[Interface]:
        """Decision routine; returns the interface dispatched to, if any."""
        self._run_hooks("before", self.config.before_hooks)

        dispatched: Optional[Interface] = None
        if self.file_opened_at_startup():
            self._logger.info("File opened at startup, skipping recent files")
        else:
            if not self.host.recent_files_enabled():
                raise SubsystemDisabledError()
            dispatched = self.dispatch()

        self._run_hooks("after", self.config.after_hooks)
        return dispatched

    def file_opened_at_startup(self) -> bool:
        return any(buf.is_file_backed for buf in self.host.buffers())

    def dispatch(self) -> Optional[Interface]:
        override = self.config.override_command
        if override is not None:
            self._logger.info("Running override command", extra={"command": _command_name(override)})
            override()
            return None

        interface = self.resolve_interface()
        provider = provider_for(interface, self.providers)
        if not provider.is_available(self.host):
            self._logger.warning(
                "Recent files interface unavailable, using default",
                extra={"interface": interface.value},
            )
            provider = provider_for(Interface.DEFAULT, self.providers)

        self._logger.info("Opening recent files", extra={"interface": provider.interface.value})
        provider.invoke(self.host)
        return provider.interface

    def resolve_interface(self) -> Interface:
        if self.config.interface is not None:
            return parse_interface(self.config.interface)
        return detect_interface(self.host, self.providers)

    def _run_hooks(self, phase: str, hooks: Sequence[Command]) -> None:
        errors: list[BaseException] = []
        for hook in hooks:
            try:
                hook()
            except Exception as exc:
                self._logger.exception(
                    "Startup hook failed",
                    extra={"phase": phase, "command": _command_name(hook)},
                )
                errors.append(exc)
        if errors:
            raise HookPhaseError(phase, errors)


def open_recent_on_startup(
    host: Host,
    config: OpenerConfig,
    *,
    on_error: Optional[Callable[[UserFacingError], None]] = None,
) -> StartupRecentOpener:
    opener = StartupRecentOpener(host, config, on_error=on_error)
    opener.register()
    return opener


def _command_name(fn: Any) -> str:
    return getattr(fn, "__qualname__", None) or getattr(fn, "__name__", None) or repr(fn)


__all__ = ["StartupRecentOpener", "open_recent_on_startup", "IDLE_DELAY_SECONDS"]
