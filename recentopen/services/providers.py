"""Recent-file UI providers.

Each provider wraps one picker front-end. ``detect`` answers whether the
front-end looks like the active one (used when no interface is
configured), ``is_available`` whether it can be invoked right now.
"""
from __future__ import annotations

import abc
from typing import Any, Optional, Sequence

from recentopen.core.interfaces import Interface
from recentopen.services.host import Host

IDO_PROMPT = "Find recent file: "


class InterfaceProvider(abc.ABC):
    interface: Interface

    @abc.abstractmethod
    def detect(self, host: Host) -> bool:
        ...

    @abc.abstractmethod
    def is_available(self, host: Host) -> bool:
        ...

    @abc.abstractmethod
    def invoke(self, host: Host) -> Any:
        ...


class CommandProvider(InterfaceProvider):
    """Provider backed by a single plugin command."""

    command: str
    mode: Optional[str] = None

    def detect(self, host: Host) -> bool:
        if self.mode is not None:
            return host.mode_active(self.mode)
        return host.command_available(self.command)

    def is_available(self, host: Host) -> bool:
        return host.command_available(self.command)

    def invoke(self, host: Host) -> Any:
        return host.call_command(self.command)


class HelmProvider(CommandProvider):
    interface = Interface.HELM
    command = "helm-recentf"
    mode = "helm-mode"


class CounselProvider(CommandProvider):
    interface = Interface.COUNSEL
    command = "counsel-recentf"
    mode = "counsel-mode"


class ConsultProvider(CommandProvider):
    interface = Interface.CONSULT
    command = "consult-recent-file"


class AnythingProvider(CommandProvider):
    interface = Interface.ANYTHING
    command = "anything-recentf"


class IdoProvider(InterfaceProvider):
    interface = Interface.IDO
    mode = "ido-mode"

    def detect(self, host: Host) -> bool:
        return host.mode_active(self.mode)

    def is_available(self, host: Host) -> bool:
        return host.completion_available()

    def invoke(self, host: Host) -> Any:
        choice = host.completing_read(IDO_PROMPT, host.recent_files())
        if not choice:
            return None
        return host.find_file(choice)


class DefaultProvider(CommandProvider):
    interface = Interface.DEFAULT
    command = "recentf-open-files"

    def detect(self, host: Host) -> bool:
        return True


# Auto-detection priority, first match wins
DEFAULT_PROVIDERS: Sequence[InterfaceProvider] = (
    HelmProvider(),
    IdoProvider(),
    CounselProvider(),
    ConsultProvider(),
    AnythingProvider(),
    DefaultProvider(),
)


def detect_interface(host: Host, providers: Sequence[InterfaceProvider] = DEFAULT_PROVIDERS) -> Interface:
    for provider in providers:
        if provider.detect(host):
            return provider.interface
    return Interface.DEFAULT


def provider_for(
    interface: Interface, providers: Sequence[InterfaceProvider] = DEFAULT_PROVIDERS
) -> InterfaceProvider:
    for provider in providers:
        if provider.interface is interface:
            return provider
    raise LookupError(f"No provider registered for {interface.value}")


__all__ = [
    "InterfaceProvider",
    "CommandProvider",
    "HelmProvider",
    "IdoProvider",
    "CounselProvider",
    "ConsultProvider",
    "AnythingProvider",
    "DefaultProvider",
    "DEFAULT_PROVIDERS",
    "IDO_PROMPT",
    "detect_interface",
    "provider_for",
]
