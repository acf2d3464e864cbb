from __future__ import annotations

from typing import Sequence


class UserFacingError(Exception):
    """Base exception carrying user-presentable context."""

    def __init__(self, message: str, *, title: str, remediation: str | None = None) -> None:
        super().__init__(message)
        self.title = title
        self.remediation = remediation or ""


class SubsystemDisabledError(UserFacingError):
    def __init__(self, message: str = "recent-files mode is not enabled") -> None:
        super().__init__(
            message,
            title="Recent Files Disabled",
            remediation="Enable recent-files tracking to open a recent file at startup.",
        )


class ConfigurationError(UserFacingError):
    def __init__(self, message: str, *, remediation: str | None = None) -> None:
        super().__init__(message, title="Configuration Error", remediation=remediation)


class CommandNotFoundError(UserFacingError):
    def __init__(self, name: str) -> None:
        super().__init__(
            f"Command is not defined: {name}",
            title="Unknown Command",
            remediation="Load the plugin that provides this command or choose another interface.",
        )
        self.name = name


class FileOpenError(UserFacingError):
    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"Cannot open {path}: {reason}", title="Open Failed")
        self.path = path


class PluginError(UserFacingError):
    def __init__(self, message: str) -> None:
        super().__init__(
            message,
            title="Plugin Error",
            remediation="Check the 'plugins' list in config.json and the installed packages.",
        )


class HookPhaseError(UserFacingError):
    """One or more callbacks of a hook phase raised."""

    def __init__(self, phase: str, errors: Sequence[BaseException]) -> None:
        details = "\n".join(f"- {type(err).__name__}: {err}" for err in errors)
        super().__init__(
            f"{len(errors)} {phase} hook(s) failed\n{details}",
            title="Startup Hook Failed",
        )
        self.phase = phase
        self.errors = list(errors)


__all__ = [
    "UserFacingError",
    "SubsystemDisabledError",
    "ConfigurationError",
    "CommandNotFoundError",
    "FileOpenError",
    "PluginError",
    "HookPhaseError",
]
