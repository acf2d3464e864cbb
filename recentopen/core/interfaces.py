from __future__ import annotations

from enum import Enum

from recentopen.core.errors import ConfigurationError


class Interface(str, Enum):
    IDO = "ido"
    HELM = "helm"
    ANYTHING = "anything"
    COUNSEL = "counsel"
    CONSULT = "consult"
    DEFAULT = "default"


def parse_interface(value: Interface | str) -> Interface:
    """Return the Interface named by value, case-insensitively."""
    if isinstance(value, Interface):
        return value
    try:
        return Interface(str(value).strip().lower())
    except ValueError:
        choices = ", ".join(item.value for item in Interface)
        raise ConfigurationError(
            f"Unknown interface: {value!r}",
            remediation=f"Use one of: {choices}, or leave it unset for auto-detection.",
        ) from None


__all__ = ["Interface", "parse_interface"]
