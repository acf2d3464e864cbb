from __future__ import annotations

from typing import Optional, Sequence

from PySide6 import QtWidgets

from recentopen.core.errors import UserFacingError


def show_error(parent: QtWidgets.QWidget | None, title: str, message: str) -> None:
    QtWidgets.QMessageBox.critical(parent, title, message)


def show_user_error(parent: QtWidgets.QWidget | None, error: UserFacingError) -> None:
    body = error.args[0] if error.args else "An error occurred."
    if error.remediation:
        body = f"{body}\n\n{error.remediation}"
    QtWidgets.QMessageBox.critical(parent, error.title, body)


def show_exception(parent: QtWidgets.QWidget | None, error: Exception) -> None:
    if isinstance(error, UserFacingError):
        show_user_error(parent, error)
    else:
        show_error(parent, "Unexpected Error", f"{type(error).__name__}: {error}")


def choose_item(
    parent: QtWidgets.QWidget | None,
    prompt: str,
    choices: Sequence[str],
) -> Optional[str]:
    """Ask the user to pick one of choices; None when cancelled or empty."""
    if not choices:
        return None
    item, ok = QtWidgets.QInputDialog.getItem(
        parent, "Recent Files", prompt, list(choices), 0, True
    )
    if not ok or not item:
        return None
    return item


__all__ = ["show_error", "show_user_error", "show_exception", "choose_item"]
