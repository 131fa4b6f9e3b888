"""Message dialogs for reporting failures to the player."""

from __future__ import annotations

import contextlib
import enum
import logging
import sys
import threading
from typing import Any, Callable, Iterator, Optional

DIALOG_TITLE = "errorreboot"

logger = logging.getLogger(__name__)


class MessageLevel(enum.Enum):
    """Severity shown by a dialog."""

    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


Presenter = Callable[[str, str, MessageLevel], None]


def _native_presenter(title: str, text: str, level: MessageLevel) -> None:
    import tkinter
    from tkinter import messagebox

    show = {
        MessageLevel.INFO: messagebox.showinfo,
        MessageLevel.WARNING: messagebox.showwarning,
        MessageLevel.ERROR: messagebox.showerror,
    }[level]
    root = tkinter.Tk()
    root.withdraw()
    try:
        show(title, text, parent=root)
    finally:
        root.destroy()


_presenter_lock = threading.Lock()
_presenter: Presenter = _native_presenter


def set_presenter(presenter: Optional[Presenter]) -> Presenter:
    """Install ``presenter`` for all dialogs (``None`` restores the native one).

    Returns the presenter that was installed before.
    """
    global _presenter
    with _presenter_lock:
        previous = _presenter
        _presenter = presenter or _native_presenter
    return previous


@contextlib.contextmanager
def use_presenter(presenter: Optional[Presenter]) -> Iterator[None]:
    """Show dialogs through ``presenter`` for the duration of the block."""
    previous = set_presenter(presenter)
    try:
        yield
    finally:
        set_presenter(previous)


def dialog_message_format(payload: Any, message: str) -> tuple[str, str]:
    """Return the (display, debug) texts describing ``payload``."""
    if (
        isinstance(payload, tuple)
        and len(payload) == 2
        and all(isinstance(part, str) for part in payload)
    ):
        return payload
    if isinstance(payload, (str, BaseException)):
        return f"[{message}] {payload}", repr(payload)
    logger.debug("type: %s", type(payload))
    return f"[{message}] {payload!r}", repr(payload)


def _present(text: str, level: MessageLevel) -> None:
    with _presenter_lock:
        presenter = _presenter
    try:
        presenter(DIALOG_TITLE, text, level)
    except Exception as err:  # a broken dialog must never mask the original report
        print(f"[FAILED] {err}", end="", file=sys.stderr)


def show_dialog(payload: Any, message: str, level: MessageLevel) -> None:
    """Show ``payload`` in a dialog of the given level."""
    display, _ = dialog_message_format(payload, message)
    _present(display, level)


def _dialog_level(log_level: int) -> MessageLevel:
    if log_level >= logging.ERROR:
        return MessageLevel.ERROR
    if log_level >= logging.WARNING:
        return MessageLevel.WARNING
    return MessageLevel.INFO


def show_dialog_with_log(payload: Any, message: str, level: int) -> None:
    """Log ``payload`` at the logging ``level`` and show it in a matching dialog."""
    display, debug = dialog_message_format(payload, message)
    logger.log(level, "%s", debug)
    _present(display, _dialog_level(level))


def show_failed_dialog(payload: Any) -> None:
    """Report ``payload`` as a failure: logged as an error and shown in an error dialog."""
    show_dialog_with_log(payload, "FAILED", logging.ERROR)