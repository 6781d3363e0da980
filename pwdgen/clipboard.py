"""
Clipboard support for the command line, via Qt's application clipboard.
"""

from __future__ import annotations

import logging
import os
import sys

logger = logging.getLogger(__name__)


class ClipboardError(Exception):
    """The clipboard could not be reached or written."""


def _has_display() -> bool:
    """
    Qt aborts the whole process if it cannot open a display, so check first.
    Only X11 / Wayland sessions need a display variable.
    """
    if not sys.platform.startswith("linux"):
        return True
    return any(
        os.environ.get(name)
        for name in ("DISPLAY", "WAYLAND_DISPLAY", "QT_QPA_PLATFORM")
    )


def copy_to_clipboard(text: str) -> None:
    """
    Put `text` on the system clipboard.

    Raises ClipboardError when there is no display or Qt refuses the write.
    On X11 the text stays available after exit only while a clipboard
    manager is running.
    """
    if not _has_display():
        raise ClipboardError(
            "No display available for the clipboard (DISPLAY / WAYLAND_DISPLAY unset)."
        )

    # Imported here so plain generation never pays Qt's start-up cost.
    from PySide6.QtGui import QGuiApplication

    app = QGuiApplication.instance() or QGuiApplication(sys.argv[:1])
    clipboard = app.clipboard()
    try:
        clipboard.setText(text)
    except Exception as exc:
        # Windows clipboard can be temporarily locked by other apps
        raise ClipboardError(
            "Could not copy to clipboard because another application is using it."
        ) from exc

    # Let Qt hand the selection over before the process exits.
    app.processEvents()
    logger.debug("Copied %d characters to the clipboard", len(text))
