from PySide6.QtGui import QGuiApplication

from modules.utils.exceptions import ClipboardFailedException


class QtClipboardWriter:
    """Writes text to the system clipboard through ``QClipboard``."""

    def write(self, text: str) -> None:
        clipboard = QGuiApplication.clipboard()
        if clipboard is None:
            raise ClipboardFailedException("No clipboard available")
        clipboard.setText(text)
