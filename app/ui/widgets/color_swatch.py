"""
Swatch button showing a sampled colour.
"""

from PySide6 import QtCore, QtGui, QtWidgets


class ColorSwatchButton(QtWidgets.QToolButton):
    """
    Square preview of one colour role. Clicking it asks for a new sample;
    an empty swatch is drawn with a checkerboard.
    """

    def __init__(self, tooltip="", parent=None):
        super().__init__(parent)
        self._hex = ""
        self.setToolTip(tooltip)
        self.setFixedSize(48, 48)
        self.setCursor(QtCore.Qt.PointingHandCursor)

    def set_hex(self, hex_value: str):
        """Show ``hex_value`` (``""`` for no colour yet)"""
        if hex_value == self._hex:
            return
        self._hex = hex_value
        self.update()

    def hex(self) -> str:
        return self._hex

    def paintEvent(self, event):
        super().paintEvent(event)

        painter = QtGui.QPainter(self)
        painter.setRenderHint(QtGui.QPainter.Antialiasing)

        rect = QtCore.QRect(4, 4, self.width() - 8, self.height() - 8)

        if not self._hex:
            checkerboard = QtGui.QPixmap(16, 16)
            checkerboard.fill(QtCore.Qt.white)
            painter2 = QtGui.QPainter(checkerboard)
            painter2.fillRect(0, 0, 8, 8, QtCore.Qt.lightGray)
            painter2.fillRect(8, 8, 8, 8, QtCore.Qt.lightGray)
            painter2.end()

            painter.drawTiledPixmap(rect, checkerboard)
        else:
            painter.setBrush(QtGui.QBrush(QtGui.QColor(self._hex)))

        painter.setPen(QtCore.Qt.black)
        if not self._hex:
            painter.setBrush(QtCore.Qt.NoBrush)
        painter.drawRoundedRect(rect, 4, 4)

        painter.end()
