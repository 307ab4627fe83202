from PySide6 import QtWidgets, QtGui
from PySide6 import QtCore

from app.config import APP_NAME
from .widgets.color_swatch import ColorSwatchButton


# (criterion key, label) in display order
wcag_criteria = [
    ("1.4.3-regular", "AA normal text (1.4.3)"),
    ("1.4.3-large", "AA large text (1.4.3)"),
    ("1.4.6-regular", "AAA normal text (1.4.6)"),
    ("1.4.6-large", "AAA large text (1.4.6)"),
    ("1.4.11", "AA UI components (1.4.11)"),
]


class ColorRow(QtWidgets.QWidget):
    """Swatch, hex value, RGB value and pick button for one colour role."""

    def __init__(self, title: str, parent=None):
        super(ColorRow, self).__init__(parent)

        self.swatch = ColorSwatchButton(self.tr("Pick {0} colour").format(title.lower()), self)
        self.title_label = QtWidgets.QLabel(title, self)
        self.hex_label = QtWidgets.QPushButton("", self)
        self.hex_label.setFlat(True)
        self.hex_label.setToolTip(self.tr("Click to copy"))
        self.rgb_label = QtWidgets.QLabel("", self)
        self.pick_button = QtWidgets.QPushButton(self.tr("Pick"), self)

        text_layout = QtWidgets.QVBoxLayout()
        text_layout.addWidget(self.title_label)
        text_layout.addWidget(self.hex_label)
        text_layout.addWidget(self.rgb_label)

        layout = QtWidgets.QHBoxLayout(self)
        layout.addWidget(self.swatch)
        layout.addLayout(text_layout, 1)
        layout.addWidget(self.pick_button)


class ContrastAnalyserUI(QtWidgets.QMainWindow):

    def __init__(self, parent=None):
        super(ContrastAnalyserUI, self).__init__(parent)
        self.setWindowTitle(APP_NAME)
        self.setMinimumWidth(360)

        self._init_ui()
        self._create_menus()

    def _init_ui(self):
        central = QtWidgets.QWidget(self)
        layout = QtWidgets.QVBoxLayout(central)

        self.foreground_row = ColorRow(self.tr("Foreground"), central)
        self.background_row = ColorRow(self.tr("Background"), central)
        layout.addWidget(self.foreground_row)
        layout.addWidget(self.background_row)

        self.result_group = QtWidgets.QGroupBox(self.tr("Contrast"), central)
        result_layout = QtWidgets.QVBoxLayout(self.result_group)

        self.preview_label = QtWidgets.QLabel(self.tr("Sample text"), self.result_group)
        self.preview_label.setAlignment(QtCore.Qt.AlignCenter)
        self.preview_label.setMinimumHeight(48)
        font = self.preview_label.font()
        font.setPointSize(16)
        self.preview_label.setFont(font)

        self.ratio_label = QtWidgets.QLabel("", self.result_group)
        ratio_font = self.ratio_label.font()
        ratio_font.setPointSize(20)
        ratio_font.setBold(True)
        self.ratio_label.setFont(ratio_font)

        result_layout.addWidget(self.preview_label)
        result_layout.addWidget(self.ratio_label)

        self.criteria_labels = {}
        for key, text in wcag_criteria:
            label = QtWidgets.QLabel(text, self.result_group)
            self.criteria_labels[key] = label
            result_layout.addWidget(label)

        layout.addWidget(self.result_group)

        self.copied_label = QtWidgets.QLabel(self.tr("Copied!"), central)
        self.copied_label.setAlignment(QtCore.Qt.AlignCenter)
        layout.addWidget(self.copied_label)

        self.status_label = QtWidgets.QLabel("", central)
        layout.addWidget(self.status_label)

        self.setCentralWidget(central)

    def _create_menus(self):
        self.app_menu = self.menuBar().addMenu(APP_NAME)
        self.reset_action = self.app_menu.addAction(self.tr("Reset Colours"))
        self.app_menu.addSeparator()
        self.quit_action = self.app_menu.addAction(self.tr("Quit"))
        self.quit_action.setShortcut(QtGui.QKeySequence.StandardKey.Quit)
        self.quit_action.triggered.connect(self.close)

        self.icc_menu = self.menuBar().addMenu(self.tr("Colour Profiles"))
        self.icc_action_group = QtGui.QActionGroup(self)
        self.icc_action_group.setExclusive(True)

    def color_row(self, fg: bool) -> ColorRow:
        return self.foreground_row if fg else self.background_row
