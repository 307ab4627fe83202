import logging
from typing import Optional

from PySide6 import QtCore, QtGui
from PySide6.QtCore import QSettings

from app.ui.main_window import ContrastAnalyserUI
from app.backend.icc import IccProfileRegistry, profile_name_to_menu_id
from app.backend.picker import ColorPicker, CommandColorPicker
from app.backend.store import ColorStore
from app.controllers.color_sync import ColorSyncController
from app.config import DEFAULT_PICKER_COMMAND, SETTINGS_APPLICATION, SETTINGS_ORGANIZATION
from schemas.color_state import ColorRole, UIState

logger = logging.getLogger(__name__)

PICKER_COMMAND_KEY = "picker/command"


class ContrastAnalyser(ContrastAnalyserUI):

    def __init__(self, picker: Optional[ColorPicker] = None, settings: Optional[QSettings] = None, parent=None):
        super(ContrastAnalyser, self).__init__(parent)

        self.settings = settings if settings is not None else QSettings(SETTINGS_ORGANIZATION, SETTINGS_APPLICATION)
        if picker is None:
            command = self.settings.value(PICKER_COMMAND_KEY, DEFAULT_PICKER_COMMAND)
            picker = CommandColorPicker(str(command))
            if not picker.is_available():
                logger.warning(f"Colour picker {command!r} not found on PATH; picks will fail")

        self.store = ColorStore(picker, self)
        self.icc_registry = IccProfileRegistry(self.settings, parent=self)
        self.sync_ctrl = ColorSyncController(self.store, self.icc_registry, parent=self)

        self.connect_ui_elements()
        self.populate_icc_menu()

        self.sync_ctrl.state_changed.connect(self.render)
        self.sync_ctrl.load_initial_state()
        self.render(self.sync_ctrl.state)

    def connect_ui_elements(self):
        for role in ColorRole:
            row = self.color_row(role.is_foreground)
            row.swatch.clicked.connect(lambda checked=False, r=role: self.sync_ctrl.pick_color(r))
            row.pick_button.clicked.connect(lambda checked=False, r=role: self.sync_ctrl.pick_color(r))
            row.hex_label.clicked.connect(lambda checked=False, r=role: self.sync_ctrl.copy_to_clipboard(r))

        self.reset_action.triggered.connect(self.sync_ctrl.reset)
        self.icc_action_group.triggered.connect(self._on_icc_action_triggered)

    def populate_icc_menu(self):
        self.icc_menu.clear()
        for action in self.icc_action_group.actions():
            self.icc_action_group.removeAction(action)

        profiles = self.icc_registry.list_icc_profiles()
        for profile in profiles:
            action = QtGui.QAction(profile.name, self)
            action.setObjectName(profile_name_to_menu_id(profile.name))
            action.setToolTip(profile.description)
            action.setCheckable(True)
            action.setChecked(profile.is_current)
            self.icc_action_group.addAction(action)
            self.icc_menu.addAction(action)
        logger.info(f"Loaded {len(profiles)} ICC profiles into menu")

    def _on_icc_action_triggered(self, action: QtGui.QAction):
        profile_name = self.icc_registry.menu_id_to_profile_name(action.objectName())
        if profile_name:
            self.sync_ctrl.select_icc_profile(profile_name)

    @QtCore.Slot(object)
    def render(self, state: UIState):
        for role in ColorRole:
            fg = role.is_foreground
            row = self.color_row(fg)
            hex_value = state.hex_for(role)
            row.swatch.set_hex(hex_value)
            row.hex_label.setText(hex_value or "-")
            row.rgb_label.setText(state.foreground_rgb if fg else state.background_rgb)
            picking = state.picking(role)
            row.pick_button.setEnabled(not picking)
            row.pick_button.setText(self.tr("Picking...") if picking else self.tr("Pick"))

        self.result_group.setVisible(state.result_visible)
        if state.contrast is not None:
            self.ratio_label.setText(f"{state.contrast.ratio:.1f}:1")
            self.preview_label.setStyleSheet(
                f"color: {state.foreground}; background-color: {state.background};"
            )
            for key, passed in state.contrast.levels.to_dict().items():
                label = self.criteria_labels[key]
                label.setProperty("passed", passed)
                label.setStyleSheet("color: #1B7F3B;" if passed else "color: #B3261E;")
        else:
            self.ratio_label.setText("-")
            self.preview_label.setStyleSheet("")

        self.copied_label.setVisible(state.copied_visible)

        mode = self.tr("Continue mode") if state.continue_mode else ""
        profile = state.current_icc_profile
        self.status_label.setText(" | ".join(part for part in (profile, mode) if part))

        for action in self.icc_action_group.actions():
            action.setChecked(action.text() == profile)
