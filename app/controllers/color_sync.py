"""Keeps the UI-facing colour state in step with the backend store."""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Mapping, Optional, Union

from PySide6 import QtCore
from PySide6.QtCore import Signal, Slot

from app.backend.icc import IccProfileRegistry
from app.backend.picker import PickerResult
from app.backend.store import ColorStore
from app.clipboard import QtClipboardWriter
from app.config import COPIED_NOTIFICATION_MS
from app.controllers.task_runner import TaskRunnerController
from modules.utils.exceptions import ClipboardFailedException, InvalidFormatException
from schemas.color_state import Color, ColorRole, ColorState, UIState

logger = logging.getLogger(__name__)

RoleLike = Union[ColorRole, bool, str]


def as_role(role: RoleLike) -> ColorRole:
    if isinstance(role, ColorRole):
        return role
    if isinstance(role, bool):
        return ColorRole.from_fg(role)
    return ColorRole(role)


class ColorSyncController(QtCore.QObject):
    """Sole writer of the :class:`UIState` shown by the window.

    Every mutation produces a new frozen snapshot, published through
    ``state_changed`` only when it differs from the previous one.
    """

    state_changed = Signal(object)  # UIState

    def __init__(
        self,
        store: ColorStore,
        icc_registry: Optional[IccProfileRegistry] = None,
        clipboard=None,
        task_runner: Optional[TaskRunnerController] = None,
        parent=None,
    ):
        super().__init__(parent)
        self.store = store
        self.icc_registry = icc_registry
        self.clipboard = clipboard if clipboard is not None else QtClipboardWriter()
        self.task_runner = task_runner if task_runner is not None else TaskRunnerController(parent=self)
        self._state = UIState()

        self._copied_timer = QtCore.QTimer(self)
        self._copied_timer.setSingleShot(True)
        self._copied_timer.setInterval(COPIED_NOTIFICATION_MS)
        self._copied_timer.timeout.connect(self._hide_copied)

        self.store.store_updated.connect(self.update_from_backend_state)
        if self.icc_registry is not None:
            self.icc_registry.icc_profile_changed.connect(self._on_icc_profile_changed)

    @property
    def state(self) -> UIState:
        return self._state

    def _publish(self, new_state: UIState) -> None:
        if new_state == self._state:
            return
        self._state = new_state
        self.state_changed.emit(new_state)

    def load_initial_state(self) -> None:
        """Pull the full store snapshot and the ICC profile once at startup."""

        self.update_from_backend_state(self.store.get_store())
        if self.icc_registry is not None:
            self._on_icc_profile_changed(self.icc_registry.get_current_profile_name())

    @Slot(object)
    def update_from_backend_state(self, state: Union[ColorState, Mapping]) -> None:
        """Mirror a pushed backend state.

        Only sides present in ``state`` are applied, so a partial push never
        clears a colour already on screen. Malformed payloads are rejected
        whole and the previous state is kept.
        """

        if isinstance(state, Mapping):
            try:
                state = ColorState.from_dict(state)
            except InvalidFormatException as e:
                logger.warning(f"Rejected backend state update: {e}")
                return
        if not isinstance(state, ColorState):
            logger.warning(f"Rejected backend state update of type {type(state).__name__}")
            return

        new_state = self._state
        for role in ColorRole:
            color = state.get(role)
            if color is not None:
                new_state = new_state.with_color(role, color)

        new_state = replace(
            new_state,
            continue_mode=state.continue_mode,
            result_visible=new_state.result_visible or bool(new_state.foreground or new_state.background),
        )
        self._publish(new_state.with_contrast())

    def pick_color(self, role: RoleLike = ColorRole.FOREGROUND) -> None:
        """Start sampling ``role`` on a worker thread.

        A second request for a role that is already being picked is ignored;
        the other role can be picked at the same time.
        """

        role = as_role(role)
        if self._state.picking(role) or self.task_runner.is_running(role.value):
            logger.warning(f"Ignoring {role.value} pick request, one is already in progress")
            return

        self._publish(self._state.with_picking(role, True))
        started = self.task_runner.run_threaded(
            role.value,
            self.store.pick_color,
            self._on_pick_result,
            self._on_pick_error,
            lambda: self._finish_pick(role),
            role.is_foreground,
        )
        if not started:
            self._finish_pick(role)

    def _on_pick_result(self, result: PickerResult) -> None:
        if result is None or result.cancelled:
            logger.info("Colour pick cancelled, keeping previous colours")

    def _on_pick_error(self, error_tuple: tuple) -> None:
        exctype, value, traceback_str = error_tuple
        logger.error(f"Colour sampling failed: {value}")
        logger.debug(traceback_str)

    def _finish_pick(self, role: ColorRole) -> None:
        self._publish(self._state.with_picking(role, False))

    def copy_to_clipboard(self, role: RoleLike = ColorRole.FOREGROUND) -> None:
        """Copy the role's hex value and show the "Copied!" notice for a while."""

        role = as_role(role)
        hex_value = self._state.hex_for(role)
        try:
            if not hex_value:
                raise ClipboardFailedException(f"No {role.value} colour to copy", role=role)
            self.clipboard.write(hex_value)
        except Exception as e:
            logger.error(f"Failed to copy: {e}")
            return

        self._publish(replace(self._state, copied_visible=True))
        # Restarting supersedes any window still running from an earlier copy.
        self._copied_timer.start()

    def _hide_copied(self) -> None:
        self._publish(replace(self._state, copied_visible=False))

    def set_color(self, role: RoleLike, value) -> bool:
        """Set a role from a typed-in ``#RRGGBB`` string or RGB triple."""

        role = as_role(role)
        try:
            color = Color.parse(value)
        except InvalidFormatException as e:
            logger.warning(f"Ignoring {role.value} colour: {e}")
            return False
        self.store.update_store(role.value, *color.rgb)
        return True

    def reset(self) -> None:
        """Clear both colours and hide the results panel."""

        self.store.clear_store()
        self._copied_timer.stop()
        self._publish(
            UIState(
                foreground_picking=self._state.foreground_picking,
                background_picking=self._state.background_picking,
                current_icc_profile=self._state.current_icc_profile,
            )
        )

    def select_icc_profile(self, profile_name: str) -> None:
        if self.icc_registry is None:
            return
        try:
            self.icc_registry.select_icc_profile(profile_name)
        except ValueError as e:
            logger.warning(str(e))

    @Slot(str)
    def _on_icc_profile_changed(self, profile_name: str) -> None:
        self._publish(replace(self._state, current_icc_profile=profile_name))
