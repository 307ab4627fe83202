"""Authoritative colour store shared by the picker and the UI."""

from __future__ import annotations

import logging
import threading

from PySide6.QtCore import QObject, Signal

from app.backend.picker import ColorPicker, PickerResult
from schemas.color_state import Color, ColorRole, ColorState

logger = logging.getLogger(__name__)


class ColorStore(QObject):
    """Owns the sampled foreground/background colours.

    ``pick_color`` blocks on the picker and is meant to run on a worker
    thread; every change is announced through ``store_updated`` with a full
    :class:`ColorState` snapshot, whichever thread caused it.
    """

    store_updated = Signal(object)  # ColorState

    def __init__(self, picker: ColorPicker, parent=None):
        super().__init__(parent)
        self.picker = picker
        self._lock = threading.Lock()
        self._state = ColorState()

    def get_store(self) -> ColorState:
        with self._lock:
            return self._state

    def pick_color(self, fg: bool) -> PickerResult:
        """Run the picker and fold whatever it sampled into the store."""

        result = self.picker.run(fg)
        self.apply_picker_result(result)
        return result

    def apply_picker_result(self, result: PickerResult) -> None:
        """Apply a picker sample; also the entry point for continuous-mode pushes."""

        with self._lock:
            state = self._state
            if result.foreground is not None:
                state = state.with_color(ColorRole.FOREGROUND, result.foreground)
            if result.background is not None:
                state = state.with_color(ColorRole.BACKGROUND, result.background)
            state = ColorState(state.foreground, state.background, result.continue_mode)
            changed = state != self._state
            self._state = state

        if changed:
            self.store_updated.emit(state)

    def update_store(self, key: str, r: int, g: int, b: int) -> None:
        """Manually set one side, e.g. from a typed-in hex value."""

        try:
            role = ColorRole(key)
        except ValueError:
            logger.warning(f"Ignoring update for unknown colour key {key!r}")
            return
        color = Color(r, g, b)

        with self._lock:
            self._state = self._state.with_color(role, color)
            state = self._state
        self.store_updated.emit(state)

    def clear_store(self) -> None:
        with self._lock:
            self._state = ColorState()
            state = self._state
        self.store_updated.emit(state)


__all__ = ["ColorStore"]
