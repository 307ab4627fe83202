from __future__ import annotations

import logging
import sys
from dataclasses import dataclass
from typing import List, Optional

from PySide6.QtCore import QObject, QSettings, Signal

from app.config import DEFAULT_ICC_PROFILE, ICC_MENU_PREFIX, SETTINGS_APPLICATION, SETTINGS_ORGANIZATION

logger = logging.getLogger(__name__)

SELECTED_PROFILE_KEY = "icc/selected_profile"


@dataclass(frozen=True)
class IccProfile:
    name: str
    description: str
    is_current: bool = False


def system_color_spaces(platform: str = sys.platform) -> List[IccProfile]:
    """Colour spaces offered on this platform, none marked current."""

    profiles = [
        IccProfile("Auto", "Automatic color space detection"),
        IccProfile("sRGB", "sRGB IEC61966-2.1 (Standard web)"),
    ]
    if platform.startswith(("win", "darwin")):
        profiles.append(IccProfile("Adobe RGB", "Adobe RGB (1998)"))
    if platform == "darwin":
        profiles.append(IccProfile("Display P3", "Display P3"))
    return profiles


def profile_name_to_menu_id(name: str) -> str:
    return f"{ICC_MENU_PREFIX}{name.lower().replace(' ', '_')}"


class IccProfileRegistry(QObject):
    """Lists the available ICC profiles and remembers the selected one."""

    icc_profile_changed = Signal(str)

    def __init__(self, settings: Optional[QSettings] = None, platform: str = sys.platform, parent=None):
        super().__init__(parent)
        self.settings = settings if settings is not None else QSettings(SETTINGS_ORGANIZATION, SETTINGS_APPLICATION)
        self.platform = platform

    def list_icc_profiles(self) -> List[IccProfile]:
        current = self.get_current_profile_name()
        return [
            IccProfile(p.name, p.description, is_current=p.name == current)
            for p in system_color_spaces(self.platform)
        ]

    def select_icc_profile(self, profile_name: str) -> None:
        names = [p.name for p in system_color_spaces(self.platform)]
        if profile_name not in names:
            raise ValueError(f"Unknown ICC profile: {profile_name!r}")

        previous = self.get_selected_icc_profile()
        self.settings.setValue(SELECTED_PROFILE_KEY, profile_name)
        self.settings.sync()
        logger.info(f"ICC profile selected: {profile_name}")
        if previous != profile_name:
            self.icc_profile_changed.emit(profile_name)

    def get_selected_icc_profile(self) -> Optional[str]:
        value = self.settings.value(SELECTED_PROFILE_KEY, None)
        return str(value) if value else None

    def get_current_profile_name(self) -> str:
        return self.get_selected_icc_profile() or DEFAULT_ICC_PROFILE

    def menu_id_to_profile_name(self, menu_id: str) -> Optional[str]:
        if not menu_id.startswith(ICC_MENU_PREFIX):
            return None
        for profile in system_color_spaces(self.platform):
            if profile_name_to_menu_id(profile.name) == menu_id:
                return profile.name
        return None
