# QSettings scope shared by every persisted preference
SETTINGS_ORGANIZATION = "CCA"
SETTINGS_APPLICATION = "ColourContrastAnalyser"

APP_NAME = "Colour Contrast Analyser"
APP_VERSION = "1.0.0"

# "Copied!" notification window
COPIED_NOTIFICATION_MS = 1500

# External screen picker executable, overridable with the picker/command setting
DEFAULT_PICKER_COMMAND = "color-picker"

ICC_MENU_PREFIX = "icc_profile_"
DEFAULT_ICC_PROFILE = "Auto"
