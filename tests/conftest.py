import os

# Widgets and clipboard tests run headless
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
