import sys
import logging
from PySide6.QtWidgets import QApplication
from app.config import APP_NAME, APP_VERSION, SETTINGS_APPLICATION, SETTINGS_ORGANIZATION
from controller import ContrastAnalyser

def main():

    # Configure logging
    logging.basicConfig(
        level=logging.INFO,
    )

    app = QApplication(sys.argv)
    app.setOrganizationName(SETTINGS_ORGANIZATION)
    app.setApplicationName(SETTINGS_APPLICATION)
    app.setApplicationDisplayName(APP_NAME)
    app.setApplicationVersion(APP_VERSION)

    window = ContrastAnalyser()
    window.show()

    # Start the event loop
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
