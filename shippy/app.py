# app.py
import logging
import sys

from PySide6.QtWidgets import QApplication

from shippy import config
from shippy.data.store import RecordStore
from shippy.gui.main_window import MainWindow

logger = logging.getLogger(__name__)


def main():
    logging.basicConfig(
        level=config.LOG_LEVEL,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    logger.info("data directory: %s", config.DATA_DIR)

    app = QApplication(sys.argv)
    app.setApplicationName("Shippy")
    win = MainWindow(RecordStore(config.DATA_DIR))
    win.show()
    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
