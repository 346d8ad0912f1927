# gui/clock_widget.py
from datetime import datetime

from PySide6.QtCore import QTimer
from PySide6.QtWidgets import QLabel

from shippy import config
from shippy.utils.date_helper import display_clock


class ClockWidget(QLabel):
    def __init__(self, parent=None):
        super().__init__(parent)
        self.setStyleSheet("background:#f9fafb; padding:6px 12px; border-radius:6px; font-weight:500;")
        self._timer = QTimer(self)
        self._timer.timeout.connect(self._tick)
        self._timer.start(config.CLOCK_TICK_MS)
        self._tick()

    def _tick(self):
        self.setText("🕒 " + display_clock(datetime.now()))
