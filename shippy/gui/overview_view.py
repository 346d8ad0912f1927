# gui/overview_view.py
from datetime import date

from PySide6.QtCore import Qt, Signal
from PySide6.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout, QGridLayout, QGroupBox, QLabel, QPushButton
)

from shippy.logic.overview import RECENT_ACTIVITY, overview_stats
from shippy.utils.date_helper import display_date
from shippy.utils.parse_utils import money

ACTIVITY_DOT = {"success": "#4ade80", "info": "#60a5fa"}


class OverviewView(QWidget):
    navigate = Signal(str)

    def __init__(self, store, parent=None):
        super().__init__(parent)
        self.store = store
        self._build_ui()
        self.reload()

    def _build_ui(self):
        root = QVBoxLayout(self)

        grid = QGridLayout()
        self.stat_values = {}
        self.stat_subtitles = {}
        cards = [
            ("earnings", "Total Earnings", "salary"),
            ("products", "Total Products", "products"),
            ("growth", "Monthly Growth", None),
            ("next", "Next Salary", "salary"),
        ]
        for c, (key, title, target) in enumerate(cards):
            box = QGroupBox(title)
            v = QVBoxLayout(box)
            value = QLabel("")
            value.setStyleSheet("font-size:22px; font-weight:700;")
            subtitle = QLabel("")
            subtitle.setStyleSheet("color:#6b7280;")
            v.addWidget(value)
            v.addWidget(subtitle)
            if target:
                btn = QPushButton("Open")
                btn.clicked.connect(lambda _=False, t=target: self.navigate.emit(t))
                v.addWidget(btn, 0, Qt.AlignRight)
            self.stat_values[key] = value
            self.stat_subtitles[key] = subtitle
            grid.addWidget(box, 0, c)
        root.addLayout(grid)

        bottom = QHBoxLayout()

        activity = QGroupBox("Recent Activity")
        av = QVBoxLayout(activity)
        for item in RECENT_ACTIVITY:
            row = QHBoxLayout()
            dot = QLabel("●")
            dot.setStyleSheet(f"color:{ACTIVITY_DOT.get(item['type'], '#9ca3af')};")
            row.addWidget(dot)
            row.addWidget(QLabel(item["action"]), 1)
            when = QLabel(item["time"])
            when.setStyleSheet("color:#6b7280;")
            row.addWidget(when)
            av.addLayout(row)
        av.addStretch(1)
        bottom.addWidget(activity, 1)

        quick = QGroupBox("Quick Actions")
        qv = QVBoxLayout(quick)
        for label, target in (("Manage Products", "products"), ("View Salary", "salary"),
                              ("Team Members", "team")):
            btn = QPushButton(label)
            btn.clicked.connect(lambda _=False, t=target: self.navigate.emit(t))
            qv.addWidget(btn)
        self.team_label = QLabel("")
        qv.addWidget(self.team_label)
        qv.addStretch(1)
        bottom.addWidget(quick, 1)

        root.addLayout(bottom)
        root.addStretch(1)

    def reload(self):
        stats = overview_stats(self.store, date.today())
        self.stat_values["earnings"].setText(money(stats["total_earnings"]))
        self.stat_subtitles["earnings"].setText("From Shippy")
        self.stat_values["products"].setText(str(stats["product_count"]))
        self.stat_subtitles["products"].setText("In Stock")
        self.stat_values["growth"].setText(f"+{stats['monthly_growth']}%")
        self.stat_subtitles["growth"].setText("This Month")
        self.stat_values["next"].setText(money(stats["next_salary_amount"]))
        self.stat_subtitles["next"].setText(display_date(stats["next_salary_date"]))
        self.team_label.setText(f"{stats['team_count']} team members")
