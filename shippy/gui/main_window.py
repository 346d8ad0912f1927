# gui/main_window.py
from PySide6.QtWidgets import (
    QMainWindow, QWidget, QHBoxLayout, QVBoxLayout, QLabel, QPushButton,
    QStackedWidget, QButtonGroup, QFrame
)

from shippy.data.store import RecordStore
from shippy.gui.clock_widget import ClockWidget
from shippy.gui.login_page import LoginPage
from shippy.gui.overview_view import OverviewView
from shippy.gui.products_view import ProductsView
from shippy.gui.salary_view import SalaryView
from shippy.gui.team_view import TeamView
from shippy.logic.router import TABS, TAB_LABELS, ViewRouter

LOGIN_PAGE, DASHBOARD_PAGE = 0, 1

VIEW_CLASSES = {
    "overview": OverviewView,
    "products": ProductsView,
    "salary": SalaryView,
    "team": TeamView,
}


class MainWindow(QMainWindow):
    def __init__(self, store: RecordStore = None):
        super().__init__()
        self.setWindowTitle("Shippy Admin")
        self.resize(1280, 860)

        self.store = store or RecordStore()
        self.router = ViewRouter(self.store)
        self.views = {}

        self._build_ui()
        self.refresh()

    # ---------------- UI ----------------
    def _build_ui(self):
        self.root_stack = QStackedWidget()
        self.setCentralWidget(self.root_stack)

        self.login_page = LoginPage()
        self.login_page.logged_in.connect(self.login)
        self.root_stack.addWidget(self.login_page)

        dashboard = QWidget()
        outer = QHBoxLayout(dashboard)
        outer.setContentsMargins(0, 0, 0, 0)

        # ----- sidebar -----
        sidebar = QFrame()
        sidebar.setFixedWidth(210)
        sidebar.setStyleSheet("QFrame{background:#111827;} QLabel{color:white;} "
                              "QPushButton{color:#d1d5db; text-align:left; padding:8px 12px; border:none;} "
                              "QPushButton:checked{background:#2563eb; color:white; border-radius:6px;}")
        side = QVBoxLayout(sidebar)
        brand = QLabel("📦 Shippy")
        brand.setStyleSheet("font-size:18px; font-weight:700; padding:8px;")
        side.addWidget(brand)

        self.tab_buttons = QButtonGroup(self)
        self.tab_buttons.setExclusive(True)
        for i, tab in enumerate(TABS):
            btn = QPushButton(TAB_LABELS[tab])
            btn.setCheckable(True)
            self.tab_buttons.addButton(btn, i)
            side.addWidget(btn)
        side.addStretch(1)
        self.btn_logout = QPushButton("⏻ Logout")
        side.addWidget(self.btn_logout)
        outer.addWidget(sidebar)

        # ----- header + content -----
        main = QVBoxLayout()
        header = QHBoxLayout()
        titles = QVBoxLayout()
        self.title_label = QLabel("")
        self.title_label.setStyleSheet("font-size:22px; font-weight:700;")
        self.subtitle_label = QLabel("")
        self.subtitle_label.setStyleSheet("color:#6b7280;")
        titles.addWidget(self.title_label)
        titles.addWidget(self.subtitle_label)
        header.addLayout(titles)
        header.addStretch(1)
        header.addWidget(ClockWidget())
        main.addLayout(header)

        self.content = QStackedWidget()
        main.addWidget(self.content, 1)
        outer.addLayout(main, 1)

        self.root_stack.addWidget(dashboard)

        self.tab_buttons.idClicked.connect(lambda i: self.navigate(TABS[i]))
        self.btn_logout.clicked.connect(self.logout)

        self.status = self.statusBar()

    def _view(self, tab: str):
        # built on first visit; a screen seeds its storage key when first shown
        view = self.views.get(tab)
        if view is None:
            view = VIEW_CLASSES[tab](self.store)
            if tab == "overview":
                view.navigate.connect(self.navigate)
            self.views[tab] = view
            self.content.addWidget(view)
        else:
            view.reload()
        return view

    # ---------------- actions ----------------
    def login(self):
        self.router.login()
        self.navigate(self.router.active_tab)

    def logout(self):
        self.router.logout()
        self.refresh()
        self.status.showMessage("Signed out", 3000)

    def navigate(self, tab: str):
        self.router.navigate(tab)
        view = self._view(tab)
        self.content.setCurrentWidget(view)
        self.refresh()

    def refresh(self):
        if not self.router.is_authenticated:
            self.root_stack.setCurrentIndex(LOGIN_PAGE)
            return
        self.root_stack.setCurrentIndex(DASHBOARD_PAGE)
        tab = self.router.active_tab
        self.tab_buttons.button(TABS.index(tab)).setChecked(True)
        self.title_label.setText(self.router.title())
        self.subtitle_label.setText(self.router.subtitle())
