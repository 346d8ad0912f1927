# logic/router.py
import logging

from shippy.data.store import AUTH_KEY, RecordStore
from shippy.exceptions import UnknownTab

logger = logging.getLogger(__name__)

TABS = ("overview", "products", "salary", "team")

TAB_LABELS = {
    "overview": "Overview",
    "products": "Products",
    "salary": "Salary",
    "team": "Team Members",
}

TAB_SUBTITLES = {
    "overview": "Welcome to your Shippy admin dashboard",
    "products": "Manage your product inventory",
    "salary": "Track and manage salary information",
    "team": "Manage team members and roles",
}


class ViewRouter:
    """
    Active tab + login flag.

    Sessions are not remembered: a leftover auth flag in storage is removed
    on startup, and login() does not write one.
    """

    def __init__(self, store: RecordStore):
        self.store = store
        self.active_tab = "overview"
        self.is_authenticated = False
        store.remove(AUTH_KEY)

    def login(self):
        self.is_authenticated = True
        logger.info("logged in")

    def logout(self):
        self.is_authenticated = False
        self.active_tab = "overview"
        self.store.remove(AUTH_KEY)
        logger.info("logged out")

    def navigate(self, tab: str):
        if tab not in TABS:
            raise UnknownTab(tab)
        self.active_tab = tab

    def title(self) -> str:
        if self.active_tab == "overview":
            return "Dashboard Overview"
        return TAB_LABELS[self.active_tab]

    def subtitle(self) -> str:
        return TAB_SUBTITLES[self.active_tab]
