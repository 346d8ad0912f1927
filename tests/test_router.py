# tests/test_router.py
import pytest

from shippy.data.store import AUTH_KEY
from shippy.exceptions import UnknownTab
from shippy.logic.router import TABS, ViewRouter


def test_starts_logged_out_on_overview(store):
    router = ViewRouter(store)
    assert router.is_authenticated is False
    assert router.active_tab == "overview"
    assert router.title() == "Dashboard Overview"


def test_stale_auth_flag_is_cleared_on_start(store):
    store.save(AUTH_KEY, "true")
    router = ViewRouter(store)
    assert router.is_authenticated is False
    assert store.load(AUTH_KEY) is None


def test_login_is_not_persisted(store):
    router = ViewRouter(store)
    router.login()
    assert router.is_authenticated
    assert store.load(AUTH_KEY) is None


def test_logout_clears_flag_and_tab(store):
    router = ViewRouter(store)
    router.login()
    router.navigate("team")
    store.save(AUTH_KEY, "true")
    router.logout()
    assert router.is_authenticated is False
    assert router.active_tab == "overview"
    assert store.load(AUTH_KEY) is None


@pytest.mark.parametrize("tab", TABS)
def test_navigate(store, tab):
    router = ViewRouter(store)
    router.navigate(tab)
    assert router.active_tab == tab
    assert router.subtitle()


def test_navigate_unknown_tab(store):
    router = ViewRouter(store)
    with pytest.raises(UnknownTab):
        router.navigate("reports")
    assert router.active_tab == "overview"
