from __future__ import annotations

import json

import pytest

from brownie_app import main
from brownie_app.config import AppConfig
from brownie_app.shell.bootstrap import AppBootstrap
from brownie_app.shell.navigation import TAB_ORDER, NavigationState, Tab
from brownie_app.ui.billing_view import BillingView
from brownie_app.ui.history_view import HistoryView
from brownie_app.ui.sale_form_view import SaleFormView
from brownie_app.ui.stock_view import StockView
from brownie_sdk import ClientConfig


def _bootstrap(session) -> AppBootstrap:
    return AppBootstrap(
        config=ClientConfig(env_name="test", api_base_url="https://api.example.com"),
        app_config=AppConfig(history_page_size=5),
        session=session,
    )


def test_tab_order_and_default() -> None:
    assert TAB_ORDER == (Tab.SELL, Tab.HISTORY, Tab.STOCK, Tab.BILLING)
    state = NavigationState()
    assert state.active is Tab.SELL
    assert state.select("stock") is True
    assert state.select(Tab.STOCK) is False
    assert [entry["active"] for entry in state.render()] == [False, False, True, False]


@pytest.mark.parametrize(
    ("tab", "view_type"),
    [(Tab.SELL, SaleFormView), (Tab.HISTORY, HistoryView), (Tab.STOCK, StockView), (Tab.BILLING, BillingView)],
)
def test_open_builds_and_loads_view(session, tab: Tab, view_type: type) -> None:
    bootstrap = _bootstrap(session)
    view = bootstrap.open(tab)
    assert isinstance(view, view_type)
    assert bootstrap.current_view is view
    assert bootstrap.navigation.active is tab


def test_reopening_a_tab_starts_fresh(session) -> None:
    bootstrap = _bootstrap(session)
    first = bootstrap.open(Tab.SELL)
    first.select_client("Ana")
    bootstrap.open(Tab.STOCK)
    second = bootstrap.open(Tab.SELL)
    assert second is not first
    assert second.fields.client == ""


def test_history_uses_configured_page_size(session) -> None:
    view = _bootstrap(session).open(Tab.HISTORY)
    assert view.pagination.page_size == 5


def test_cli_prints_tabs(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str], session) -> None:
    monkeypatch.setattr(main, "AppBootstrap", lambda config, app_config: _bootstrap(session))
    assert main.run(["tabs"]) == 0
    payload = json.loads(capsys.readouterr().out)
    assert [entry["key"] for entry in payload] == ["sell", "history", "stock", "billing"]


def test_cli_add_stock(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str], session, shop) -> None:
    monkeypatch.setattr(main, "AppBootstrap", lambda config, app_config: _bootstrap(session))
    assert main.run(["add-stock", "Nuts", "5"]) == 0
    payload = json.loads(capsys.readouterr().out)
    assert payload["ok"] is True
    assert shop.stock["Nuts"] == 17


def test_cli_reports_missing_configuration(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    monkeypatch.delenv("BROWNIE_API_BASE_URL", raising=False)
    monkeypatch.delenv("BROWNIE_API_BASE_URL_DEV", raising=False)
    monkeypatch.delenv("BROWNIE_ENV", raising=False)
    assert main.run(["tabs"]) == 2
    assert "Configuration error" in capsys.readouterr().out
