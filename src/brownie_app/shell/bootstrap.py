from __future__ import annotations

import logging
from typing import Any, Union

from brownie_sdk import ApiSession, ClientConfig, load_config

from ..config import AppConfig, load_app_config
from ..services.billing_service import BillingService
from ..services.catalog_service import CatalogService
from ..services.sales_service import SalesService
from ..services.stock_service import StockService
from ..telemetry import TelemetryLogger, build_event
from ..ui.billing_view import BillingView
from ..ui.history_view import HistoryView
from ..ui.notification_center import NotificationCenter
from ..ui.sale_form_view import SaleFormView
from ..ui.stock_view import StockView
from .navigation import NavigationState, Tab

logger = logging.getLogger(__name__)

View = Union[SaleFormView, HistoryView, StockView, BillingView]


class AppBootstrap:
    """Owns navigation and hands each tab a freshly built, freshly loaded view."""

    def __init__(
        self,
        config: ClientConfig | None = None,
        app_config: AppConfig | None = None,
        session: ApiSession | None = None,
    ) -> None:
        self.config = config or load_config()
        self.app_config = app_config or load_app_config()
        self.session = session or ApiSession(self.config)
        self.navigation = NavigationState()
        self.notifications = NotificationCenter()
        self.telemetry = TelemetryLogger(enabled=self.app_config.telemetry_enabled)
        self.catalog_service = CatalogService(self.session)
        self.sales_service = SalesService(self.session)
        self.stock_service = StockService(self.session)
        self.billing_service = BillingService(self.session)
        self.current_view: View | None = None

    def open(self, tab: Tab | str) -> View:
        target = Tab(tab)
        self.navigation.select(target)
        # Each visit starts from scratch; nothing survives from the previous view.
        self.current_view = None
        self.notifications.clear()
        view = self._build(target)
        view.load()
        self.current_view = view
        self.telemetry.emit(
            build_event(category="navigation", name="screen_view", view=target.value, action="open", success=True)
        )
        return view

    def tabs(self) -> list[dict[str, Any]]:
        return self.navigation.render()

    def _build(self, tab: Tab) -> View:
        if tab is Tab.SELL:
            return SaleFormView(
                catalog=self.catalog_service,
                sales=self.sales_service,
                config=self.app_config,
                telemetry=self.telemetry,
                notifications=self.notifications,
            )
        if tab is Tab.HISTORY:
            return HistoryView(service=self.billing_service, page_size=self.app_config.history_page_size)
        if tab is Tab.STOCK:
            return StockView(service=self.stock_service, telemetry=self.telemetry, notifications=self.notifications)
        return BillingView(service=self.billing_service, telemetry=self.telemetry, notifications=self.notifications)
