from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum

logger = logging.getLogger(__name__)


class Tab(str, Enum):
    SELL = "sell"
    HISTORY = "history"
    STOCK = "stock"
    BILLING = "billing"

    @property
    def label(self) -> str:
        return TAB_LABELS[self]


TAB_LABELS: dict[Tab, str] = {
    Tab.SELL: "Vender",
    Tab.HISTORY: "Histórico",
    Tab.STOCK: "Estoque",
    Tab.BILLING: "Cobrança",
}

TAB_ORDER: tuple[Tab, ...] = (Tab.SELL, Tab.HISTORY, Tab.STOCK, Tab.BILLING)


@dataclass
class NavigationState:
    active: Tab = Tab.SELL

    def select(self, tab: Tab | str) -> bool:
        target = Tab(tab)
        if target is self.active:
            return False
        logger.info("navigation", extra={"route": target.value})
        self.active = target
        return True

    def render(self) -> list[dict[str, object]]:
        return [{"key": tab.value, "label": tab.label, "active": tab is self.active} for tab in TAB_ORDER]
