from __future__ import annotations

from dataclasses import dataclass

from .clients.billing_client import BillingClient
from .clients.clients_client import ClientsClient
from .clients.sales_client import SalesClient
from .clients.stock_client import StockClient
from .config import ClientConfig
from .gateway import RemoteGateway
from .http_client import HttpClient


@dataclass
class ApiSession:
    config: ClientConfig

    def _gateway(self, module: str) -> RemoteGateway:
        # Fan-out reads must not share a requests.Session.
        return RemoteGateway(http=HttpClient(config=self.config), module=module)

    def clients_client(self) -> ClientsClient:
        return ClientsClient(gateway=self._gateway("clients"))

    def stock_client(self) -> StockClient:
        return StockClient(gateway=self._gateway("stock"))

    def sales_client(self) -> SalesClient:
        return SalesClient(gateway=self._gateway("sales"))

    def billing_client(self) -> BillingClient:
        return BillingClient(gateway=self._gateway("billing"))
