from .billing_client import BillingClient
from .clients_client import ClientsClient
from .sales_client import SalesClient
from .stock_client import StockClient

__all__ = [
    "BillingClient",
    "ClientsClient",
    "SalesClient",
    "StockClient",
]
