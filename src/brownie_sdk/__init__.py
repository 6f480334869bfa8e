from .config import ClientConfig, ConfigError, load_config
from .exceptions import (
    ClientValidationError,
    GatewayError,
    NetworkError,
    NotFoundError,
    ServiceError,
    ValidationIssue,
)
from .gateway import GatewayResult, RemoteGateway
from .http_client import HttpClient
from .models import (
    BillingOverviewResponse,
    Charge,
    Client,
    PaidChargeRecord,
    PayChargeRequest,
    SaleCreateRequest,
    StatusSummary,
    StockItem,
)
from .session import ApiSession
from .ui_errors import UserFacingError, to_user_facing_error

__version__ = "0.1.0"

__all__ = [
    "ApiSession",
    "BillingOverviewResponse",
    "Charge",
    "Client",
    "ClientConfig",
    "ClientValidationError",
    "ConfigError",
    "GatewayError",
    "GatewayResult",
    "HttpClient",
    "NetworkError",
    "NotFoundError",
    "PaidChargeRecord",
    "PayChargeRequest",
    "RemoteGateway",
    "SaleCreateRequest",
    "ServiceError",
    "StatusSummary",
    "StockItem",
    "UserFacingError",
    "ValidationIssue",
    "load_config",
    "to_user_facing_error",
]
