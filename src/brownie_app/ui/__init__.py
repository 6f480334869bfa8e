from .billing_view import BillingView
from .history_view import HistoryView
from .notification_center import NotificationCenter
from .sale_form_view import FormPhase, FormStatus, PaymentStatus, SaleFormView
from .stock_view import StockView
from .view_state import ViewState, ViewStateStatus, resolve_state

__all__ = [
    "BillingView",
    "FormPhase",
    "FormStatus",
    "HistoryView",
    "NotificationCenter",
    "PaymentStatus",
    "SaleFormView",
    "StockView",
    "ViewState",
    "ViewStateStatus",
    "resolve_state",
]
