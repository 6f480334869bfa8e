from .aggregates import FinancialSummary, StockTotals, filter_charges_by_client, is_overdue, stock_totals, summarize_charges
from .billing_service import BillingService
from .catalog_service import CatalogService
from .errors import OperationError, normalize_error
from .pagination import PageWindow, PaginationState, clamp_page, goto_page, next_page, paginate, prev_page
from .price_resolver import PriceResolution, PriceResolver, PriceTicket
from .refresh import MutationOutcome, gather_reads, run_mutation
from .sales_service import SalesService, utc_now
from .stock_service import StockService

__all__ = [
    "BillingService",
    "CatalogService",
    "FinancialSummary",
    "MutationOutcome",
    "OperationError",
    "PageWindow",
    "PaginationState",
    "PriceResolution",
    "PriceResolver",
    "PriceTicket",
    "SalesService",
    "StockService",
    "StockTotals",
    "clamp_page",
    "filter_charges_by_client",
    "gather_reads",
    "goto_page",
    "is_overdue",
    "next_page",
    "normalize_error",
    "paginate",
    "prev_page",
    "run_mutation",
    "stock_totals",
    "summarize_charges",
    "utc_now",
]
