from __future__ import annotations

import logging

from brownie_sdk import ApiSession, BillingOverviewResponse, Charge, PaidChargeRecord, PayChargeRequest

from .errors import normalize_error

logger = logging.getLogger(__name__)


class BillingService:
    def __init__(self, session: ApiSession) -> None:
        self.session = session

    def pending_overview(self) -> BillingOverviewResponse:
        try:
            return self.session.billing_client().pending_overview()
        except Exception as exc:
            raise normalize_error(exc, "Failed to load billing data.") from exc

    def mark_paid(self, charge: Charge) -> PayChargeRequest:
        request = PayChargeRequest.for_charge(charge)
        try:
            self.session.billing_client().pay_charge(request)
        except Exception as exc:
            raise normalize_error(exc, "Failed to mark the charge as paid.") from exc
        logger.info("charge_paid", extra={"charge_id": charge.id})
        return request

    def paid_history(self) -> list[PaidChargeRecord]:
        try:
            return self.session.billing_client().paid_history()
        except Exception as exc:
            raise normalize_error(exc, "Failed to load paid charges.") from exc
