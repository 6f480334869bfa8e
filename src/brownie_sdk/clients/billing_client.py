from __future__ import annotations

from dataclasses import dataclass

from ..models import BillingOverviewResponse, PaidChargeRecord, PayChargeRequest
from .base import BaseClient, expect_list, expect_object


@dataclass
class BillingClient(BaseClient):
    def pending_overview(self) -> BillingOverviewResponse:
        data = self._read(
            "cobranca/pendentes",
            operation="billing.pending",
            fallback_message="Failed to load billing data.",
        )
        return BillingOverviewResponse.model_validate(expect_object(data, "pending charges"))

    def pay_charge(self, request: PayChargeRequest) -> None:
        self._write(
            "cobranca/pagar_cobranca",
            request.model_dump(mode="json", by_alias=True),
            operation="billing.pay",
            fallback_message="Failed to mark the charge as paid.",
        )

    def paid_history(self) -> list[PaidChargeRecord]:
        data = self._read(
            "cobranca/cobrancas_pagas",
            operation="billing.paid_history",
            fallback_message="Failed to load paid charges.",
        )
        return [PaidChargeRecord.model_validate(row) for row in expect_list(data, "paid charges")]
