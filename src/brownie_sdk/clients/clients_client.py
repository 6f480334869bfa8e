from __future__ import annotations

from dataclasses import dataclass

from ..models import Client
from .base import BaseClient, expect_list


@dataclass
class ClientsClient(BaseClient):
    def list_clients(self) -> list[Client]:
        data = self._read(
            "clientes/listar_clientes",
            operation="clients.list",
            fallback_message="Failed to load clients.",
        )
        return [Client.model_validate(row) for row in expect_list(data, "list clients")]
