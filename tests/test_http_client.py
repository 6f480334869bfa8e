from __future__ import annotations

import json

import pytest
import requests
import responses

from brownie_sdk import load_config
from brownie_sdk.error_mapper import GENERIC_FAILURE_MESSAGE, extract_detail, map_error
from brownie_sdk.exceptions import NetworkError, NotFoundError, ServiceError
from brownie_sdk.gateway import RemoteGateway
from brownie_sdk.http_client import HttpClient

BASE = "https://api.example.com"


def _http() -> HttpClient:
    return HttpClient(load_config())


def test_error_mapper_classes() -> None:
    assert isinstance(map_error(404, {"detail": "Categoria não encontrada"}), NotFoundError)
    err = map_error(400, {"detail": "Estoque insuficiente"})
    assert isinstance(err, ServiceError)
    assert not isinstance(err, NotFoundError)
    assert err.status_code == 400
    assert err.message == "Estoque insuficiente"
    assert str(err) == "[400] Estoque insuficiente"


def test_error_mapper_message_precedence() -> None:
    assert map_error(500, {}, "Failed to load stock.").message == "Failed to load stock."
    assert map_error(500, None).message == GENERIC_FAILURE_MESSAGE
    assert extract_detail({"detail": [{"msg": "field required"}, {"msg": "bad date"}]}) == "field required; bad date"
    assert extract_detail({"detail": "  "}) is None
    assert extract_detail(["detail"]) is None


@responses.activate
def test_request_returns_json_and_records_operation() -> None:
    responses.add(responses.GET, f"{BASE}/estoque/estoque", json=[{"categoria": "Nuts", "quantidade": 12}], status=200)
    http = _http()
    payload = http.request("GET", "estoque/estoque", module="stock", operation="stock.list")
    assert payload == [{"categoria": "Nuts", "quantidade": 12}]
    assert http.last_call is not None
    assert http.last_call.result == "success"
    assert http.last_call.status_code == 200
    assert len(responses.calls) == 1


@responses.activate
def test_request_sends_json_body() -> None:
    responses.add(responses.POST, f"{BASE}/estoque/preco_unitario", json=5.5, status=200)
    http = _http()
    assert http.request("POST", "/estoque/preco_unitario", json_body={"categoria": "Traditional"}) == 5.5
    assert json.loads(responses.calls[0].request.body) == {"categoria": "Traditional"}


@responses.activate
def test_request_empty_body_is_none() -> None:
    responses.add(responses.POST, f"{BASE}/vendas/vender", body="", status=201)
    assert _http().request("POST", "vendas/vender", json_body={}) is None


@responses.activate
def test_request_maps_error_detail() -> None:
    responses.add(responses.POST, f"{BASE}/estoque/preco_unitario", json={"detail": "Categoria não encontrada"}, status=404)
    http = _http()
    with pytest.raises(NotFoundError) as exc_info:
        http.request("POST", "estoque/preco_unitario", json_body={"categoria": "X"}, fallback_message="No price")
    assert exc_info.value.message == "Categoria não encontrada"
    assert http.last_call.result == "error"


@responses.activate
def test_request_non_json_error_uses_fallback() -> None:
    responses.add(responses.GET, f"{BASE}/cobranca/pendentes", body="boom", status=502)
    with pytest.raises(ServiceError) as exc_info:
        _http().request("GET", "cobranca/pendentes", fallback_message="Failed to load billing data.")
    assert exc_info.value.message == "Failed to load billing data."
    assert exc_info.value.status_code == 502


@responses.activate
def test_request_network_failure_is_not_retried() -> None:
    responses.add(responses.GET, f"{BASE}/estoque/estoque", body=requests.ConnectionError("refused"))
    http = _http()
    with pytest.raises(NetworkError) as exc_info:
        http.request("GET", "estoque/estoque")
    assert "ConnectionError" in str(exc_info.value.detail)
    assert len(responses.calls) == 1
    assert http.last_call.result == "network_error"


@responses.activate
def test_gateway_returns_failures_as_values() -> None:
    responses.add(responses.GET, f"{BASE}/estoque/estoque", json={"detail": "indisponível"}, status=503)
    responses.add(responses.GET, f"{BASE}/estoque/categorias_estoque", json=["Nuts"], status=200)
    gateway = RemoteGateway(http=_http(), module="stock")

    failed = gateway.read("estoque/estoque")
    assert not failed.ok
    assert isinstance(failed.error, ServiceError)
    with pytest.raises(ServiceError):
        failed.unwrap()

    succeeded = gateway.read("estoque/categorias_estoque")
    assert succeeded.ok
    assert succeeded.unwrap() == ["Nuts"]
