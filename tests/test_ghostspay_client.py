"""Testes do GhostsPayClient: headers, esquema de autorização e configuração."""

import asyncio

import httpx
import pytest

from pixcheckout.config import Settings
from pixcheckout.core.exceptions import PixGatewayError
from pixcheckout.core.ghostspay import GhostsPayClient


def test_sem_secret_nao_inicia():
    with pytest.raises(ValueError, match="GHOSTSPAY_SECRET_KEY"):
        GhostsPayClient(Settings(GHOSTSPAY_SECRET_KEY="", _env_file=None))


def test_authorization_raw_por_padrao(settings, http_client, gateway):
    gateway.responder(lambda request: httpx.Response(200, json={"status": "PENDING"}))
    client = GhostsPayClient(settings, http_client=http_client)

    asyncio.run(client.consultar_pagamento("tx1"))

    headers = gateway.requests[0].headers
    assert headers["Authorization"] == "sk_test_123"
    assert headers["Accept"] == "application/json"


def test_authorization_bearer(http_client, gateway):
    settings = Settings(GHOSTSPAY_SECRET_KEY="sk_test_123", GHOSTSPAY_AUTH_SCHEME="bearer", _env_file=None)
    gateway.responder(lambda request: httpx.Response(200, json={"id": "tx1"}))
    client = GhostsPayClient(settings, http_client=http_client)

    asyncio.run(client.criar_cobranca({"amount": 100}))

    headers = gateway.requests[0].headers
    assert headers["Authorization"] == "Bearer sk_test_123"
    assert headers["Content-Type"] == "application/json"
    assert headers["Accept"] == "application/json"


def test_esquema_de_autorizacao_invalido():
    with pytest.raises(ValueError):
        Settings(GHOSTSPAY_SECRET_KEY="sk", GHOSTSPAY_AUTH_SCHEME="basic", _env_file=None)


def test_urls_configuraveis(http_client, gateway):
    settings = Settings(
        GHOSTSPAY_SECRET_KEY="sk",
        GHOSTSPAY_PURCHASE_URL="https://sandbox.example.com/purchase",
        GHOSTSPAY_STATUS_URL="https://sandbox.example.com/details",
        _env_file=None,
    )
    gateway.responder(lambda request: httpx.Response(200, json={}))
    client = GhostsPayClient(settings, http_client=http_client)

    asyncio.run(client.criar_cobranca({"amount": 100}))
    asyncio.run(client.consultar_pagamento("tx1"))

    assert str(gateway.requests[0].url) == "https://sandbox.example.com/purchase"
    assert str(gateway.requests[1].url) == "https://sandbox.example.com/details?id=tx1"


def test_mensagem_de_erro_json_nao_objeto(settings, http_client, gateway):
    gateway.responder(lambda request: httpx.Response(400, json=["invalid"]))
    client = GhostsPayClient(settings, http_client=http_client)

    with pytest.raises(PixGatewayError, match="Erro 400"):
        asyncio.run(client.criar_cobranca({"amount": 100}))


def test_cors_origins_list():
    settings = Settings(CORS_ORIGINS="http://a.com, http://b.com,", _env_file=None)
    assert settings.cors_origins_list == ["http://a.com", "http://b.com"]


def test_authorization_bearer_na_consulta_de_status(http_client, gateway):
    settings = Settings(GHOSTSPAY_SECRET_KEY="sk_test_123", GHOSTSPAY_AUTH_SCHEME="bearer", _env_file=None)
    gateway.responder(lambda request: httpx.Response(200, json={"status": "PENDING"}))
    client = GhostsPayClient(settings, http_client=http_client)

    asyncio.run(client.consultar_pagamento("tx1"))

    request = gateway.requests[0]
    assert request.method == "GET"
    assert request.headers["Authorization"] == "Bearer sk_test_123"
    assert request.headers["Accept"] == "application/json"


def test_mensagem_de_erro_json_null_usa_status_http(settings, http_client, gateway):
    gateway.responder(lambda request: httpx.Response(
        400, content=b"null", headers={"Content-Type": "application/json"}
    ))
    client = GhostsPayClient(settings, http_client=http_client)

    with pytest.raises(PixGatewayError, match="Bad Request") as exc_info:
        asyncio.run(client.criar_cobranca({"amount": 100}))
    assert exc_info.value.status_code == 400
