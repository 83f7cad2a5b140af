import asyncio
import json

import httpx
import pytest

from pixcheckout.config import Settings
from pixcheckout.services.pix_service import PixService


class FakeGateway:
    """Gateway GhostsPay simulado via httpx.MockTransport; guarda as requisições recebidas."""

    def __init__(self):
        self.requests = []
        self.handler = lambda request: httpx.Response(200, json={})

    def responder(self, handler):
        self.handler = handler

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.handler(request)

    def json_enviado(self, index=-1):
        return json.loads(self.requests[index].content)


@pytest.fixture
def settings():
    return Settings(GHOSTSPAY_SECRET_KEY="sk_test_123", _env_file=None)


@pytest.fixture
def gateway():
    return FakeGateway()


@pytest.fixture
def http_client(gateway):
    client = httpx.AsyncClient(transport=httpx.MockTransport(gateway))
    yield client
    asyncio.run(client.aclose())


@pytest.fixture
def service(settings, http_client):
    return PixService.from_settings(settings, http_client=http_client)


@pytest.fixture
def dados_pagador():
    return {
        "nome": "Maria Silva",
        "email": "maria@example.com",
        "cpf": "123.456.789-09",
        "telefone": "(11) 98765-4321",
        "valor_centavos": 4990,
        "descricao": "Pedido #1234",
        "utm_query": "utm_source=instagram&utm_campaign=lancamento",
    }
