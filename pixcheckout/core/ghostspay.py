import httpx
from typing import Any, Dict, Optional
from pixcheckout.config import Settings
from pixcheckout.core.exceptions import (
    InvalidGatewayResponseError,
    PixConnectionError,
    PixGatewayError,
)
import logging

logger = logging.getLogger(__name__)


class GhostsPayClient:
    """
    Cliente HTTP para a API da GhostsPay usando httpx.

    Recebe as configurações explicitamente. Se um httpx.AsyncClient for
    injetado ele é reutilizado; caso contrário cada chamada abre um
    cliente próprio com o timeout configurado.
    """

    def __init__(self, settings: Settings, http_client: Optional[httpx.AsyncClient] = None):
        if not settings.GHOSTSPAY_SECRET_KEY:
            raise ValueError("GHOSTSPAY_SECRET_KEY precisa estar configurado.")
        self.purchase_url = settings.GHOSTSPAY_PURCHASE_URL
        self.status_url = settings.GHOSTSPAY_STATUS_URL
        self.timeout = settings.GHOSTSPAY_TIMEOUT
        self.headers = {
            "Authorization": settings.ghostspay_authorization,
            "Accept": "application/json"
        }
        self._http_client = http_client

    async def _send(self, method: str, url: str, **kwargs) -> httpx.Response:
        if self._http_client is not None:
            return await self._http_client.request(method, url, **kwargs)
        async with httpx.AsyncClient(timeout=self.timeout) as client:
            return await client.request(method, url, **kwargs)

    async def criar_cobranca(self, payload: Dict[str, Any]) -> Any:
        """
        Envia a cobrança para o endpoint de compra

        Args:
            payload: Corpo JSON já montado

        Returns:
            JSON da resposta de sucesso
        """
        headers = {**self.headers, "Content-Type": "application/json"}

        logger.info(f"Enviando cobrança PIX para: {self.purchase_url} (valor: {payload.get('amount')} centavos)")

        try:
            response = await self._send("POST", self.purchase_url, json=payload, headers=headers)
        except httpx.TransportError as e:
            logger.error(f"Erro de conexão ao gerar PIX: {e!r}")
            raise PixConnectionError("Erro de conexão. Verifique sua internet e tente novamente.") from e

        logger.info(f"Response status: {response.status_code}")

        if not response.is_success:
            logger.error(f"Erro na resposta da API: {response.status_code} {response.reason_phrase} ({len(response.content)} bytes)")
            raise PixGatewayError(self._mensagem_de_erro(response), status_code=response.status_code)

        return self._ler_json(response)

    async def consultar_pagamento(self, transacao_id: str) -> Any:
        """
        Consulta os detalhes de pagamento de uma transação

        Args:
            transacao_id: ID retornado na criação da cobrança

        Returns:
            JSON da resposta de sucesso
        """
        try:
            response = await self._send(
                "GET",
                self.status_url,
                params={"id": transacao_id},
                headers=self.headers
            )
        except httpx.TransportError as e:
            logger.error(f"Erro de conexão ao verificar status {transacao_id}: {e!r}")
            raise PixConnectionError("Erro de conexão ao verificar status. Tente novamente.") from e

        if not response.is_success:
            logger.error(f"Erro ao verificar status: {response.status_code} {response.reason_phrase} ({len(response.content)} bytes)")
            raise PixGatewayError(
                f"Erro {response.status_code}: Não foi possível verificar o status do pagamento",
                status_code=response.status_code
            )

        return self._ler_json(response)

    @staticmethod
    def _mensagem_de_erro(response: httpx.Response) -> str:
        """
        Extrai a mensagem de erro do corpo JSON; sem JSON (ou com null), usa o status HTTP
        """
        fallback = f"Erro {response.status_code}"
        try:
            data = response.json()
        except ValueError:
            return response.reason_phrase or fallback

        if data is None:
            return response.reason_phrase or fallback
        if isinstance(data, dict) and data.get("message"):
            return str(data["message"])
        return fallback

    @staticmethod
    def _ler_json(response: httpx.Response) -> Any:
        try:
            return response.json()
        except ValueError as e:
            logger.error(f"Resposta do gateway não é JSON: {response.status_code} ({len(response.content)} bytes)")
            raise InvalidGatewayResponseError(
                "Resposta inválida do gateway",
                status_code=response.status_code
            ) from e
