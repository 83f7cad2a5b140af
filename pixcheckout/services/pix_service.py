from typing import Any, Optional
from pydantic import ValidationError
import httpx
import logging
import re

from pixcheckout.config import Settings
from pixcheckout.core.ghostspay import GhostsPayClient
from pixcheckout.core.exceptions import (
    InvalidGatewayResponseError,
    PixError,
    PixUnexpectedError,
    PixValidationError,
)
from pixcheckout.schemas.pix import (
    PaymentDetails,
    PaymentStatus,
    PixChargeRequest,
    PixChargeResult,
)

logger = logging.getLogger(__name__)

_NAO_DIGITOS = re.compile(r"[^0-9]")

CPF_DIGITOS = 11
TELEFONE_MIN_DIGITOS = 10


def normalizar_digitos(valor: str) -> str:
    """Remove tudo que não for dígito (pontos, traços, parênteses, espaços)"""
    return _NAO_DIGITOS.sub("", valor or "")


def _campos_invalidos(erro: ValidationError) -> str:
    # só a localização dos campos, nunca o valor recebido
    return ", ".join(".".join(str(parte) for parte in item["loc"]) or "corpo" for item in erro.errors())


class PixService:
    """
    Serviço de cobranças PIX via GhostsPay
    """

    def __init__(self, client: GhostsPayClient):
        self.client = client

    @classmethod
    def from_settings(cls, settings: Settings, http_client: Optional[httpx.AsyncClient] = None) -> "PixService":
        return cls(GhostsPayClient(settings, http_client=http_client))

    @staticmethod
    def montar_cobranca(
        nome: str,
        email: str,
        cpf: str,
        telefone: str,
        valor_centavos: int,
        descricao: str,
        utm_query: str = ""
    ) -> PixChargeRequest:
        """
        Valida e normaliza os dados do pagador

        Raises:
            PixValidationError: CPF, telefone ou valor inválidos
        """
        cpf_limpo = normalizar_digitos(cpf)
        if len(cpf_limpo) != CPF_DIGITOS:
            logger.warning(f"CPF rejeitado: {len(cpf_limpo)} dígitos")
            raise PixValidationError("CPF deve ter 11 dígitos")

        telefone_limpo = normalizar_digitos(telefone)
        if len(telefone_limpo) < TELEFONE_MIN_DIGITOS:
            logger.warning(f"Telefone rejeitado: {len(telefone_limpo)} dígitos")
            raise PixValidationError("Telefone deve ter pelo menos 10 dígitos")

        if isinstance(valor_centavos, bool) or not isinstance(valor_centavos, int) or valor_centavos <= 0:
            logger.warning(f"Valor rejeitado: {valor_centavos!r}")
            raise PixValidationError("Valor deve ser um inteiro positivo em centavos")

        return PixChargeRequest(
            name=nome,
            email=email,
            cpf=cpf_limpo,
            phone=telefone_limpo,
            amount=valor_centavos,
            description=descricao,
            utm_query=utm_query
        )

    async def gerar_pix(
        self,
        nome: str,
        email: str,
        cpf: str,
        telefone: str,
        valor_centavos: int,
        descricao: str,
        utm_query: str = ""
    ) -> PixChargeResult:
        """
        Cria uma cobrança PIX

        Fluxo:
        1. Valida CPF (11 dígitos), telefone (10+ dígitos) e valor
        2. Envia a cobrança ao gateway
        3. Valida a resposta e devolve código e QR Code

        Args:
            nome: Nome do pagador
            email: Email do pagador
            cpf: CPF com ou sem máscara
            telefone: Telefone com ou sem máscara
            valor_centavos: Valor em centavos
            descricao: Título do item cobrado
            utm_query: Parâmetros de rastreamento da origem

        Returns:
            PixChargeResult com id, pixCode e pixQrCode

        Raises:
            PixValidationError: dados inválidos (nenhuma chamada de rede é feita)
            PixGatewayError: gateway recusou ou respondeu fora do formato
            PixConnectionError: falha de conexão
            PixUnexpectedError: qualquer outra falha
        """
        cobranca = self.montar_cobranca(nome, email, cpf, telefone, valor_centavos, descricao, utm_query)

        try:
            data = await self.client.criar_cobranca(cobranca.to_gateway_payload())
            resultado = self._ler_resultado(data)
        except PixError:
            raise
        except Exception as e:
            logger.error(f"Erro inesperado ao gerar PIX: {e!r}")
            raise PixUnexpectedError("Erro inesperado ao gerar cobrança PIX") from e

        logger.info(f"✅ PIX gerado com sucesso: {resultado.id}")
        return resultado

    async def verificar_status_pagamento(self, transacao_id: str) -> PaymentStatus:
        """
        Consulta o status atual de uma cobrança (uma única chamada)

        Quem chama decide quando consultar de novo até um status final
        (APPROVED, FAILED ou REJECTED).

        Args:
            transacao_id: ID retornado por gerar_pix

        Returns:
            PaymentStatus atual
        """
        if not transacao_id or not transacao_id.strip():
            logger.warning("Consulta de status sem ID da transação")
            raise PixValidationError("ID da transação é obrigatório")

        try:
            data = await self.client.consultar_pagamento(transacao_id.strip())
            status = self._ler_status(data)
        except PixError:
            raise
        except Exception as e:
            logger.error(f"Erro inesperado ao verificar status {transacao_id}: {e!r}")
            raise PixUnexpectedError("Erro inesperado ao verificar status do pagamento") from e

        logger.info(f"Status da transação {transacao_id}: {status.value}")
        return status

    @staticmethod
    def _ler_resultado(data: Any) -> PixChargeResult:
        try:
            return PixChargeResult.model_validate(data)
        except ValidationError as e:
            logger.error(f"Resposta de cobrança fora do formato (campos: {_campos_invalidos(e)})")
            raise InvalidGatewayResponseError("Resposta do gateway sem os dados do PIX") from e

    @staticmethod
    def _ler_status(data: Any) -> PaymentStatus:
        try:
            return PaymentDetails.model_validate(data).status
        except ValidationError as e:
            logger.error(f"Status de pagamento fora do formato (campos: {_campos_invalidos(e)})")
            raise InvalidGatewayResponseError("Status de pagamento desconhecido retornado pelo gateway") from e
