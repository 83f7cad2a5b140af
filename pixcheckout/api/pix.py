from fastapi import APIRouter, Depends, HTTPException, status
from pixcheckout.schemas.pix import GerarPixRequest, PixChargeResult, PixStatusResponse
from pixcheckout.services.pix_service import PixService
from pixcheckout.api.deps import get_pix_service
from pixcheckout.core.exceptions import (
    PixConnectionError,
    PixError,
    PixGatewayError,
    PixValidationError,
)
import logging

logger = logging.getLogger(__name__)

router = APIRouter()


def _http_exception(erro: PixError) -> HTTPException:
    if isinstance(erro, PixValidationError):
        status_code = status.HTTP_400_BAD_REQUEST
    elif isinstance(erro, PixConnectionError):
        status_code = status.HTTP_503_SERVICE_UNAVAILABLE
    elif isinstance(erro, PixGatewayError):
        status_code = status.HTTP_502_BAD_GATEWAY
    else:
        status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    return HTTPException(status_code=status_code, detail=erro.message)


@router.post("/cobrancas", response_model=PixChargeResult, response_model_by_alias=True)
async def gerar_cobranca_pix(
    request: GerarPixRequest,
    service: PixService = Depends(get_pix_service)
):
    """
    Gera uma cobrança PIX

    Fluxo:
    1. Valida CPF e telefone
    2. Cria a cobrança na GhostsPay
    3. Retorna código copia-e-cola e QR Code
    4. O front consulta /status até o pagamento ser finalizado

    Returns:
        id, pixCode e pixQrCode
    """
    logger.info(f"Gerando PIX - Valor: {request.valor_centavos} centavos")

    try:
        return await service.gerar_pix(
            nome=request.nome,
            email=request.email,
            cpf=request.cpf,
            telefone=request.telefone,
            valor_centavos=request.valor_centavos,
            descricao=request.descricao,
            utm_query=request.utm_query
        )
    except PixError as e:
        raise _http_exception(e)


@router.get("/cobrancas/{transacao_id}/status", response_model=PixStatusResponse)
async def status_cobranca_pix(
    transacao_id: str,
    service: PixService = Depends(get_pix_service)
):
    """
    Consulta o status de uma cobrança PIX
    """
    try:
        pagamento_status = await service.verificar_status_pagamento(transacao_id)
    except PixError as e:
        raise _http_exception(e)

    return PixStatusResponse(
        id=transacao_id,
        status=pagamento_status,
        finalizado=pagamento_status.is_terminal
    )
