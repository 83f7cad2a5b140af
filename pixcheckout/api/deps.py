from fastapi import HTTPException, status
from pixcheckout.config import settings
from pixcheckout.services.pix_service import PixService
import logging

logger = logging.getLogger(__name__)


def get_pix_service() -> PixService:
    """
    Monta o PixService com as configurações da aplicação.
    Dependency obrigatória das rotas PIX.
    """
    try:
        return PixService.from_settings(settings)
    except ValueError as e:
        logger.error(f"❌ Gateway PIX não configurado: {e}")
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Pagamento PIX indisponível no momento",
        )
