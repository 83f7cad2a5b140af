from pydantic_settings import BaseSettings
from typing import List, Literal


class Settings(BaseSettings):
    """
    Configurações da aplicação.
    Carrega variáveis do arquivo .env automaticamente.
    """

    # Aplicação
    ENVIRONMENT: str = "development"
    HOST: str = "0.0.0.0"
    PORT: int = 8000

    # GhostsPay (gateway PIX)
    GHOSTSPAY_SECRET_KEY: str = ""
    GHOSTSPAY_AUTH_SCHEME: Literal["raw", "bearer"] = "raw"
    GHOSTSPAY_PURCHASE_URL: str = "https://app.ghostspaysv1.com/api/v1/transaction.purchase"
    GHOSTSPAY_STATUS_URL: str = "https://app.ghostspaysv1.com/api/v1/transaction.getPaymentDetails"
    GHOSTSPAY_TIMEOUT: float = 30.0

    # CORS
    CORS_ORIGINS: str = "http://localhost:5173"

    # Logs
    LOG_LEVEL: str = "INFO"

    @property
    def cors_origins_list(self) -> List[str]:
        """Converte string de CORS_ORIGINS em lista"""
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",") if origin.strip()]

    @property
    def ghostspay_authorization(self) -> str:
        """Valor do header Authorization conforme GHOSTSPAY_AUTH_SCHEME"""
        if self.GHOSTSPAY_AUTH_SCHEME == "bearer":
            return f"Bearer {self.GHOSTSPAY_SECRET_KEY}"
        return self.GHOSTSPAY_SECRET_KEY

    class Config:
        env_file = ".env"
        case_sensitive = True


# Instância única das configurações
settings = Settings()
