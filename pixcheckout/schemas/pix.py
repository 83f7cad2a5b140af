from pydantic import BaseModel, Field, field_validator
from enum import Enum
from typing import Any, Dict


class PaymentStatus(str, Enum):
    PENDING = "PENDING"
    APPROVED = "APPROVED"
    FAILED = "FAILED"
    REJECTED = "REJECTED"

    @property
    def is_terminal(self) -> bool:
        return self is not PaymentStatus.PENDING


class PixChargeRequest(BaseModel):
    """
    Cobrança PIX já normalizada (CPF e telefone só com dígitos)
    """
    name: str
    email: str
    cpf: str
    phone: str
    amount: int
    description: str
    utm_query: str = ""

    def to_gateway_payload(self) -> Dict[str, Any]:
        """Monta o corpo JSON esperado pelo endpoint de compra"""
        return {
            "name": self.name,
            "email": self.email,
            "cpf": self.cpf,
            "phone": self.phone,
            "paymentMethod": "PIX",
            "amount": self.amount,
            "traceable": True,
            "utmQuery": self.utm_query,
            "items": [
                {
                    "unitPrice": self.amount,
                    "title": self.description,
                    "quantity": 1,
                    "tangible": False
                }
            ]
        }


class PixChargeResult(BaseModel):
    """
    Cobrança criada no gateway (código copia-e-cola e QR Code)
    """
    id: str = Field(min_length=1)
    pix_code: str = Field(alias="pixCode", min_length=1)
    pix_qr_code: str = Field(alias="pixQrCode", min_length=1)

    @field_validator("id", mode="before")
    @classmethod
    def id_numerico_como_texto(cls, value: Any) -> Any:
        # alguns gateways devolvem o id como número
        if isinstance(value, int) and not isinstance(value, bool):
            return str(value)
        return value

    class Config:
        frozen = True
        populate_by_name = True


class PaymentDetails(BaseModel):
    """
    Resposta do endpoint de consulta de pagamento (demais campos ignorados)
    """
    status: PaymentStatus


class GerarPixRequest(BaseModel):
    """
    Requisição para gerar uma cobrança PIX
    """
    nome: str
    email: str
    cpf: str
    telefone: str
    valor_centavos: int
    descricao: str
    utm_query: str = ""

    class Config:
        json_schema_extra = {
            "example": {
                "nome": "Maria Silva",
                "email": "maria@example.com",
                "cpf": "123.456.789-09",
                "telefone": "(11) 98765-4321",
                "valor_centavos": 4990,
                "descricao": "Pedido #1234",
                "utm_query": "utm_source=instagram"
            }
        }


class PixStatusResponse(BaseModel):
    """
    Status atual de uma cobrança
    """
    id: str
    status: PaymentStatus
    finalizado: bool
