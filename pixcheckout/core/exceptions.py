"""
Erros da integração PIX.

Todos herdam de PixError para que a camada HTTP consiga mapear
cada tipo para um status de resposta.
"""

from typing import Optional


class PixError(Exception):
    """Erro base da integração com o gateway PIX"""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class PixValidationError(PixError):
    """Dados inválidos detectados antes de qualquer chamada de rede"""


class PixGatewayError(PixError):
    """O gateway respondeu com erro"""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class InvalidGatewayResponseError(PixGatewayError):
    """Resposta de sucesso fora do formato esperado"""


class PixConnectionError(PixError):
    """Falha de transporte (DNS, TCP, TLS, timeout)"""


class PixUnexpectedError(PixError):
    """Qualquer outra falha; a causa original fica em __cause__"""
