"""Erros do conector Resend.

Falhas de envio são valores, não exceções: `ResendClient.send` devolve
um dos tipos abaixo em vez de levantar.

- TransportError: falha de rede/DNS/TLS/timeout antes da resposta
- ServiceError: API respondeu com status fora de 2xx
- DecodeError: API respondeu 2xx mas o corpo não é `{"id": str}`

ResendSendError existe para quem prefere exceções (`send_or_raise`).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal, TypeGuard

from utils.errors import InfrastructureError


@dataclass(frozen=True)
class TransportError:
    """Falha abaixo da troca HTTP (conexão, DNS, TLS, timeout)."""

    cause: Exception
    kind: Literal["transport"] = field(default="transport", init=False)

    def describe(self) -> str:
        return f"Transport error: {type(self.cause).__name__}: {self.cause}"


@dataclass(frozen=True)
class ServiceError:
    """Resposta não-2xx da API; `body` é o texto bruto, sem parsing."""

    status_code: int
    body: str
    kind: Literal["service"] = field(default="service", init=False)

    def describe(self) -> str:
        return f"Resend Error ({self.status_code}): {self.body}"


@dataclass(frozen=True)
class DecodeError:
    """Resposta 2xx cujo corpo não pôde ser decodificado em SentEmail."""

    status_code: int
    body: str
    reason: str
    kind: Literal["decode"] = field(default="decode", init=False)

    def describe(self) -> str:
        return f"Decode error ({self.status_code}): {self.reason}"


OperationError = TransportError | ServiceError | DecodeError

_OPERATION_ERROR_TYPES = (TransportError, ServiceError, DecodeError)


def is_operation_error(value: object) -> TypeGuard[OperationError]:
    """Retorna True se `value` é um dos erros de envio."""
    return isinstance(value, _OPERATION_ERROR_TYPES)


class ResendSendError(InfrastructureError):
    """Exceção que carrega o OperationError de um envio que falhou."""

    def __init__(self, error: OperationError) -> None:
        super().__init__(error.describe())
        self.error = error
