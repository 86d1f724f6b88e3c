"""Filters de logging.

- CorrelationIdFilter: injeta service e correlation_id em cada record.
- BearerTokenRedactionFilter: mascara credenciais Bearer que vazem
  para a mensagem ou para os argumentos do log.
"""

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable

_BEARER_PATTERN = re.compile(r"(Bearer\s+)[^\s\"',]+", re.IGNORECASE)
REDACTED = "[REDACTED]"


def redact_bearer(text: str) -> str:
    """Substitui o valor de qualquer `Bearer <token>` por [REDACTED]."""
    return _BEARER_PATTERN.sub(rf"\g<1>{REDACTED}", text)


class CorrelationIdFilter(logging.Filter):
    """Injeta correlation_id e service em cada record de log.

    Args:
        service_name: Nome do serviço exibido nos logs.
        correlation_id_getter: Função que retorna o correlation_id atual.
            Sem ela, usa string vazia.
    """

    def __init__(
        self,
        service_name: str,
        correlation_id_getter: Callable[[], str] | None = None,
    ) -> None:
        super().__init__()
        self._service_name = service_name
        self._get_correlation_id = correlation_id_getter or (lambda: "")

    def filter(self, record: logging.LogRecord) -> bool:
        """Enriquece o record; nunca descarta.

        Um correlation_id passado via `extra` tem precedência.
        """
        existing = getattr(record, "correlation_id", None)
        record.correlation_id = existing if existing else self._get_correlation_id()
        record.service = self._service_name
        return True


class BearerTokenRedactionFilter(logging.Filter):
    """Remove tokens Bearer da mensagem final do record."""

    def filter(self, record: logging.LogRecord) -> bool:
        try:
            message = record.getMessage()
        except (TypeError, ValueError):
            # args incompatíveis: o handler reporta o erro ao formatar
            return True
        redacted = redact_bearer(message)
        if redacted != message:
            record.msg = redacted
            record.args = None
        return True
