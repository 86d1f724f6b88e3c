"""Configuração centralizada de logging.

Uso:
    from config.logging import configure_logging, get_logger

    # Uma vez, no ponto de entrada do processo
    configure_logging(level="INFO", service_name="resend_connector")

    # Em qualquer módulo
    logger = get_logger(__name__)
    logger.info("resend_email_sent", extra={"email_id": "abc123"})
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from config.logging.filters import BearerTokenRedactionFilter, CorrelationIdFilter
from config.logging.formatters import create_json_formatter

if TYPE_CHECKING:
    from collections.abc import Callable

VALID_LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})

DEFAULT_SERVICE_NAME = "resend_connector"


def configure_logging(
    level: str = "INFO",
    service_name: str = DEFAULT_SERVICE_NAME,
    correlation_id_getter: Callable[[], str] | None = None,
) -> None:
    """Configura logging JSON estruturado no logger raiz.

    Substitui os handlers existentes por um único StreamHandler com
    formatter JSON, injeção de contexto e mascaramento de tokens Bearer.

    Args:
        level: Nível de log (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        service_name: Nome do serviço exibido nos logs.
        correlation_id_getter: Função opcional que retorna o correlation_id
            do contexto atual.

    Raises:
        ValueError: Se o nível de log for inválido.
    """
    level_upper = level.upper()
    if level_upper not in VALID_LOG_LEVELS:
        raise ValueError(
            f"Nível de log inválido: {level}. "
            f"Válidos: {', '.join(sorted(VALID_LOG_LEVELS))}"
        )

    handler = logging.StreamHandler()
    handler.setLevel(level_upper)
    handler.setFormatter(create_json_formatter())
    handler.addFilter(CorrelationIdFilter(service_name, correlation_id_getter))
    handler.addFilter(BearerTokenRedactionFilter())

    root = logging.getLogger()
    root.setLevel(level_upper)
    root.handlers = [handler]


def get_logger(name: str) -> logging.Logger:
    """Retorna logger para o módulo especificado (geralmente __name__)."""
    return logging.getLogger(name)
