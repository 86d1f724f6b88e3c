"""Configuração de logging estruturado.

Uso:
    from config.logging import configure_logging, get_logger

    configure_logging(level="INFO", service_name="resend_connector")
    logger = get_logger(__name__)

Campos em todo log: correlation_id, service, level, logger, message, asctime.
Tokens de autenticação nunca aparecem nos logs.
"""

from config.logging.config import configure_logging, get_logger
from config.logging.filters import (
    BearerTokenRedactionFilter,
    CorrelationIdFilter,
    redact_bearer,
)
from config.logging.formatters import (
    FIELD_RENAME_MAP,
    REQUIRED_LOG_FIELDS,
    create_json_formatter,
)

__all__ = [
    "FIELD_RENAME_MAP",
    "REQUIRED_LOG_FIELDS",
    "BearerTokenRedactionFilter",
    "CorrelationIdFilter",
    "configure_logging",
    "create_json_formatter",
    "get_logger",
    "redact_bearer",
]
