"""Helpers de logging para a API Resend (sem token e sem PII).

Destinatários, corpo do email e conteúdo de anexos nunca são logados.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .errors import DecodeError, ServiceError, TransportError

logger = logging.getLogger(__name__)

# Trecho máximo do corpo de erro anexado ao log
_MAX_BODY_LOG_CHARS = 500


def _truncate(text: str) -> str:
    if len(text) > _MAX_BODY_LOG_CHARS:
        return text[:_MAX_BODY_LOG_CHARS] + "..."
    return text


def log_send_success(email_id: str, status_code: int, elapsed_ms: float) -> None:
    """Aviso de envio confirmado."""
    logger.info(
        "resend_email_sent",
        extra={
            "email_id": email_id,
            "status_code": status_code,
            "elapsed_ms": round(elapsed_ms, 2),
        },
    )


def log_service_error(error: ServiceError, elapsed_ms: float) -> None:
    logger.warning(
        "resend_service_error",
        extra={
            "status_code": error.status_code,
            "response_text": _truncate(error.body),
            "elapsed_ms": round(elapsed_ms, 2),
        },
    )


def log_decode_error(error: DecodeError) -> None:
    logger.error(
        "resend_decode_error",
        extra={
            "status_code": error.status_code,
            "reason": error.reason,
            "response_text": _truncate(error.body),
        },
    )


def log_transport_error(error: TransportError, endpoint: str) -> None:
    logger.warning(
        "resend_transport_error",
        extra={
            "endpoint": endpoint,
            "error_type": type(error.cause).__name__,
        },
    )
