"""Conector Resend: adapter de borda para a API de emails transacionais.

Responsabilidades:
- Modelos de payload (TextEmail, HtmlEmail, Attachment) e SentEmail
- Cliente HTTP com autenticação Bearer (ResendClient)
- Erros de envio como valores (TransportError, ServiceError, DecodeError)
"""

from .client import ResendClient, create_resend_client
from .errors import (
    DecodeError,
    OperationError,
    ResendSendError,
    ServiceError,
    TransportError,
    is_operation_error,
)
from .models import Attachment, HtmlEmail, OutboundEmail, SentEmail, TextEmail

__all__ = [
    "Attachment",
    "DecodeError",
    "HtmlEmail",
    "OperationError",
    "OutboundEmail",
    "ResendClient",
    "ResendSendError",
    "SentEmail",
    "ServiceError",
    "TextEmail",
    "TransportError",
    "create_resend_client",
    "is_operation_error",
]
