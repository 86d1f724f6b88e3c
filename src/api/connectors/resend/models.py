"""Modelos do conector Resend.

Payloads de saída (TextEmail, HtmlEmail, Attachment) e o resultado de
sucesso (SentEmail). Os dois formatos de email não compartilham base:
ambos satisfazem o protocolo OutboundEmail por conta própria.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

from api.payload_builders.email import HtmlPayloadBuilder, TextPayloadBuilder

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence

_TEXT_BUILDER = TextPayloadBuilder()
_HTML_BUILDER = HtmlPayloadBuilder()


@runtime_checkable
class OutboundEmail(Protocol):
    """Contrato de um email serializável para a API."""

    def to_payload(self) -> dict[str, Any]:
        """Retorna o corpo JSON da requisição."""
        ...


@dataclass(frozen=True)
class Attachment:
    """Anexo embutido por valor no email."""

    content: bytes
    filename: str


@dataclass(frozen=True)
class TextEmail:
    """Email de texto puro.

    Attributes:
        from_: Remetente (ex: "Equipe <no-reply@example.com>")
        to: Destinatários, na ordem de envio
        subject: Assunto
        text: Corpo em texto puro
        attachments: Anexos; None omite o campo no payload
    """

    from_: str
    to: Sequence[str]
    subject: str
    text: str
    attachments: Sequence[Attachment] | None = None

    def to_payload(self) -> dict[str, Any]:
        return _TEXT_BUILDER.build(self)


@dataclass(frozen=True)
class HtmlEmail:
    """Email com corpo HTML.

    Attributes:
        from_: Remetente
        to: Destinatários, na ordem de envio
        subject: Assunto
        html: Corpo em markup HTML
        attachments: Anexos; None omite o campo no payload
    """

    from_: str
    to: Sequence[str]
    subject: str
    html: str
    attachments: Sequence[Attachment] | None = None

    def to_payload(self) -> dict[str, Any]:
        return _HTML_BUILDER.build(self)


@dataclass(frozen=True)
class SentEmail:
    """Email aceito pela API; `id` é atribuído pelo serviço remoto."""

    id: str

    @classmethod
    def from_response(cls, data: Mapping[str, Any]) -> SentEmail:
        """Decodifica o corpo de sucesso `{"id": "..."}`.

        Chaves desconhecidas são ignoradas.

        Raises:
            ValueError: Se o corpo não é um objeto ou `id` não é string.
        """
        if not isinstance(data, dict):
            raise ValueError("corpo de sucesso não é um objeto JSON")
        email_id = data.get("id")
        if not isinstance(email_id, str):
            raise ValueError("campo 'id' ausente ou não é string")
        return cls(id=email_id)
