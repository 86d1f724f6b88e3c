"""Campos comuns aos payloads de email da API Resend."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Sequence

    from api.connectors.resend.models import Attachment


def build_attachment(attachment: Attachment) -> dict[str, Any]:
    """Serializa um anexo.

    O conteúdo sai como lista de inteiros (0-255), forma aceita pela API
    como buffer de bytes.
    """
    return {
        "content": list(attachment.content),
        "filename": attachment.filename,
    }


def build_base_payload(
    sender: str,
    recipients: Sequence[str],
    subject: str,
    attachments: Sequence[Attachment] | None,
) -> dict[str, Any]:
    """Monta os campos compartilhados por email texto e HTML.

    Args:
        sender: Endereço do remetente (campo `from`)
        recipients: Destinatários na ordem de envio
        subject: Assunto
        attachments: Anexos; None omite a chave `attachments`

    Returns:
        Dict com from/to/subject e, quando houver, attachments
    """
    payload: dict[str, Any] = {
        "from": sender,
        "to": list(recipients),
        "subject": subject,
    }
    if attachments is not None:
        payload["attachments"] = [build_attachment(item) for item in attachments]
    return payload
