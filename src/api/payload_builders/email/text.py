"""Builder para emails de texto puro."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from api.payload_builders.email.base import build_base_payload

if TYPE_CHECKING:
    from api.connectors.resend.models import TextEmail


class TextPayloadBuilder:
    """Builder para emails com corpo `text`."""

    def build(self, email: TextEmail) -> dict[str, Any]:
        """Constrói payload de email texto.

        Args:
            email: Email de texto a serializar

        Returns:
            Payload com from, to, subject, text e attachments opcional
        """
        payload = build_base_payload(
            email.from_, email.to, email.subject, email.attachments
        )
        payload["text"] = email.text
        return payload
