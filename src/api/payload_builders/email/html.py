"""Builder para emails HTML."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from api.payload_builders.email.base import build_base_payload

if TYPE_CHECKING:
    from api.connectors.resend.models import HtmlEmail


class HtmlPayloadBuilder:
    """Builder para emails com corpo `html`.

    O markup é enviado como está; nenhuma sanitização é feita aqui.
    """

    def build(self, email: HtmlEmail) -> dict[str, Any]:
        payload = build_base_payload(
            email.from_, email.to, email.subject, email.attachments
        )
        payload["html"] = email.html
        return payload
