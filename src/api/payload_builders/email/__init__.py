"""Payload builders para a API de email (Resend).

Cada variante de email tem seu builder; os campos comuns ficam em base.py.
Nenhuma validação de endereço, destinatários ou tamanho de anexo é feita.
"""

from api.payload_builders.email.base import (
    build_attachment,
    build_base_payload,
)
from api.payload_builders.email.html import HtmlPayloadBuilder
from api.payload_builders.email.text import TextPayloadBuilder

__all__ = [
    "HtmlPayloadBuilder",
    "TextPayloadBuilder",
    "build_attachment",
    "build_base_payload",
]
