"""Payload builders: construção de payloads para APIs externas.

Estrutura:
- email/: API de email transacional (Resend)

Builders só transformam modelos em dicts JSON-serializáveis; IO fica em
api/connectors.
"""

__all__: list[str] = []
