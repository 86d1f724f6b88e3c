"""Connectors: adapters de borda para APIs externas.

Estrutura:
- resend/: API de emails transacionais Resend

Cada connector é o único ponto de IO do seu serviço externo.
"""

__all__: list[str] = []
