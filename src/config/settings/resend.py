"""Settings específicas da API Resend.

Somente o conector lê estas configurações; a biblioteca em si
recebe o token pronto e não depende de variáveis de ambiente.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from functools import lru_cache

RESEND_API_BASE_URL: str = "https://api.resend.com"
RESEND_EMAILS_PATH: str = "/emails"
DEFAULT_USER_AGENT: str = "resend-connector-python/0.1.0"


@dataclass(frozen=True)
class ResendSettings:
    """Configurações da API Resend.

    Attributes:
        api_key: Token Bearer (segredo, nunca logado)
        api_base_url: URL base da API
        emails_path: Caminho do endpoint de envio
        request_timeout_seconds: Timeout aplicado pelo httpx
        user_agent: Valor do header User-Agent
    """

    api_key: str = field(default="", repr=False)
    api_base_url: str = RESEND_API_BASE_URL
    emails_path: str = RESEND_EMAILS_PATH
    request_timeout_seconds: float = 30.0
    user_agent: str = DEFAULT_USER_AGENT

    @property
    def emails_url(self) -> str:
        """URL completa do endpoint: https://api.resend.com/emails."""
        return f"{self.api_base_url.rstrip('/')}/{self.emails_path.lstrip('/')}"

    def validate(self) -> list[str]:
        """Valida configurações mínimas.

        Returns:
            Lista de erros de validação (vazia = tudo OK).
        """
        errors: list[str] = []

        if not self.api_key:
            errors.append("RESEND_API_KEY não configurado")

        if not self.api_base_url.startswith(("https://", "http://")):
            errors.append("RESEND_API_BASE_URL deve ser uma URL http(s)")

        if self.request_timeout_seconds <= 0:
            errors.append("RESEND_REQUEST_TIMEOUT_SECONDS deve ser > 0")

        return errors


def _load_from_env() -> ResendSettings:
    """Carrega ResendSettings a partir de variáveis de ambiente."""
    return ResendSettings(
        api_key=os.getenv("RESEND_API_KEY", ""),
        api_base_url=os.getenv("RESEND_API_BASE_URL", RESEND_API_BASE_URL),
        request_timeout_seconds=float(
            os.getenv("RESEND_REQUEST_TIMEOUT_SECONDS", "30")
        ),
        user_agent=os.getenv("RESEND_USER_AGENT", DEFAULT_USER_AGENT),
    )


@lru_cache(maxsize=1)
def get_resend_settings() -> ResendSettings:
    """Retorna instância cacheada de ResendSettings."""
    return _load_from_env()
