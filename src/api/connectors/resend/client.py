"""Cliente HTTP para a API de emails Resend.

Uma chamada de `send` = um POST em /emails, sem retry e sem backoff.
O resultado é sempre um valor: SentEmail no sucesso ou um OperationError
(TransportError, ServiceError, DecodeError) na falha. Nada é levantado
para falhas de rede ou da API, e o cliente continua utilizável depois
de qualquer falha.

O token é o único estado do cliente, é imutável e nunca é logado
nem incluído em repr/mensagens de erro.
"""

from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING, Any

import httpx

from api.connectors.resend.errors import (
    DecodeError,
    OperationError,
    ResendSendError,
    ServiceError,
    TransportError,
)
from api.connectors.resend.models import SentEmail
from api.connectors.resend.resend_logging import (
    log_decode_error,
    log_send_success,
    log_service_error,
    log_transport_error,
)
from config.settings.resend import ResendSettings

if TYPE_CHECKING:
    from api.connectors.resend.models import OutboundEmail

logger: logging.Logger = logging.getLogger(__name__)


class ResendClient:
    """Cliente da API Resend autenticado por token Bearer.

    Pode ser compartilhado entre tasks concorrentes: não há estado
    mutável, e cada `send` abre seu próprio httpx.AsyncClient (ou usa o
    cliente injetado, que o httpx já permite compartilhar).
    """

    __slots__ = ("_http_client", "_settings", "_token")

    def __init__(
        self,
        token: str,
        *,
        settings: ResendSettings | None = None,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        """Inicializa o cliente. Não faz IO e não valida o token.

        Args:
            token: Token Bearer da API (armazenado como recebido)
            settings: Endpoint, timeout e User-Agent. Padrão: API pública
            http_client: Cliente httpx opcional (pool próprio, testes)
        """
        object.__setattr__(self, "_token", token)
        object.__setattr__(self, "_settings", settings or ResendSettings())
        object.__setattr__(self, "_http_client", http_client)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} é imutável")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} é imutável")

    def __repr__(self) -> str:
        return f"{type(self).__name__}(endpoint={self._settings.emails_url!r}, token='***')"

    @property
    def settings(self) -> ResendSettings:
        return self._settings

    async def send(self, email: OutboundEmail) -> SentEmail | OperationError:
        """Envia um email.

        Args:
            email: TextEmail, HtmlEmail ou qualquer OutboundEmail

        Returns:
            SentEmail se a API aceitou (2xx com `{"id": ...}`), senão
            TransportError, ServiceError ou DecodeError.
        """
        payload = email.to_payload()
        url = self._settings.emails_url
        started = time.perf_counter()

        try:
            response = await self._post(url, payload)
        except httpx.RequestError as exc:
            error = TransportError(cause=exc)
            log_transport_error(error, url)
            return error

        elapsed_ms = (time.perf_counter() - started) * 1000

        if not response.is_success:
            service_error = ServiceError(
                status_code=response.status_code,
                body=response.text,
            )
            log_service_error(service_error, elapsed_ms)
            return service_error

        return self._decode_success(response, elapsed_ms)

    async def send_or_raise(self, email: OutboundEmail) -> SentEmail:
        """Como `send`, mas levanta ResendSendError em caso de falha.

        Raises:
            ResendSendError: Carrega o OperationError em `.error`.
        """
        result = await self.send(email)
        if isinstance(result, SentEmail):
            return result
        raise ResendSendError(result)

    def _build_headers(self) -> dict[str, str]:
        return {
            "Authorization": f"Bearer {self._token}",
            "Content-Type": "application/json",
            "User-Agent": self._settings.user_agent,
        }

    async def _post(self, url: str, payload: dict[str, Any]) -> httpx.Response:
        """Executa o POST (único ponto de espera do envio)."""
        timeout = self._settings.request_timeout_seconds
        headers = self._build_headers()
        if self._http_client is not None:
            return await self._http_client.post(
                url, json=payload, headers=headers, timeout=timeout
            )
        async with httpx.AsyncClient(timeout=timeout) as client:
            return await client.post(url, json=payload, headers=headers)

    @staticmethod
    def _decode_success(
        response: httpx.Response,
        elapsed_ms: float,
    ) -> SentEmail | DecodeError:
        try:
            sent = SentEmail.from_response(response.json())
        except ValueError as exc:
            # json.JSONDecodeError também é ValueError
            error = DecodeError(
                status_code=response.status_code,
                body=response.text,
                reason=str(exc),
            )
            log_decode_error(error)
            return error

        log_send_success(sent.id, response.status_code, elapsed_ms)
        return sent


def create_resend_client(
    settings: ResendSettings | None = None,
) -> ResendClient:
    """Factory que cria o cliente a partir de ResendSettings.

    Args:
        settings: ResendSettings opcional. Se None, carrega do ambiente.

    Returns:
        ResendClient autenticado com `settings.api_key`.
    """
    from config.settings.resend import get_resend_settings

    resend = settings or get_resend_settings()
    if not resend.api_key:
        logger.warning("resend_api_key_missing")
    return ResendClient(resend.api_key, settings=resend)
