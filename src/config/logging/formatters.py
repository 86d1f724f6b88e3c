"""Formatters de logging estruturado.

Todo log sai como um objeto JSON com os campos:
- asctime
- level
- logger
- message
- correlation_id
- service

Campos passados via `extra` (ex: email_id, status_code) são anexados
ao mesmo objeto pelo python-json-logger.
"""

from __future__ import annotations

from pythonjsonlogger.json import JsonFormatter

# Campos presentes em todo log estruturado
REQUIRED_LOG_FIELDS = (
    "asctime",
    "levelname",
    "name",
    "message",
    "correlation_id",
    "service",
)

# levelname/name saem com nomes curtos
FIELD_RENAME_MAP = {
    "levelname": "level",
    "name": "logger",
}


def create_json_formatter() -> JsonFormatter:
    """Cria o formatter JSON usado pelo handler raiz.

    Returns:
        JsonFormatter com os campos obrigatórios e renomeações aplicadas.

    Exemplo de output:
        {
            "asctime": "2026-10-17 10:30:00,123",
            "level": "INFO",
            "logger": "api.connectors.resend.resend_logging",
            "message": "resend_email_sent",
            "correlation_id": "",
            "service": "resend_connector",
            "email_id": "4ef9a417-02e9-4d39-ad75-9611e0fcc33c"
        }
    """
    format_string = " ".join(f"%({field})s" for field in REQUIRED_LOG_FIELDS)
    return JsonFormatter(format_string, rename_fields=FIELD_RENAME_MAP)
