"""Agregador de settings.

Re-exporta as settings de cada módulo.
"""

from __future__ import annotations

from config.settings.base import (
    BaseSettings,
    Environment,
    get_base_settings,
)
from config.settings.resend import (
    RESEND_API_BASE_URL,
    RESEND_EMAILS_PATH,
    ResendSettings,
    get_resend_settings,
)

__all__ = [
    "RESEND_API_BASE_URL",
    "RESEND_EMAILS_PATH",
    "BaseSettings",
    "Environment",
    "ResendSettings",
    "get_base_settings",
    "get_resend_settings",
]
