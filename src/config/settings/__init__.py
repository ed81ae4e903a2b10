"""Agregador de settings do ngsi_normalizer.

Re-exporta todas as settings e funções de cada módulo.
"""

from __future__ import annotations

from config.settings.base import (
    BaseSettings,
    Environment,
    get_base_settings,
)
from config.settings.ngsi import (
    DEFAULT_SERVICE,
    DEFAULT_SERVICE_PATH,
    NgsiSettings,
    get_ngsi_settings,
)

__all__ = [
    "DEFAULT_SERVICE",
    "DEFAULT_SERVICE_PATH",
    "BaseSettings",
    "Environment",
    "NgsiSettings",
    "get_base_settings",
    "get_ngsi_settings",
]
