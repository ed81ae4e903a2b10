"""Normalização dos headers Fiware da notificação.

Headers HTTP/atributos de transporte são comparados sem distinção de
maiúsculas. Headers ausentes ou vazios recebem defaults ("nd", "/nd").
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from config.logging import log_fallback
from config.settings import DEFAULT_SERVICE, DEFAULT_SERVICE_PATH

if TYPE_CHECKING:
    from collections.abc import Mapping

logger = logging.getLogger(__name__)

FIWARE_SERVICE_HEADER = "fiware-service"
FIWARE_SERVICE_PATH_HEADER = "fiware-servicepath"
FIWARE_CORRELATOR_HEADER = "fiware-correlator"


@dataclass(frozen=True, slots=True)
class FiwareHeaders:
    """Escopo multi-tenant da notificação.

    Attributes:
        service: Tenant (fiware-service)
        service_path: Caminho do tenant (fiware-servicepath)
        correlator: Fiware-Correlator propagado pelo broker ("" se ausente)
    """

    service: str
    service_path: str
    correlator: str = ""


def _lowercase_headers(headers: Mapping[str, str]) -> dict[str, str]:
    return {str(name).lower(): value for name, value in headers.items()}


def _header_or_none(headers: dict[str, str], name: str) -> str | None:
    value = headers.get(name)
    if value is None:
        return None
    value = str(value).strip()
    return value or None


def resolve_fiware_headers(
    headers: Mapping[str, str],
    default_service: str = DEFAULT_SERVICE,
    default_service_path: str = DEFAULT_SERVICE_PATH,
) -> FiwareHeaders:
    """Lê fiware-service/fiware-servicepath/fiware-correlator (case-insensitive).

    Função total: nunca falha; aplica defaults para headers ausentes ou vazios.
    """
    normalized = _lowercase_headers(headers)

    service = _header_or_none(normalized, FIWARE_SERVICE_HEADER)
    if service is None:
        log_fallback(logger, "fiware_headers", reason="service_header_missing")
        service = default_service

    service_path = _header_or_none(normalized, FIWARE_SERVICE_PATH_HEADER)
    if service_path is None:
        log_fallback(logger, "fiware_headers", reason="servicepath_header_missing")
        service_path = default_service_path

    return FiwareHeaders(
        service=service,
        service_path=service_path,
        correlator=_header_or_none(normalized, FIWARE_CORRELATOR_HEADER) or "",
    )
