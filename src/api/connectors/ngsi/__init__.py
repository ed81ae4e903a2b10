"""Conector NGSI — borda entre o transporte de ingestão e o core de parsing.

Responsabilidades:
- Normalização dos headers Fiware (tenant, path, correlator)
- Limite de tamanho de payload
- Escopo de correlation_id por notificação
"""

from .headers import (
    FIWARE_CORRELATOR_HEADER,
    FIWARE_SERVICE_HEADER,
    FIWARE_SERVICE_PATH_HEADER,
    FiwareHeaders,
    resolve_fiware_headers,
)
from .receive import parse_notification_request, resolve_creation_time

__all__ = [
    "FIWARE_CORRELATOR_HEADER",
    "FIWARE_SERVICE_HEADER",
    "FIWARE_SERVICE_PATH_HEADER",
    "FiwareHeaders",
    "parse_notification_request",
    "resolve_creation_time",
    "resolve_fiware_headers",
]
