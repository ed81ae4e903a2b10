"""Recebimento de notificações NGSI na borda de ingestão.

Recebe o que o transporte entrega (corpo bruto, headers, timestamp de
entrada) e delega ao core de parsing. Aplica limite de tamanho, defaults
de headers e escopo de correlation_id.
"""

from __future__ import annotations

import logging
from datetime import UTC, datetime
from typing import TYPE_CHECKING

from api.normalizers import parse, resolve_dialect
from app.observability import reset_correlation_id, set_correlation_id
from config.settings import get_ngsi_settings
from utils.errors import NgsiParseError, PayloadTooLargeError

from .headers import resolve_fiware_headers

if TYPE_CHECKING:
    from collections.abc import Mapping

    from api.normalizers import NgsiDialect
    from app.domain.ngsi import NotificationEvent
    from config.settings import NgsiSettings

logger = logging.getLogger(__name__)


def resolve_creation_time(creation_time: datetime | float | None) -> datetime:
    """Normaliza o timestamp de criação.

    Aceita datetime, epoch em milissegundos (data de entrada do transporte)
    ou None (agora, em UTC). Datetimes naive são tratados como UTC.
    """
    if creation_time is None:
        return datetime.now(UTC)
    if isinstance(creation_time, datetime):
        if creation_time.tzinfo is None:
            return creation_time.replace(tzinfo=UTC)
        return creation_time
    if isinstance(creation_time, bool):
        raise TypeError("creation_time não pode ser bool")
    return datetime.fromtimestamp(creation_time / 1000, tz=UTC)


def parse_notification_request(
    raw_body: bytes,
    headers: Mapping[str, str],
    version: NgsiDialect | str | None = None,
    creation_time: datetime | float | None = None,
    settings: NgsiSettings | None = None,
) -> NotificationEvent:
    """Parseia uma notificação recebida pelo transporte.

    Args:
        raw_body: Corpo bruto da notificação
        headers: Headers/atributos do transporte (case-insensitive)
        version: Tag de dialeto ("v2"/"ld"); None usa o default das settings
        creation_time: Timestamp de entrada (datetime ou epoch ms); None = agora
        settings: NgsiSettings explícitas; None usa as settings cacheadas

    Raises:
        PayloadTooLargeError: Se o corpo exceder max_payload_bytes
        NgsiParseError: Demais falhas estruturais (re-levantadas após log)

    Returns:
        NotificationEvent
    """
    settings = settings or get_ngsi_settings()
    fiware = resolve_fiware_headers(
        headers,
        default_service=settings.default_service,
        default_service_path=settings.default_service_path,
    )

    token = set_correlation_id(fiware.correlator)
    try:
        if settings.max_payload_bytes and len(raw_body) > settings.max_payload_bytes:
            raise PayloadTooLargeError(
                f"payload com {len(raw_body)} bytes excede {settings.max_payload_bytes}"
            )
        dialect = resolve_dialect(version or settings.default_dialect)
        return parse(
            raw_body,
            dialect,
            fiware.service,
            fiware.service_path,
            resolve_creation_time(creation_time),
        )
    except NgsiParseError as exc:
        logger.warning(
            "ngsi_notification_rejected",
            extra={"error_code": exc.code, "tenant": fiware.service},
        )
        raise
    finally:
        reset_correlation_id(token)
