"""Montagem do NotificationEvent a partir do payload bruto.

Ponto de entrada do core: bytes + dialeto + tenant + timestamp → evento.
Computação pura e síncrona; sem IO e sem estado compartilhado.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from api.normalizers.ngsi_ld import parse_ld_entities
from api.normalizers.ngsi_shared import NgsiDialect, resolve_dialect
from api.normalizers.ngsi_v2 import parse_v2_entities
from app.domain.ngsi import NotificationEvent

if TYPE_CHECKING:
    from datetime import datetime

logger = logging.getLogger(__name__)


def parse(
    payload: bytes | str,
    dialect: NgsiDialect | str,
    tenant: str,
    tenant_path: str,
    creation_time: datetime,
) -> NotificationEvent:
    """Converte payload de notificação em NotificationEvent.

    Args:
        payload: Corpo da notificação (JSON UTF-8)
        dialect: NgsiDialect ou tag "v2"/"ld" (case-insensitive)
        tenant: Valor normalizado de fiware-service
        tenant_path: Valor normalizado de fiware-servicepath (ignorado em LD)
        creation_time: Timestamp de criação do evento

    Raises:
        UnsupportedDialectError: Se o dialeto for desconhecido
        MalformedJsonError: Se o JSON for inválido ou com shape de topo errado
        MissingRequiredFieldError: Se faltar campo obrigatório

    Returns:
        NotificationEvent imutável
    """
    resolved = resolve_dialect(dialect)
    if resolved == NgsiDialect.V2:
        entities = parse_v2_entities(payload)
    else:
        entities = parse_ld_entities(payload)
        tenant_path = ""

    event = NotificationEvent(
        creation_time=creation_time,
        tenant=tenant,
        tenant_path=tenant_path,
        entities=tuple(entities),
    )
    logger.info(
        "ngsi_notification_parsed",
        extra={"dialect": resolved.value, **event.to_log_dict()},
    )
    return event


class NgsiNotificationNormalizer:
    """Normalizer de notificações NGSI com dialeto fixo.

    Implementa NotificationNormalizerProtocol.
    """

    def __init__(self, dialect: NgsiDialect | str) -> None:
        self._dialect = resolve_dialect(dialect)

    @property
    def dialect(self) -> NgsiDialect:
        return self._dialect

    def normalize(
        self,
        payload: bytes | str,
        tenant: str,
        tenant_path: str,
        creation_time: datetime,
    ) -> NotificationEvent:
        return parse(payload, self._dialect, tenant, tenant_path, creation_time)
