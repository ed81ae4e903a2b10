"""Protocolos de normalização de notificações NGSI."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from datetime import datetime

    from app.domain.ngsi import NotificationEvent


class NotificationNormalizerProtocol(Protocol):
    """Contrato mínimo para normalização de payload de notificação."""

    def normalize(
        self,
        payload: bytes | str,
        tenant: str,
        tenant_path: str,
        creation_time: datetime,
    ) -> NotificationEvent: ...
