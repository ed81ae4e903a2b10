"""Normalizers NGSI — conversão de notificações de context broker para modelos internos.

Estrutura:
- ngsi_shared/: decodificação JSON, dialeto e diagnósticos comuns
- ngsi_v2/: parser NGSI v2 (entidades planas com metadata)
- ngsi_ld/: parser NGSI-LD (Property/Relationship/GeoProperty, sub-atributos)
- notification.py: montagem do NotificationEvent

Cada dialeto tem seu próprio extractor, mantendo SRP.
"""

from .ngsi_ld import parse_ld_entities
from .ngsi_shared import NgsiDialect, resolve_dialect
from .ngsi_v2 import parse_v2_entities
from .notification import NgsiNotificationNormalizer, parse

__all__ = [
    "NgsiDialect",
    "NgsiNotificationNormalizer",
    "parse",
    "parse_ld_entities",
    "parse_v2_entities",
    "resolve_dialect",
]
