"""Extrator de notificações NGSI-LD.

Estrutura do payload:
- [entidade, ...] (representação instantânea ou temporal)
- entidade: {"id", "type", "@context"?, <atributo>: objeto | [objeto, ...]}

Um array sob uma chave é um multi-atributo (NGSI-LD § 4.5.5): cada elemento
vira um AttributeLD independente com o mesmo nome. Entidades com o mesmo id
nunca são mescladas.
"""

from __future__ import annotations

import logging
from typing import Any

from api.normalizers.ngsi_shared import decode_json_text
from app.domain.ngsi import IGNORED_KEYS_ON_ENTITIES, AttributeLD, Entity
from utils.errors import MalformedJsonError, MissingRequiredFieldError

from ._attribute_helpers import extract_ld_attributes_for_key

logger = logging.getLogger(__name__)


def _require_string(block: dict[str, Any], field: str, context: str) -> str:
    value = block.get(field)
    if not isinstance(value, str):
        raise MissingRequiredFieldError(field, context)
    return value


def extract_ld_entity(raw_entity: Any) -> Entity:
    """Extrai uma entidade LD; atributos seguem a ordem das chaves."""
    if not isinstance(raw_entity, dict):
        raise MalformedJsonError("entidade NGSI-LD deve ser objeto")
    entity_id = _require_string(raw_entity, "id", "entity")
    entity_type = _require_string(raw_entity, "type", entity_id)
    logger.debug(
        "ngsi_ld_entity_parsing",
        extra={"entity_id": entity_id, "entity_type": entity_type},
    )

    attributes: list[AttributeLD] = []
    for key, raw in raw_entity.items():
        if key in IGNORED_KEYS_ON_ENTITIES:
            continue
        attributes.extend(extract_ld_attributes_for_key(key, raw))

    return Entity(
        id=entity_id,
        type=entity_type,
        attributes=tuple(attributes),
        is_linked_data=True,
    )


def extract_ld_entities(payload: Any) -> list[Entity]:
    """Extrai entidades de um payload NGSI-LD já decodificado.

    Raises:
        MalformedJsonError: Se o topo não for array ou uma entidade não for objeto.
        MissingRequiredFieldError: Se id/type da entidade ou type de sub-atributo faltarem.
    """
    if not isinstance(payload, list):
        raise MalformedJsonError("payload NGSI-LD deve ser array")
    logger.debug("ngsi_ld_notification_received", extra={"entity_count": len(payload)})
    return [extract_ld_entity(raw_entity) for raw_entity in payload]


def parse_ld_entities(json_text: str | bytes) -> list[Entity]:
    """Decodifica e extrai entidades de uma notificação NGSI-LD."""
    return extract_ld_entities(decode_json_text(json_text))
