"""Extrator de notificações NGSI v2.

Estrutura do payload:
- {"subscriptionId": ..., "data": [entidade, ...]}
- entidade: {"id", "type", <atributo>: {"type", "value", "metadata"?}}

Qualquer falha estrutural aborta o payload inteiro.
"""

from __future__ import annotations

import logging
from typing import Any

from api.normalizers.ngsi_shared import decode_json_text, stringify_json_value
from app.domain.ngsi import V2_ENTITY_KEYS, Attribute, Entity, Metadata
from utils.errors import MalformedJsonError, MissingRequiredFieldError

logger = logging.getLogger(__name__)


def _require_object(value: Any, context: str) -> dict[str, Any]:
    if not isinstance(value, dict):
        raise MalformedJsonError(f"objeto esperado em {context}")
    return value


def _require_string(block: dict[str, Any], field: str, context: str) -> str:
    value = block.get(field)
    if not isinstance(value, str):
        raise MissingRequiredFieldError(field, context)
    return value


def _require_value(block: dict[str, Any], context: str) -> str:
    if "value" not in block:
        raise MissingRequiredFieldError("value", context)
    return stringify_json_value(block["value"])


def extract_v2_metadata(key: str, attribute: dict[str, Any]) -> tuple[tuple[Metadata, ...], str]:
    """Extrai metadata de um atributo v2.

    Ausência de `metadata` equivale a zero entradas.

    Returns:
        (metadata em ordem de encontro, texto JSON bruto ou "" se vazio)
    """
    raw_block = attribute.get("metadata")
    if raw_block is None:
        return (), ""
    block = _require_object(raw_block, f"{key}.metadata")
    if not block:
        return (), ""

    metadata: list[Metadata] = []
    for name, raw_entry in block.items():
        context = f"{key}.metadata.{name}"
        entry = _require_object(raw_entry, context)
        metadata.append(
            Metadata(
                name=name,
                type=_require_string(entry, "type", context),
                value=_require_value(entry, context),
            )
        )
    return tuple(metadata), stringify_json_value(block)


def extract_v2_attribute(key: str, raw_attribute: Any) -> Attribute:
    """Extrai um atributo v2 (type e value obrigatórios)."""
    attribute = _require_object(raw_attribute, key)
    attr_type = _require_string(attribute, "type", key)
    value = _require_value(attribute, key)
    metadata, raw_metadata_json = extract_v2_metadata(key, attribute)
    return Attribute(
        name=key,
        type=attr_type,
        value=value,
        metadata=metadata,
        raw_metadata_json=raw_metadata_json,
    )


def extract_v2_entity(raw_entity: Any) -> Entity:
    """Extrai uma entidade v2; atributos seguem a ordem das chaves."""
    entity = _require_object(raw_entity, "data[]")
    entity_id = _require_string(entity, "id", "entity")
    entity_type = _require_string(entity, "type", entity_id)
    attributes = [
        extract_v2_attribute(key, value)
        for key, value in entity.items()
        if key not in V2_ENTITY_KEYS
    ]
    return Entity(id=entity_id, type=entity_type, attributes=tuple(attributes))


def extract_v2_entities(payload: Any) -> list[Entity]:
    """Extrai entidades de um payload v2 já decodificado.

    Raises:
        MalformedJsonError: Se o topo não for objeto com array `data`.
        MissingRequiredFieldError: Se id/type/value obrigatórios faltarem.
    """
    content = _require_object(payload, "payload")
    data = content.get("data")
    if not isinstance(data, list):
        raise MalformedJsonError("payload v2 sem array data")
    logger.debug("ngsi_v2_notification_received", extra={"entity_count": len(data)})
    return [extract_v2_entity(raw_entity) for raw_entity in data]


def parse_v2_entities(json_text: str | bytes) -> list[Entity]:
    """Decodifica e extrai entidades de uma notificação v2."""
    return extract_v2_entities(decode_json_text(json_text))
