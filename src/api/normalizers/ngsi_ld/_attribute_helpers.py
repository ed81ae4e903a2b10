"""Helpers de extração de atributos e sub-atributos NGSI-LD.

Separado de extractor.py para manter SRP: aqui vive a tipagem
Property/Relationship/GeoProperty, a extração de sub-atributos (um nível)
e o filtro de presença de valor.

Resultado das funções de extração:
- None: atributo não pôde ser interpretado (diagnóstico já emitido)
- modelo: atributo interpretado; ainda sujeito ao filtro de presença
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from api.normalizers.ngsi_shared import (
    DiagnosticKind,
    JsonShape,
    is_present_value,
    json_shape,
    report_diagnostic,
    stringify_json_value,
)
from app.domain.ngsi import (
    IGNORED_KEYS_ON_ATTRIBUTES,
    RELATIONSHIP_DETAIL_KEYS,
    UNIT_CODE_KEY,
    AttributeLD,
    LdAttributeType,
    SubAttributeLD,
)
from utils.errors import MissingRequiredFieldError

if TYPE_CHECKING:
    from collections.abc import Iterator

logger = logging.getLogger(__name__)

_TYPED_ATTRIBUTES = frozenset(
    {LdAttributeType.PROPERTY, LdAttributeType.RELATIONSHIP, LdAttributeType.GEO_PROPERTY}
)
# Atributo de primeiro nível aceita também UNSET (histórico temporal)
_ATTRIBUTE_TYPES = _TYPED_ATTRIBUTES | frozenset({LdAttributeType.UNSET})
_RELATIONSHIP_IDENTITY_KEYS = frozenset({"id", "type"})


def _opt_string(block: dict[str, Any], field: str) -> str:
    value = block.get(field)
    if value is None:
        return ""
    return stringify_json_value(value)


def _resolve_type(
    key: str,
    type_name: str,
    accepted: frozenset[LdAttributeType],
) -> LdAttributeType | None:
    """Converte `type` textual em LdAttributeType; None se não aceito."""
    try:
        attr_type = LdAttributeType(type_name)
    except ValueError:
        attr_type = None
    if attr_type in accepted:
        return attr_type
    report_diagnostic(logger, DiagnosticKind.UNRECOGNIZED_ATTRIBUTE_TYPE, key, type_name)
    return None


def iter_attribute_blocks(key: str, raw: Any, scope: str) -> Iterator[dict[str, Any]]:
    """Itera blocos de atributo de uma chave (objeto único ou multi-atributo).

    Shapes inesperados (escalar, null, elemento não-objeto) geram
    diagnóstico e são ignorados.
    """
    shape = json_shape(raw)
    if shape == JsonShape.OBJECT:
        yield raw
        return
    if shape == JsonShape.ARRAY:
        for element in raw:
            if isinstance(element, dict):
                yield element
            else:
                report_diagnostic(
                    logger,
                    DiagnosticKind.UNEXPECTED_VALUE_SHAPE,
                    key,
                    f"{scope}[]:{json_shape(element)}",
                )
        return
    report_diagnostic(logger, DiagnosticKind.UNEXPECTED_VALUE_SHAPE, key, f"{scope}:{shape}")


def append_if_present(
    target: list[Any],
    candidate: AttributeLD | SubAttributeLD | None,
) -> None:
    """Adiciona atributo à sequência se interpretado e com valor presente.

    No NGSI-LD não existe Property com valor null: atributos sem valor
    (None ou texto "null") são descartados, nunca preenchidos com default.
    """
    if candidate is None:
        return
    if is_present_value(candidate.value):
        target.append(candidate)


def extract_ld_sub_attribute(key: str, block: dict[str, Any]) -> SubAttributeLD | None:
    """Extrai sub-atributo LD (sem aninhamento adicional).

    Raises:
        MissingRequiredFieldError: Se o sub-atributo não tiver `type`.
    """
    if block.get("type") is None:
        raise MissingRequiredFieldError("type", key)
    attr_type = _resolve_type(key, stringify_json_value(block["type"]), _TYPED_ATTRIBUTES)
    if attr_type is None:
        return None

    value: Any
    if attr_type == LdAttributeType.RELATIONSHIP:
        value = _stringify_optional(block.get("object"))
    elif attr_type == LdAttributeType.PROPERTY:
        value = block.get("value")
    else:
        value = _stringify_optional(block.get("value"))
    return SubAttributeLD(name=key.lower(), attr_type=attr_type, value=value)


def _stringify_optional(value: Any) -> str | None:
    if value is None:
        return None
    return stringify_json_value(value)


def _extract_sub_attributes_into(
    target: list[SubAttributeLD],
    key: str,
    raw: Any,
    scope: str,
) -> None:
    for block in iter_attribute_blocks(key, raw, scope):
        append_if_present(target, extract_ld_sub_attribute(key, block))


def _extract_relationship_details(
    target: list[SubAttributeLD],
    key: str,
    raw: Any,
) -> None:
    if not isinstance(raw, dict):
        report_diagnostic(
            logger, DiagnosticKind.UNEXPECTED_VALUE_SHAPE, key, f"details:{json_shape(raw)}"
        )
        return
    for detail_key, detail_value in raw.items():
        if detail_key in _RELATIONSHIP_IDENTITY_KEYS:
            continue
        _extract_sub_attributes_into(target, detail_key, detail_value, "details")


def _resolve_attribute_value(attr_type: LdAttributeType, block: dict[str, Any]) -> Any:
    if attr_type == LdAttributeType.RELATIONSHIP:
        return _stringify_optional(block.get("object"))
    if attr_type == LdAttributeType.PROPERTY:
        return block.get("value")
    if attr_type == LdAttributeType.GEO_PROPERTY:
        # Objeto completo para decodificação geo posterior
        return block
    return None


def extract_ld_attribute(key: str, block: dict[str, Any]) -> AttributeLD | None:
    """Extrai atributo LD com seus sub-atributos.

    `type` vazio ou ausente resulta em UNSET com valor ausente (histórico
    temporal sem valores). Tipo não reconhecido retorna None.
    """
    attr_type = _resolve_type(key, _opt_string(block, "type"), _ATTRIBUTE_TYPES)
    if attr_type is None:
        return None

    sub_attributes: list[SubAttributeLD] = []
    for sub_key, raw in block.items():
        if attr_type == LdAttributeType.PROPERTY and sub_key == UNIT_CODE_KEY:
            if isinstance(raw, str):
                append_if_present(
                    sub_attributes,
                    SubAttributeLD(
                        name=sub_key.lower(),
                        attr_type=LdAttributeType.PROPERTY,
                        value=raw,
                    ),
                )
        elif sub_key in RELATIONSHIP_DETAIL_KEYS:
            _extract_relationship_details(sub_attributes, sub_key, raw)
        elif sub_key not in IGNORED_KEYS_ON_ATTRIBUTES:
            _extract_sub_attributes_into(sub_attributes, sub_key, raw, "sub")

    return AttributeLD(
        name=key.lower(),
        attr_type=attr_type,
        value=_resolve_attribute_value(attr_type, block),
        dataset_id=_opt_string(block, "datasetId"),
        observed_at=_opt_string(block, "observedAt"),
        created_at=_opt_string(block, "createdAt"),
        modified_at=_opt_string(block, "modifiedAt"),
        sub_attributes=tuple(sub_attributes),
    )


def extract_ld_attributes_for_key(key: str, raw: Any) -> list[AttributeLD]:
    """Extrai todos os atributos de uma chave de entidade (multi-atributo incluso)."""
    attributes: list[AttributeLD] = []
    for block in iter_attribute_blocks(key, raw, "attribute"):
        append_if_present(attributes, extract_ld_attribute(key, block))
    return attributes
