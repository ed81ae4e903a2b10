"""Modelo canônico de notificações NGSI (v2 e NGSI-LD).

Contratos compartilhados pelos dois parsers:
- NotificationEvent → Entity → Attribute (v2)
- NotificationEvent → Entity → AttributeLD → SubAttributeLD (LD)

Todos os modelos são imutáveis após construção. Sequências são tuplas
para preservar a ordem de encontro no payload.
"""

from __future__ import annotations

from datetime import datetime  # noqa: TC003 - usado em runtime pelo schema do Pydantic
from enum import StrEnum
from typing import Any

from pydantic import BaseModel, ConfigDict

# Chaves reservadas no nível da entidade (nunca viram atributos)
IGNORED_KEYS_ON_ENTITIES: frozenset[str] = frozenset(
    {"id", "type", "@context", "createdAt", "modifiedAt"}
)

# Chaves reservadas no nível do atributo LD (nunca viram sub-atributos)
IGNORED_KEYS_ON_ATTRIBUTES: frozenset[str] = frozenset(
    {
        "type", "value", "object", "datasetId",
        "createdAt", "modifiedAt", "instanceId", "observedAt",
    }
)

# Chaves de detalhe de relacionamento: objeto aninhado cujas chaves viram sub-atributos
RELATIONSHIP_DETAIL_KEYS: frozenset[str] = frozenset({"RelationshipDetails"})

# Chaves de identidade de entidade v2
V2_ENTITY_KEYS: frozenset[str] = frozenset({"id", "type"})

UNIT_CODE_KEY = "unitCode"


class LdAttributeType(StrEnum):
    """Tipagem NGSI-LD de atributos.

    UNSET só ocorre quando o campo `type` do payload é string vazia
    (histórico temporal sem valores).
    """

    PROPERTY = "Property"
    RELATIONSHIP = "Relationship"
    GEO_PROPERTY = "GeoProperty"
    UNSET = ""

    def __str__(self) -> str:
        return self.value


class Metadata(BaseModel):
    """Metadado de atributo v2 (valor sempre serializado como texto)."""

    model_config = ConfigDict(frozen=True)

    name: str
    type: str
    value: str


class Attribute(BaseModel):
    """Atributo de entidade NGSI v2.

    `metadata` é vazio exatamente quando o payload não tinha chaves de metadata;
    nesse caso `raw_metadata_json` é string vazia.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    type: str
    value: str
    metadata: tuple[Metadata, ...] = ()
    raw_metadata_json: str = ""


class SubAttributeLD(BaseModel):
    """Sub-atributo NGSI-LD (um nível de aninhamento apenas).

    Campos temporais ficam sempre vazios; não há sub-atributos aninhados.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    attr_type: LdAttributeType
    value: Any = None

    @property
    def dataset_id(self) -> str:
        return ""

    @property
    def observed_at(self) -> str:
        return ""

    @property
    def created_at(self) -> str:
        return ""

    @property
    def modified_at(self) -> str:
        return ""

    @property
    def sub_attributes(self) -> tuple[SubAttributeLD, ...]:
        return ()


class AttributeLD(BaseModel):
    """Atributo NGSI-LD (Property, Relationship ou GeoProperty).

    `value` preserva o shape nativo: texto (Relationship), escalar ou objeto
    (Property), objeto completo (GeoProperty) ou None (ausente).
    """

    model_config = ConfigDict(frozen=True)

    name: str
    attr_type: LdAttributeType
    value: Any = None
    dataset_id: str = ""
    observed_at: str = ""
    created_at: str = ""
    modified_at: str = ""
    sub_attributes: tuple[SubAttributeLD, ...] = ()

    @property
    def has_sub_attributes(self) -> bool:
        """Retorna True se ao menos um sub-atributo sobreviveu à extração."""
        return bool(self.sub_attributes)


class Entity(BaseModel):
    """Entidade de contexto identificada por (id, type)."""

    model_config = ConfigDict(frozen=True)

    id: str
    type: str
    attributes: tuple[Attribute | AttributeLD, ...] = ()
    is_linked_data: bool = False


class NotificationEvent(BaseModel):
    """Evento canônico produzido a partir de um payload de notificação.

    `tenant_path` é vazio para notificações NGSI-LD.
    """

    model_config = ConfigDict(frozen=True)

    creation_time: datetime
    tenant: str
    tenant_path: str = ""
    entities: tuple[Entity, ...] = ()

    @property
    def attribute_count(self) -> int:
        """Total de atributos somando todas as entidades."""
        return sum(len(entity.attributes) for entity in self.entities)

    def to_log_dict(self) -> dict[str, Any]:
        """Retorna resumo seguro para logs (sem valores de atributos)."""
        return {
            "tenant": self.tenant,
            "tenant_path": self.tenant_path,
            "linked_data": any(entity.is_linked_data for entity in self.entities),
            "entity_count": len(self.entities),
            "attribute_count": self.attribute_count,
            "creation_time": self.creation_time.isoformat(),
        }


__all__ = [
    "IGNORED_KEYS_ON_ATTRIBUTES",
    "IGNORED_KEYS_ON_ENTITIES",
    "RELATIONSHIP_DETAIL_KEYS",
    "UNIT_CODE_KEY",
    "V2_ENTITY_KEYS",
    "Attribute",
    "AttributeLD",
    "Entity",
    "LdAttributeType",
    "Metadata",
    "NotificationEvent",
    "SubAttributeLD",
]
