"""Normalizer NGSI-LD — extração de entidades, atributos e sub-atributos.

Tipos de atributo suportados: Property, Relationship, GeoProperty.
"""

from ._attribute_helpers import (
    append_if_present,
    extract_ld_attribute,
    extract_ld_sub_attribute,
)
from .extractor import extract_ld_entities, extract_ld_entity, parse_ld_entities

__all__ = [
    "append_if_present",
    "extract_ld_attribute",
    "extract_ld_entities",
    "extract_ld_entity",
    "extract_ld_sub_attribute",
    "parse_ld_entities",
]
