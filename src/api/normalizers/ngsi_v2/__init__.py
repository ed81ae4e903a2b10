"""Normalizer NGSI v2 — extração de entidades com atributos e metadata."""

from .extractor import (
    extract_v2_attribute,
    extract_v2_entities,
    extract_v2_entity,
    parse_v2_entities,
)

__all__ = [
    "extract_v2_attribute",
    "extract_v2_entities",
    "extract_v2_entity",
    "parse_v2_entities",
]
