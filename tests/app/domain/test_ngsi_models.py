"""Testes do modelo canônico NGSI."""

from __future__ import annotations

from datetime import UTC, datetime

import pytest
from pydantic import ValidationError

from app.domain.ngsi import (
    IGNORED_KEYS_ON_ATTRIBUTES,
    IGNORED_KEYS_ON_ENTITIES,
    Attribute,
    AttributeLD,
    Entity,
    LdAttributeType,
    NotificationEvent,
    SubAttributeLD,
)


class TestReservedKeys:
    def test_entity_keys(self) -> None:
        assert frozenset({"id", "type", "@context", "createdAt", "modifiedAt"}) == IGNORED_KEYS_ON_ENTITIES

    def test_attribute_keys(self) -> None:
        assert "unitCode" not in IGNORED_KEYS_ON_ATTRIBUTES
        assert {"type", "value", "object", "datasetId", "instanceId", "observedAt"} <= IGNORED_KEYS_ON_ATTRIBUTES


class TestLdAttributeType:
    def test_values(self) -> None:
        assert LdAttributeType("Property") is LdAttributeType.PROPERTY
        assert LdAttributeType("") is LdAttributeType.UNSET
        assert str(LdAttributeType.GEO_PROPERTY) == "GeoProperty"

    def test_unknown_value(self) -> None:
        with pytest.raises(ValueError):
            LdAttributeType("Bogus")


class TestModels:
    def test_sub_attribute_has_no_nesting(self) -> None:
        sub = SubAttributeLD(name="unitcode", attr_type=LdAttributeType.PROPERTY, value="KMH")

        assert sub.sub_attributes == ()
        assert sub.created_at == ""
        assert sub.modified_at == ""

    def test_has_sub_attributes(self) -> None:
        sub = SubAttributeLD(name="unitcode", attr_type=LdAttributeType.PROPERTY, value="KMH")

        assert AttributeLD(name="a", attr_type=LdAttributeType.PROPERTY).has_sub_attributes is False
        assert (
            AttributeLD(name="a", attr_type=LdAttributeType.PROPERTY, sub_attributes=(sub,)).has_sub_attributes
            is True
        )

    def test_entity_keeps_attribute_kinds(self) -> None:
        v2 = Attribute(name="t", type="Float", value="1")
        ld = AttributeLD(name="s", attr_type=LdAttributeType.PROPERTY, value=1)

        entity = Entity(id="E", type="T", attributes=(v2, ld))

        assert isinstance(entity.attributes[0], Attribute)
        assert isinstance(entity.attributes[1], AttributeLD)

    def test_event_is_frozen(self) -> None:
        event = NotificationEvent(creation_time=datetime(2026, 1, 1, tzinfo=UTC), tenant="t")
        with pytest.raises(ValidationError):
            event.tenant = "x"  # type: ignore[misc]

    def test_attribute_count(self) -> None:
        attr = Attribute(name="t", type="Float", value="1")
        event = NotificationEvent(
            creation_time=datetime(2026, 1, 1, tzinfo=UTC),
            tenant="t",
            entities=(
                Entity(id="A", type="T", attributes=(attr, attr)),
                Entity(id="B", type="T", attributes=(attr,)),
            ),
        )
        assert event.attribute_count == 3
