"""Testes do extrator de notificações NGSI-LD."""

from __future__ import annotations

import json
import logging

import pytest

from api.normalizers.ngsi_ld import extract_ld_entities, parse_ld_entities
from api.normalizers.ngsi_shared import DIAGNOSTIC_EVENT
from app.domain.ngsi import AttributeLD, LdAttributeType, SubAttributeLD
from utils.errors import MalformedJsonError, MissingRequiredFieldError


def _diagnostics(caplog: pytest.LogCaptureFixture) -> list[logging.LogRecord]:
    return [r for r in caplog.records if r.getMessage() == DIAGNOSTIC_EVENT]


class TestParseLdEntities:
    """Testes de parse_ld_entities."""

    def test_property_with_unit_code(self) -> None:
        """Property preserva valor nativo e promove unitCode a sub-atributo."""
        entities = parse_ld_entities(
            '[{"id":"U1","type":"Vehicle",'
            '"speed":{"type":"Property","value":80,"unitCode":"KMH"}}]'
        )

        assert len(entities) == 1
        entity = entities[0]
        assert entity.is_linked_data is True
        assert entity.attributes == (
            AttributeLD(
                name="speed",
                attr_type=LdAttributeType.PROPERTY,
                value=80,
                sub_attributes=(
                    SubAttributeLD(name="unitcode", attr_type=LdAttributeType.PROPERTY, value="KMH"),
                ),
            ),
        )
        assert entity.attributes[0].has_sub_attributes is True

    def test_relationship(self) -> None:
        """Relationship usa `object` como valor e nome em minúsculas."""
        entities = parse_ld_entities(
            '[{"id":"U1","type":"Vehicle","isParked":{"type":"Relationship","object":"Lot1"}}]'
        )

        attribute = entities[0].attributes[0]
        assert attribute.name == "isparked"
        assert attribute.attr_type == LdAttributeType.RELATIONSHIP
        assert attribute.value == "Lot1"
        assert attribute.has_sub_attributes is False

    def test_geo_property_keeps_whole_object(self) -> None:
        """GeoProperty preserva o objeto completo do atributo."""
        location = {
            "type": "GeoProperty",
            "value": {"type": "Point", "coordinates": [-8.5, 41.2]},
            "observedAt": "2026-03-01T10:00:00Z",
        }
        entities = extract_ld_entities([{"id": "U1", "type": "Vehicle", "location": location}])

        attribute = entities[0].attributes[0]
        assert attribute.attr_type == LdAttributeType.GEO_PROPERTY
        assert attribute.value == location
        assert attribute.observed_at == "2026-03-01T10:00:00Z"

    def test_reserved_entity_keys_are_skipped(self) -> None:
        """@context, createdAt e modifiedAt da entidade não viram atributos."""
        entities = extract_ld_entities(
            [
                {
                    "id": "U1",
                    "type": "Vehicle",
                    "@context": ["https://uri.etsi.org/ngsi-ld/v1/ngsi-ld-core-context.jsonld"],
                    "createdAt": "2026-01-01T00:00:00Z",
                    "modifiedAt": "2026-01-02T00:00:00Z",
                    "brand": {"type": "Property", "value": "Mercedes"},
                }
            ]
        )

        assert [a.name for a in entities[0].attributes] == ["brand"]

    def test_multi_attribute_keeps_each_instance(self) -> None:
        """Array sob uma chave gera um AttributeLD por elemento, em ordem."""
        entities = extract_ld_entities(
            [
                {
                    "id": "U1",
                    "type": "Vehicle",
                    "speed": [
                        {"type": "Property", "value": 55, "datasetId": "urn:ngsi-ld:Dataset:gps"},
                        {"type": "Property", "value": 54.5, "datasetId": "urn:ngsi-ld:Dataset:obd"},
                    ],
                }
            ]
        )

        attributes = entities[0].attributes
        assert [a.name for a in attributes] == ["speed", "speed"]
        assert [a.value for a in attributes] == [55, 54.5]
        assert [a.dataset_id for a in attributes] == [
            "urn:ngsi-ld:Dataset:gps",
            "urn:ngsi-ld:Dataset:obd",
        ]

    def test_temporal_representation(self) -> None:
        """Histórico temporal: instâncias com observedAt preservadas."""
        entities = extract_ld_entities(
            [
                {
                    "id": "urn:ngsi-ld:Sensor:1",
                    "type": "Sensor",
                    "temperature": [
                        {"type": "Property", "value": 20.1, "observedAt": "2026-05-01T10:00:00Z", "instanceId": "i1"},
                        {"type": "Property", "value": 20.4, "observedAt": "2026-05-01T11:00:00Z", "instanceId": "i2"},
                    ],
                }
            ]
        )

        attributes = entities[0].attributes
        assert [a.observed_at for a in attributes] == [
            "2026-05-01T10:00:00Z",
            "2026-05-01T11:00:00Z",
        ]
        assert all(not a.sub_attributes for a in attributes)

    def test_empty_type_attribute_is_dropped(self) -> None:
        """Atributo com type vazio (histórico sem valores) não aparece."""
        entities = extract_ld_entities(
            [
                {
                    "id": "U1",
                    "type": "Vehicle",
                    "speed": {"type": "", "values": []},
                    "brand": {"type": "Property", "value": "Audi"},
                }
            ]
        )

        assert [a.name for a in entities[0].attributes] == ["brand"]

    def test_null_values_are_dropped(self) -> None:
        """Valores null ou texto "null" não entram na sequência."""
        entities = extract_ld_entities(
            [
                {
                    "id": "U1",
                    "type": "Vehicle",
                    "a": {"type": "Property", "value": None},
                    "b": {"type": "Property", "value": "null"},
                    "c": {"type": "Relationship", "object": None},
                    "d": {"type": "Relationship"},
                    "e": {"type": "Property", "value": 0},
                }
            ]
        )

        assert [a.name for a in entities[0].attributes] == ["e"]

    def test_unrecognized_type_is_dropped_with_diagnostic(
        self, caplog: pytest.LogCaptureFixture
    ) -> None:
        """Tipo desconhecido descarta o atributo e o resto da entidade segue."""
        caplog.set_level(logging.WARNING)

        entities = extract_ld_entities(
            [
                {
                    "id": "U1",
                    "type": "Vehicle",
                    "first": {"type": "Property", "value": 1},
                    "weird": {"type": "Bogus", "value": 2},
                    "last": {"type": "Property", "value": 3},
                }
            ]
        )

        assert [a.name for a in entities[0].attributes] == ["first", "last"]
        records = _diagnostics(caplog)
        assert len(records) == 1
        assert records[0].diagnostic == "unrecognized_attribute_type"
        assert records[0].attribute == "weird"
        assert records[0].detail == "Bogus"

    def test_scalar_attribute_is_skipped_with_diagnostic(
        self, caplog: pytest.LogCaptureFixture
    ) -> None:
        """Chave com valor escalar é ignorada sem falha."""
        caplog.set_level(logging.WARNING)

        entities = extract_ld_entities(
            [{"id": "U1", "type": "Vehicle", "name": "plain", "ok": {"type": "Property", "value": 1}}]
        )

        assert [a.name for a in entities[0].attributes] == ["ok"]
        records = _diagnostics(caplog)
        assert [r.diagnostic for r in records] == ["unexpected_value_shape"]
        assert records[0].attribute == "name"

    def test_entities_with_same_id_are_not_merged(self) -> None:
        """Duas entidades com o mesmo id continuam separadas."""
        entities = extract_ld_entities(
            [
                {"id": "U1", "type": "Vehicle", "a": {"type": "Property", "value": 1}},
                {"id": "U1", "type": "Vehicle", "b": {"type": "Property", "value": 2}},
            ]
        )

        assert len(entities) == 2
        assert [len(e.attributes) for e in entities] == [1, 1]

    def test_property_value_round_trip(self) -> None:
        """Valor de Property é igual ao `value` de origem (escalar e objeto)."""
        nested = {"floor": 2, "tags": ["a", "b"], "meta": {"ok": True}}
        payload = [
            {
                "id": "U1",
                "type": "Vehicle",
                "nested": {"type": "Property", "value": nested},
                "text": {"type": "Property", "value": "café"},
                "flag": {"type": "Property", "value": False},
            }
        ]

        entities = parse_ld_entities(json.dumps(payload))

        assert [a.value for a in entities[0].attributes] == [nested, "café", False]


class TestLdFailures:
    """Falhas estruturais do parser NGSI-LD."""

    def test_top_level_object_is_malformed(self) -> None:
        with pytest.raises(MalformedJsonError):
            parse_ld_entities('{"id": "U1", "type": "Vehicle"}')

    def test_invalid_json(self) -> None:
        with pytest.raises(MalformedJsonError):
            parse_ld_entities("[{")

    def test_entity_not_object(self) -> None:
        with pytest.raises(MalformedJsonError):
            extract_ld_entities(["U1"])

    def test_entity_without_type(self) -> None:
        with pytest.raises(MissingRequiredFieldError) as exc_info:
            extract_ld_entities([{"id": "U1"}])
        assert exc_info.value.field == "type"

    def test_sub_attribute_without_type_aborts(self) -> None:
        with pytest.raises(MissingRequiredFieldError) as exc_info:
            extract_ld_entities(
                [
                    {
                        "id": "U1",
                        "type": "Vehicle",
                        "speed": {"type": "Property", "value": 1, "source": {"value": "gps"}},
                    }
                ]
            )
        assert exc_info.value.field == "type"
        assert exc_info.value.context == "source"
