"""Formatter JSON dos logs do normalizer.

Todo record sai como um objeto JSON com os campos de REQUIRED_LOG_FIELDS;
campos passados via `extra` (diagnostic, attribute, entity_count...) são
anexados pelo JsonFormatter.
"""

from __future__ import annotations

from pythonjsonlogger.json import JsonFormatter

REQUIRED_LOG_FIELDS = frozenset(
    {
        "asctime",
        "levelname",
        "name",
        "message",
        "correlation_id",
        "service",
    }
)

FIELD_RENAME_MAP = {
    "levelname": "level",
    "name": "logger",
}


def create_json_formatter() -> JsonFormatter:
    """Cria o JsonFormatter com os campos obrigatórios renomeados.

    Ids de entidade podem conter caracteres não-ASCII, então a saída
    não é escapada.

    Exemplo de output:
        {"asctime": "...", "level": "WARNING", "logger": "api.normalizers.ngsi_ld._attribute_helpers",
         "message": "ngsi_parse_diagnostic", "correlation_id": "f3a0...",
         "service": "ngsi_normalizer", "diagnostic": "unrecognized_attribute_type"}
    """
    format_string = " ".join(f"%({field})s" for field in sorted(REQUIRED_LOG_FIELDS))
    return JsonFormatter(
        format_string,
        rename_fields=FIELD_RENAME_MAP,
        json_ensure_ascii=False,
    )
