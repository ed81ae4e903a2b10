"""Utilitários compartilhados entre os parsers NGSI v2 e NGSI-LD.

Responsabilidades:
- Decodificação e serialização de valores JSON
- Seleção de dialeto
- Diagnósticos de anomalias por atributo
"""

from .dialect import NgsiDialect, resolve_dialect
from .diagnostics import DIAGNOSTIC_EVENT, DiagnosticKind, report_diagnostic
from .json_values import (
    JsonShape,
    decode_json_text,
    is_present_value,
    json_shape,
    stringify_json_value,
)

__all__ = [
    "DIAGNOSTIC_EVENT",
    "DiagnosticKind",
    "JsonShape",
    "NgsiDialect",
    "decode_json_text",
    "is_present_value",
    "json_shape",
    "report_diagnostic",
    "resolve_dialect",
    "stringify_json_value",
]
