"""Decodificação e serialização de valores JSON de notificações NGSI.

Responsabilidades:
- Decodificar texto/bytes UTF-8 em valores JSON (estrito: sem NaN/Infinity)
- Classificar o shape de um valor decodificado (objeto, array, escalar, null)
- Serializar valores sem perda (estruturas viram texto JSON, não repr Python)
- Decidir presença de valor para o filtro de atributos LD
"""

from __future__ import annotations

import json
from enum import StrEnum
from typing import Any

from utils.errors import MalformedJsonError

NULL_TEXT = "null"


class JsonShape(StrEnum):
    """Shape de um valor JSON decodificado."""

    OBJECT = "object"
    ARRAY = "array"
    SCALAR = "scalar"
    NULL = "null"


class _IntegerLimitError(ValueError):
    """Inteiro JSON acima do limite de dígitos do interpretador."""


def _reject_constant(constant: str) -> Any:
    raise ValueError(f"constante JSON não suportada: {constant}")


def _parse_int(digits: str) -> int:
    try:
        return int(digits)
    except ValueError as exc:
        raise _IntegerLimitError(str(exc)) from exc


def decode_json_text(raw: str | bytes) -> Any:
    """Decodifica texto JSON.

    Args:
        raw: Texto JSON ou bytes UTF-8

    Raises:
        MalformedJsonError: Se não for UTF-8 válido, JSON válido ou se um
            inteiro exceder o limite de dígitos do interpretador

    Returns:
        Valor JSON decodificado (dict, list, escalar ou None)
    """
    try:
        text = raw.decode("utf-8") if isinstance(raw, bytes) else raw
        return json.loads(text, parse_constant=_reject_constant, parse_int=_parse_int)
    except UnicodeDecodeError as exc:
        raise MalformedJsonError("invalid_utf8") from exc
    except _IntegerLimitError as exc:
        raise MalformedJsonError("integer_too_long") from exc
    except ValueError as exc:
        raise MalformedJsonError("invalid_json") from exc


def json_shape(value: Any) -> JsonShape:
    """Classifica o shape de um valor JSON decodificado."""
    if isinstance(value, dict):
        return JsonShape.OBJECT
    if isinstance(value, list):
        return JsonShape.ARRAY
    if value is None:
        return JsonShape.NULL
    return JsonShape.SCALAR


def stringify_json_value(value: Any) -> str:
    """Serializa valor JSON como texto, sem perda.

    Strings são retornadas como estão; demais valores usam a forma
    textual JSON compacta (ex: True → "true", {"a": 1} → '{"a":1}').
    """
    if isinstance(value, str):
        return value
    return json.dumps(value, ensure_ascii=False, separators=(",", ":"))


def is_present_value(value: Any) -> bool:
    """Retorna True se o valor resolvido deve ser mantido.

    Descarta o null JSON (None) e o texto literal "null".
    """
    if value is None:
        return False
    return not (isinstance(value, str) and value == NULL_TEXT)
