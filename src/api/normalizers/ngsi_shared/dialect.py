"""Seleção de dialeto NGSI (v2 ou NGSI-LD)."""

from __future__ import annotations

from enum import StrEnum

from utils.errors import UnsupportedDialectError


class NgsiDialect(StrEnum):
    """Dialetos de notificação suportados."""

    V2 = "v2"
    LD = "ld"

    def __str__(self) -> str:
        return self.value


def resolve_dialect(version: str | NgsiDialect) -> NgsiDialect:
    """Converte tag de versão (case-insensitive) para NgsiDialect.

    Raises:
        UnsupportedDialectError: Se a tag não for "v2" nem "ld".
    """
    if isinstance(version, NgsiDialect):
        return version
    tag = (version or "").strip().lower()
    try:
        return NgsiDialect(tag)
    except ValueError as exc:
        raise UnsupportedDialectError(f"dialeto NGSI desconhecido: {version!r}") from exc
