"""Diagnósticos de anomalias absorvidas durante o parsing.

Anomalias por atributo não abortam o parsing: o atributo é descartado
e um log WARNING estruturado é emitido (sem valores do payload).
"""

from __future__ import annotations

from enum import StrEnum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import logging

DIAGNOSTIC_EVENT = "ngsi_parse_diagnostic"


class DiagnosticKind(StrEnum):
    """Tipos de anomalia absorvida."""

    UNRECOGNIZED_ATTRIBUTE_TYPE = "unrecognized_attribute_type"
    UNEXPECTED_VALUE_SHAPE = "unexpected_value_shape"


def report_diagnostic(
    logger: logging.Logger,
    kind: DiagnosticKind,
    attribute: str,
    detail: str,
) -> None:
    """Emite diagnóstico WARNING para atributo descartado.

    Args:
        logger: Logger do módulo que detectou a anomalia.
        kind: Tipo de anomalia.
        attribute: Chave do atributo/sub-atributo descartado.
        detail: Tipo NGSI recebido ou shape JSON encontrado.
    """
    logger.warning(
        DIAGNOSTIC_EVENT,
        extra={
            "diagnostic": kind.value,
            "attribute": attribute,
            "detail": detail,
        },
    )
