"""Exceções de domínio para falhas estruturais de parsing NGSI."""

from __future__ import annotations


class NgsiParseError(ValueError):
    """Base para falhas que abortam o parsing de uma notificação inteira."""

    code = "ngsi_parse_error"


class MalformedJsonError(NgsiParseError):
    """JSON inválido ou com shape de topo inesperado."""

    code = "malformed_json"


class MissingRequiredFieldError(NgsiParseError):
    """Campo obrigatório ausente (ou com tipo inválido) em entidade/atributo.

    Attributes:
        field: Nome do campo obrigatório
        context: Onde o campo era esperado (id da entidade ou chave do atributo)
    """

    code = "missing_required_field"

    def __init__(self, field: str, context: str = "") -> None:
        self.field = field
        self.context = context
        where = f" em {context}" if context else ""
        super().__init__(f"campo obrigatório ausente: {field}{where}")


class UnsupportedDialectError(NgsiParseError):
    """Tag de versão NGSI desconhecida."""

    code = "unsupported_dialect"


class PayloadTooLargeError(NgsiParseError):
    """Corpo da notificação excede o limite configurado."""

    code = "payload_too_large"
