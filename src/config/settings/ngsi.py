"""Settings do recebimento de notificações NGSI.

Defaults de tenant, dialeto e limite de tamanho de payload aplicados
na borda de ingestão. O core de parsing não consulta settings.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

DEFAULT_SERVICE = "nd"
DEFAULT_SERVICE_PATH = "/nd"
DEFAULT_MAX_PAYLOAD_BYTES = 1024 * 1024  # 1 MiB

_VALID_DIALECTS = frozenset({"v2", "ld"})


@dataclass(frozen=True)
class NgsiSettings:
    """Configurações de notificações NGSI.

    Attributes:
        default_service: Tenant usado quando fiware-service está ausente
        default_service_path: Path usado quando fiware-servicepath está ausente
        default_dialect: Dialeto usado quando o chamador não informa versão
        max_payload_bytes: Tamanho máximo do corpo (0 desativa o limite)
    """

    default_service: str = DEFAULT_SERVICE
    default_service_path: str = DEFAULT_SERVICE_PATH
    default_dialect: str = "v2"
    max_payload_bytes: int = DEFAULT_MAX_PAYLOAD_BYTES

    def validate(self) -> list[str]:
        """Valida configurações NGSI.

        Returns:
            Lista de erros de validação.
        """
        errors: list[str] = []

        if self.default_dialect.lower() not in _VALID_DIALECTS:
            errors.append(f"NGSI_DEFAULT_DIALECT inválido: {self.default_dialect}")

        if self.max_payload_bytes < 0:
            errors.append("NGSI_MAX_PAYLOAD_BYTES deve ser >= 0")

        if not self.default_service:
            errors.append("NGSI_DEFAULT_SERVICE não pode ser vazio")

        if not self.default_service_path.startswith("/"):
            errors.append("NGSI_DEFAULT_SERVICE_PATH deve começar com '/'")

        return errors


def _load_ngsi_from_env() -> NgsiSettings:
    """Carrega NgsiSettings de variáveis de ambiente."""
    return NgsiSettings(
        default_service=os.getenv("NGSI_DEFAULT_SERVICE", DEFAULT_SERVICE),
        default_service_path=os.getenv("NGSI_DEFAULT_SERVICE_PATH", DEFAULT_SERVICE_PATH),
        default_dialect=os.getenv("NGSI_DEFAULT_DIALECT", "v2").lower(),
        max_payload_bytes=int(
            os.getenv("NGSI_MAX_PAYLOAD_BYTES", str(DEFAULT_MAX_PAYLOAD_BYTES))
        ),
    )


@lru_cache(maxsize=1)
def get_ngsi_settings() -> NgsiSettings:
    """Retorna instância cacheada de NgsiSettings."""
    return _load_ngsi_from_env()
