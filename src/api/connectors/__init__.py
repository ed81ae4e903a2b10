"""Connectors — adapters de borda entre transportes de ingestão e o core.

Estrutura:
- ngsi/: notificações de context broker (headers Fiware, limites, correlation_id)
"""

__all__: list[str] = []
