"""API — camada de borda e adapters de notificações NGSI.

Responsabilidades:
- Receber notificações entregues pelo transporte de ingestão
- Normalizar headers Fiware e aplicar limites de payload
- Converter payloads NGSI v2/NGSI-LD em modelos internos

Subpastas:
- connectors/: borda com o transporte (headers, limites, correlation_id)
- normalizers/: conversão de payloads externos → modelos internos

NÃO PODE conter: persistência, roteamento para sinks, IO de rede.
"""
