"""App — modelo canônico, contratos e infraestrutura transversal.

Subpastas:
- bootstrap/: composition root (logging, validação de settings)
- domain/: modelo canônico NotificationEvent/Entity/Attribute
- protocols/: contratos/interfaces
- observability/: correlation_id para logs estruturados

Padrão: api adapta; app define contratos; config configura; utils apoia.
"""
