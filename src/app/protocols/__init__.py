"""Protocolos e contratos do core da aplicação."""

from .normalizer import NotificationNormalizerProtocol

__all__ = [
    "NotificationNormalizerProtocol",
]
