"""Protocolos e contratos do core da aplicação."""

from .payload_builder import SerializableComponent

__all__ = [
    "SerializableComponent",
]
