"""Utility helpers for neo-service-registry."""

from .identifiers import MAX_SERVICE_ID, generate_service_id, stable_dn_hash

__all__ = [
    "MAX_SERVICE_ID",
    "generate_service_id",
    "stable_dn_hash",
]
