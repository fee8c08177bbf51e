"""Exceptions module for neo-service-registry.

This module provides the complete exception hierarchy for the registry.
"""

from .base import (
    ServiceRegistryError,
    get_http_status_code,
    create_error_response,
)

from .registry import (
    # Configuration Errors
    ConfigurationError,
    SchemaMisconfigurationError,
    
    # Mapping Errors
    ServiceMappingError,
    PolicySerializationError,
    PolicyDeserializationError,
    
    # Lookup Errors
    ServiceNotFoundError,
    UnresolvedServiceVariantError,
    
    # Transport Errors
    DirectoryAccessError,
)

__all__ = [
    "ServiceRegistryError",
    "get_http_status_code",
    "create_error_response",
    "ConfigurationError",
    "SchemaMisconfigurationError",
    "ServiceMappingError",
    "PolicySerializationError",
    "PolicyDeserializationError",
    "ServiceNotFoundError",
    "UnresolvedServiceVariantError",
    "DirectoryAccessError",
]
