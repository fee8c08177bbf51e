"""Registry-specific exceptions for neo-service-registry."""

from .base import ServiceRegistryError


class ConfigurationError(ServiceRegistryError):
    """Base exception for configuration errors."""
    pass


class SchemaMisconfigurationError(ConfigurationError):
    """Raised when a directory attribute schema is blank or ambiguous."""
    pass


class ServiceMappingError(ServiceRegistryError):
    """Base exception for entity/entry mapping failures."""
    pass


class PolicySerializationError(ServiceMappingError):
    """Raised when a policy object cannot be written as JSON."""
    pass


class PolicyDeserializationError(ServiceMappingError):
    """Raised when an embedded policy document is malformed or of unknown type."""
    pass


class ServiceNotFoundError(ServiceRegistryError):
    """Raised when a registered service is required but not present."""
    pass


class UnresolvedServiceVariantError(ServiceNotFoundError):
    """Raised when a service pattern is neither a regex nor an ant pattern."""
    pass


class DirectoryAccessError(ServiceRegistryError):
    """Raised when the directory client fails."""
    pass
