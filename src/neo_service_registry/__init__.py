"""Neo Service Registry - directory-backed registered service persistence.

This library maps the registered services of the authentication gateway to
and from LDAP-style directory entries, including their embedded username,
attribute release and proxy policies.
"""

# Initialize logging configuration on import
from .config.logging_config import setup_logging
setup_logging()

from .__version__ import __version__

from .config import ServiceRegistrySettings, get_settings

from .core.exceptions import (
    # Base Exception
    ServiceRegistryError,
    
    # Registry Exceptions
    ConfigurationError,
    SchemaMisconfigurationError,
    ServiceMappingError,
    PolicySerializationError,
    PolicyDeserializationError,
    ServiceNotFoundError,
    UnresolvedServiceVariantError,
    DirectoryAccessError,
    
    # Utility Functions
    get_http_status_code,
    create_error_response,
)

from .features.registry import (
    # Entities
    RegisteredService,
    RegexRegisteredService,
    AntPatternRegisteredService,
    INITIAL_IDENTIFIER_VALUE,
    DirectoryAttribute,
    DirectoryEntry,
    LdapAttributeSchema,
    
    # Services
    LdapServiceMapper,
    MappedServiceEntry,
    PolicyCodec,
    ServiceVariant,
    resolve_service_variant,
    
    # Repositories
    LdapServiceRegistryRepository,
)

__all__ = [
    "__version__",
    "ServiceRegistrySettings",
    "get_settings",
    "ServiceRegistryError",
    "ConfigurationError",
    "SchemaMisconfigurationError",
    "ServiceMappingError",
    "PolicySerializationError",
    "PolicyDeserializationError",
    "ServiceNotFoundError",
    "UnresolvedServiceVariantError",
    "DirectoryAccessError",
    "get_http_status_code",
    "create_error_response",
    "RegisteredService",
    "RegexRegisteredService",
    "AntPatternRegisteredService",
    "INITIAL_IDENTIFIER_VALUE",
    "DirectoryAttribute",
    "DirectoryEntry",
    "LdapAttributeSchema",
    "LdapServiceMapper",
    "MappedServiceEntry",
    "PolicyCodec",
    "ServiceVariant",
    "resolve_service_variant",
    "LdapServiceRegistryRepository",
]
