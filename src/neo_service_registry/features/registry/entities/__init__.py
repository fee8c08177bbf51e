"""Registry entities: services, policies, directory entries and schema."""

from .attribute_schema import LdapAttributeSchema
from .directory_entry import DirectoryAttribute, DirectoryEntry
from .policies import (
    AnonymousRegisteredServiceUsernameAttributeProvider,
    AttributeReleasePolicy,
    DefaultRegisteredServiceUsernameProvider,
    DenyAllAttributeReleasePolicy,
    PrincipalAttributeRegisteredServiceUsernameProvider,
    ProxyPolicy,
    RefuseRegisteredServiceProxyPolicy,
    RegexMatchingRegisteredServiceProxyPolicy,
    ReturnAllAttributeReleasePolicy,
    ReturnAllowedAttributeReleasePolicy,
    ReturnMappedAttributeReleasePolicy,
    UsernameAttributeProvider,
)
from .protocols import DirectoryClientProtocol, ServiceMapperProtocol
from .registered_service import (
    INITIAL_IDENTIFIER_VALUE,
    AntPatternRegisteredService,
    RegexRegisteredService,
    RegisteredService,
)

__all__ = [
    "LdapAttributeSchema",
    "DirectoryAttribute",
    "DirectoryEntry",
    "AnonymousRegisteredServiceUsernameAttributeProvider",
    "AttributeReleasePolicy",
    "DefaultRegisteredServiceUsernameProvider",
    "DenyAllAttributeReleasePolicy",
    "PrincipalAttributeRegisteredServiceUsernameProvider",
    "ProxyPolicy",
    "RefuseRegisteredServiceProxyPolicy",
    "RegexMatchingRegisteredServiceProxyPolicy",
    "ReturnAllAttributeReleasePolicy",
    "ReturnAllowedAttributeReleasePolicy",
    "ReturnMappedAttributeReleasePolicy",
    "UsernameAttributeProvider",
    "DirectoryClientProtocol",
    "ServiceMapperProtocol",
    "INITIAL_IDENTIFIER_VALUE",
    "AntPatternRegisteredService",
    "RegexRegisteredService",
    "RegisteredService",
]
