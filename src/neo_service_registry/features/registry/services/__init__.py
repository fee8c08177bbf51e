"""Registry services: policy codec, variant resolution and entry mapping."""

from .ldap_service_mapper import LdapServiceMapper, MappedServiceEntry
from .policy_codec import (
    ATTRIBUTE_RELEASE_POLICY_CODEC,
    PROXY_POLICY_CODEC,
    USERNAME_PROVIDER_CODEC,
    PolicyCodec,
)
from .variant_resolver import (
    ServiceVariant,
    get_service_type,
    is_ant_pattern,
    is_valid_ant_pattern,
    is_valid_regex_pattern,
    resolve_service_variant,
)

__all__ = [
    "LdapServiceMapper",
    "MappedServiceEntry",
    "ATTRIBUTE_RELEASE_POLICY_CODEC",
    "PROXY_POLICY_CODEC",
    "USERNAME_PROVIDER_CODEC",
    "PolicyCodec",
    "ServiceVariant",
    "get_service_type",
    "is_ant_pattern",
    "is_valid_ant_pattern",
    "is_valid_regex_pattern",
    "resolve_service_variant",
]
