"""
Settings for the directory-backed service registry.

Values are read from the environment (prefix ``SERVICE_REGISTRY_``) or a
``.env`` file and turned into a validated attribute schema at startup, so a
misconfigured attribute name fails before any entry is mapped.
"""
import logging
from functools import lru_cache
from typing import Optional

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..features.registry.entities.attribute_schema import LdapAttributeSchema

logger = logging.getLogger(__name__)


class ServiceRegistrySettings(BaseSettings):
    """Service registry settings."""
    
    model_config = SettingsConfigDict(
        env_prefix="SERVICE_REGISTRY_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )
    
    # Directory location
    ldap_base_dn: str = Field(default="ou=services,dc=example,dc=org")
    
    # Attribute schema overrides (None keeps the schema default)
    ldap_object_class: Optional[str] = None
    ldap_id_attribute: Optional[str] = None
    ldap_service_id_attribute: Optional[str] = None
    ldap_service_name_attribute: Optional[str] = None
    ldap_service_description_attribute: Optional[str] = None
    ldap_service_enabled_attribute: Optional[str] = None
    ldap_service_sso_enabled_attribute: Optional[str] = None
    ldap_evaluation_order_attribute: Optional[str] = None
    ldap_service_theme_attribute: Optional[str] = None
    ldap_required_handlers_attribute: Optional[str] = None
    ldap_service_proxy_policy_attribute: Optional[str] = None
    ldap_username_attribute_provider_attribute: Optional[str] = None
    ldap_attribute_release_policy_attribute: Optional[str] = None
    
    # Deprecated: replaced by the username attribute provider policy
    ldap_username_attribute: Optional[str] = None
    
    @model_validator(mode='after')
    def warn_deprecated_settings(self):
        """Warn about settings that are accepted but ignored."""
        if self.ldap_username_attribute is not None:
            logger.warning(
                "SERVICE_REGISTRY_LDAP_USERNAME_ATTRIBUTE is deprecated and has no effect. "
                "Configure a username attribute provider on the service instead."
            )
        return self
    
    def to_attribute_schema(self) -> LdapAttributeSchema:
        """Build the attribute schema from configured overrides.
        
        Raises:
            SchemaMisconfigurationError: If an override is blank or duplicated
        """
        overrides = {}
        for field_name in LdapAttributeSchema.model_fields:
            value = getattr(self, f"ldap_{field_name}")
            if value is not None:
                overrides[field_name] = value
        return LdapAttributeSchema(**overrides)


@lru_cache()
def get_settings() -> ServiceRegistrySettings:
    """Get cached settings instance."""
    return ServiceRegistrySettings()
