"""Registry repositories."""

from .ldap_service_repository import LdapServiceRegistryRepository

__all__ = ["LdapServiceRegistryRepository"]
