"""Pytest configuration and fixtures for neo-service-registry tests."""

import pytest
from unittest.mock import AsyncMock

from neo_service_registry.features.registry.entities import (
    AntPatternRegisteredService,
    DirectoryEntry,
    LdapAttributeSchema,
    PrincipalAttributeRegisteredServiceUsernameProvider,
    RegexMatchingRegisteredServiceProxyPolicy,
    RegexRegisteredService,
    ReturnMappedAttributeReleasePolicy,
)
from neo_service_registry.features.registry.services import LdapServiceMapper


BASE_DN = "ou=services,dc=example,dc=org"


@pytest.fixture
def base_dn():
    """Parent DN for service entries."""
    return BASE_DN


@pytest.fixture
def attribute_schema():
    """Default attribute schema."""
    return LdapAttributeSchema()


@pytest.fixture
def mapper(attribute_schema):
    """Mapper using the default attribute schema."""
    return LdapServiceMapper(attribute_schema)


@pytest.fixture
def regex_service():
    """Regex service with every field and policy populated."""
    return RegexRegisteredService(
        id=1001,
        service_id=r"^https://.*\.example\.com/.*",
        name="Example Portal",
        description="Portal for example.com applications",
        enabled=True,
        sso_enabled=False,
        evaluation_order=5,
        theme="example",
        required_handlers={"LdapAuthenticationHandler", "X509AuthenticationHandler"},
        username_attribute_provider=PrincipalAttributeRegisteredServiceUsernameProvider(
            username_attribute="mail"
        ),
        attribute_release_policy=ReturnMappedAttributeReleasePolicy(
            allowed_attributes={"cn": "commonName", "mail": "email"},
            exclude_default_attributes=True,
        ),
        proxy_policy=RegexMatchingRegisteredServiceProxyPolicy(
            pattern=r"^https://proxy\.example\.com/.*"
        ),
    )


@pytest.fixture
def ant_service():
    """Ant pattern service without policies."""
    return AntPatternRegisteredService(
        service_id="https://**.example.com/**",
        name="Legacy Apps",
        evaluation_order=10,
    )


@pytest.fixture
def minimal_entry(base_dn):
    """Directory entry carrying only an id and a service pattern."""
    return DirectoryEntry(
        dn=f"uid=42,{base_dn}",
        attributes={
            "uid": ["42"],
            "casServiceUrlPattern": [r"^https://app\.example\.com/.*"],
        },
    )


@pytest.fixture
def mock_directory_client():
    """Mock directory client for repository tests."""
    client = AsyncMock()
    client.load_by_id = AsyncMock(return_value=None)
    client.save = AsyncMock(return_value=None)
    client.delete = AsyncMock(return_value=True)
    client.search = AsyncMock(return_value=[])
    return client
