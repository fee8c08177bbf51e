"""Tests for the policy codec."""

import json

import pytest

from neo_service_registry.core.exceptions import (
    PolicyDeserializationError,
    PolicySerializationError,
)
from neo_service_registry.features.registry.entities import (
    AnonymousRegisteredServiceUsernameAttributeProvider,
    DefaultRegisteredServiceUsernameProvider,
    DenyAllAttributeReleasePolicy,
    DirectoryEntry,
    PrincipalAttributeRegisteredServiceUsernameProvider,
    RefuseRegisteredServiceProxyPolicy,
    RegexMatchingRegisteredServiceProxyPolicy,
    ReturnAllAttributeReleasePolicy,
    ReturnAllowedAttributeReleasePolicy,
    ReturnMappedAttributeReleasePolicy,
)
from neo_service_registry.features.registry.services import (
    ATTRIBUTE_RELEASE_POLICY_CODEC,
    PROXY_POLICY_CODEC,
    USERNAME_PROVIDER_CODEC,
)


def _entry(attribute, document):
    return DirectoryEntry(dn="uid=1,ou=services,dc=example,dc=org", attributes={attribute: [document]})


class TestEmbed:
    """Test cases for writing policies into attributes."""

    def test_embed_single_valued_attribute(self):
        """Test embedding produces one JSON value under the given name."""
        attribute = ATTRIBUTE_RELEASE_POLICY_CODEC.embed(
            ReturnAllowedAttributeReleasePolicy(allowed_attributes=["cn", "mail"]),
            "casAttributeReleasePolicy",
        )

        assert attribute.name == "casAttributeReleasePolicy"
        assert len(attribute.values) == 1

        document = json.loads(attribute.first_value)
        assert document["@type"] == "ReturnAllowedAttributeReleasePolicy"
        assert document["allowedAttributes"] == ["cn", "mail"]
        assert document["excludeDefaultAttributes"] is False
        assert document["authorizedToReleaseCredentialPassword"] is False

    def test_embed_variant_without_fields(self):
        """Test a field-less variant still records its discriminator."""
        attribute = USERNAME_PROVIDER_CODEC.embed(
            DefaultRegisteredServiceUsernameProvider(), "casUsernameAttributeProvider"
        )

        assert json.loads(attribute.first_value) == {
            "@type": "DefaultRegisteredServiceUsernameProvider"
        }

    def test_embed_rejects_other_policy_kind(self):
        """Test a policy from another kind cannot be embedded."""
        with pytest.raises(PolicySerializationError) as exc_info:
            PROXY_POLICY_CODEC.embed(DenyAllAttributeReleasePolicy(), "casServiceProxyPolicy")

        assert exc_info.value.details["attribute"] == "casServiceProxyPolicy"
        assert exc_info.value.details["type"] == "DenyAllAttributeReleasePolicy"

    def test_embed_rejects_arbitrary_objects(self):
        """Test non-policy values are a serialization error."""
        with pytest.raises(PolicySerializationError):
            USERNAME_PROVIDER_CODEC.embed({"@type": "DefaultRegisteredServiceUsernameProvider"}, "attr")


class TestExtract:
    """Test cases for reading policies from entries."""

    @pytest.mark.parametrize(
        "policy",
        [
            ReturnAllowedAttributeReleasePolicy(allowed_attributes=["uid"]),
            ReturnAllAttributeReleasePolicy(exclude_default_attributes=True),
            DenyAllAttributeReleasePolicy(),
            ReturnMappedAttributeReleasePolicy(allowed_attributes={"mail": "email"}),
        ],
    )
    def test_attribute_release_variants(self, policy):
        """Test each attribute release variant is reconstructed by its tag."""
        attribute = ATTRIBUTE_RELEASE_POLICY_CODEC.embed(policy, "release")
        entry = _entry("release", attribute.first_value)

        restored = ATTRIBUTE_RELEASE_POLICY_CODEC.extract(entry, "release")

        assert type(restored) is type(policy)
        assert restored == policy

    @pytest.mark.parametrize(
        "policy",
        [
            DefaultRegisteredServiceUsernameProvider(),
            PrincipalAttributeRegisteredServiceUsernameProvider(username_attribute="mail"),
            AnonymousRegisteredServiceUsernameAttributeProvider(salt="pepper"),
        ],
    )
    def test_username_provider_variants(self, policy):
        """Test each username provider variant is reconstructed by its tag."""
        attribute = USERNAME_PROVIDER_CODEC.embed(policy, "username")
        entry = _entry("username", attribute.first_value)

        assert USERNAME_PROVIDER_CODEC.extract(entry, "username") == policy

    def test_proxy_policy_from_stored_document(self):
        """Test a hand-written document is parsed into the right variant."""
        entry = _entry(
            "casServiceProxyPolicy",
            '{"@type": "RegexMatchingRegisteredServiceProxyPolicy", "pattern": "^https://.+"}',
        )

        policy = PROXY_POLICY_CODEC.extract(entry, "casServiceProxyPolicy")

        assert isinstance(policy, RegexMatchingRegisteredServiceProxyPolicy)
        assert policy.pattern == "^https://.+"
        assert policy.is_allowed_proxy_callback_url("https://proxy.example.com")

    def test_absent_attribute_returns_none(self):
        """Test a missing attribute yields None."""
        entry = DirectoryEntry(dn="uid=1,dc=example,dc=org")

        assert PROXY_POLICY_CODEC.extract(entry, "casServiceProxyPolicy") is None

    def test_blank_attribute_returns_none(self):
        """Test a blank document yields None."""
        entry = _entry("casServiceProxyPolicy", "   ")

        assert PROXY_POLICY_CODEC.extract(entry, "casServiceProxyPolicy") is None

    @pytest.mark.parametrize(
        "document",
        [
            "{not json",
            '{"pattern": "^https://.+"}',
            '{"@type": "UnknownProxyPolicy"}',
            '{"@type": "RegexMatchingRegisteredServiceProxyPolicy"}',
            '{"@type": "RegexMatchingRegisteredServiceProxyPolicy", "pattern": "(unclosed"}',
            '{"@type": "RefuseRegisteredServiceProxyPolicy", "unexpected": true}',
        ],
    )
    def test_invalid_documents_fail_closed(self, document):
        """Test malformed, untagged, unknown or invalid documents are rejected."""
        entry = _entry("casServiceProxyPolicy", document)

        with pytest.raises(PolicyDeserializationError) as exc_info:
            PROXY_POLICY_CODEC.extract(entry, "casServiceProxyPolicy")

        assert exc_info.value.details["attribute"] == "casServiceProxyPolicy"
        assert exc_info.value.details["errors"]

    def test_document_of_other_kind_rejected(self):
        """Test a valid document of another policy kind is rejected."""
        entry = _entry("casUsernameAttributeProvider", '{"@type": "DenyAllAttributeReleasePolicy"}')

        with pytest.raises(PolicyDeserializationError):
            USERNAME_PROVIDER_CODEC.extract(entry, "casUsernameAttributeProvider")


class TestVariants:
    """Test cases for the variant sets of each codec."""

    def test_codec_variants(self):
        """Test each codec knows exactly its own variants."""
        assert set(PROXY_POLICY_CODEC.variants) == {
            RefuseRegisteredServiceProxyPolicy,
            RegexMatchingRegisteredServiceProxyPolicy,
        }
        assert DefaultRegisteredServiceUsernameProvider in USERNAME_PROVIDER_CODEC.variants
        assert ReturnMappedAttributeReleasePolicy in ATTRIBUTE_RELEASE_POLICY_CODEC.variants
        assert RefuseRegisteredServiceProxyPolicy not in ATTRIBUTE_RELEASE_POLICY_CODEC.variants
