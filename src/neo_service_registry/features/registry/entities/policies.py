"""Policy entities attached to registered services.

Each policy kind is a closed union of variants. Every variant serializes
with an ``@type`` discriminator, so a stored document can be read back into
the right variant without external hints. New variants are added by
defining a model and extending the matching union below.
"""

import re
from typing import Annotated, Dict, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class PolicyModel(BaseModel):
    """Base configuration shared by all policy variants."""

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        populate_by_name=True,
        alias_generator=to_camel,
    )


# Username attribute providers

class DefaultRegisteredServiceUsernameProvider(PolicyModel):
    """Release the authenticated principal id as the username."""

    type: Literal["DefaultRegisteredServiceUsernameProvider"] = Field(
        default="DefaultRegisteredServiceUsernameProvider", alias="@type"
    )


class PrincipalAttributeRegisteredServiceUsernameProvider(PolicyModel):
    """Release the value of a principal attribute as the username."""

    type: Literal["PrincipalAttributeRegisteredServiceUsernameProvider"] = Field(
        default="PrincipalAttributeRegisteredServiceUsernameProvider", alias="@type"
    )
    username_attribute: str = Field(..., min_length=1)


class AnonymousRegisteredServiceUsernameAttributeProvider(PolicyModel):
    """Release an opaque, per-service persistent identifier as the username."""

    type: Literal["AnonymousRegisteredServiceUsernameAttributeProvider"] = Field(
        default="AnonymousRegisteredServiceUsernameAttributeProvider", alias="@type"
    )
    salt: Optional[str] = None


UsernameAttributeProvider = Annotated[
    Union[
        DefaultRegisteredServiceUsernameProvider,
        PrincipalAttributeRegisteredServiceUsernameProvider,
        AnonymousRegisteredServiceUsernameAttributeProvider,
    ],
    Field(discriminator="type"),
]


# Attribute release policies

class AttributeReleasePolicyModel(PolicyModel):
    """Fields common to every attribute release policy."""

    exclude_default_attributes: bool = False
    authorized_to_release_credential_password: bool = False


class ReturnAllowedAttributeReleasePolicy(AttributeReleasePolicyModel):
    """Release only the listed principal attributes."""

    type: Literal["ReturnAllowedAttributeReleasePolicy"] = Field(
        default="ReturnAllowedAttributeReleasePolicy", alias="@type"
    )
    allowed_attributes: List[str] = Field(default_factory=list)


class ReturnAllAttributeReleasePolicy(AttributeReleasePolicyModel):
    """Release every principal attribute."""

    type: Literal["ReturnAllAttributeReleasePolicy"] = Field(
        default="ReturnAllAttributeReleasePolicy", alias="@type"
    )


class DenyAllAttributeReleasePolicy(AttributeReleasePolicyModel):
    """Release no principal attributes."""

    type: Literal["DenyAllAttributeReleasePolicy"] = Field(
        default="DenyAllAttributeReleasePolicy", alias="@type"
    )


class ReturnMappedAttributeReleasePolicy(AttributeReleasePolicyModel):
    """Release listed attributes under new names (source name -> released name)."""

    type: Literal["ReturnMappedAttributeReleasePolicy"] = Field(
        default="ReturnMappedAttributeReleasePolicy", alias="@type"
    )
    allowed_attributes: Dict[str, str] = Field(default_factory=dict)


AttributeReleasePolicy = Annotated[
    Union[
        ReturnAllowedAttributeReleasePolicy,
        ReturnAllAttributeReleasePolicy,
        DenyAllAttributeReleasePolicy,
        ReturnMappedAttributeReleasePolicy,
    ],
    Field(discriminator="type"),
]


# Proxy policies

class RefuseRegisteredServiceProxyPolicy(PolicyModel):
    """Never issue proxy-granting tickets."""

    type: Literal["RefuseRegisteredServiceProxyPolicy"] = Field(
        default="RefuseRegisteredServiceProxyPolicy", alias="@type"
    )

    def is_allowed_proxy_callback_url(self, url: str) -> bool:
        return False


class RegexMatchingRegisteredServiceProxyPolicy(PolicyModel):
    """Allow proxying to callback URLs matching a regular expression."""

    type: Literal["RegexMatchingRegisteredServiceProxyPolicy"] = Field(
        default="RegexMatchingRegisteredServiceProxyPolicy", alias="@type"
    )
    pattern: str = Field(..., min_length=1)

    @field_validator('pattern')
    @classmethod
    def validate_pattern(cls, v: str) -> str:
        """Validate that the pattern is a regular expression."""
        try:
            re.compile(v)
        except re.error as e:
            raise ValueError(f"Invalid proxy callback pattern: {e}") from e
        return v

    def is_allowed_proxy_callback_url(self, url: str) -> bool:
        return re.fullmatch(self.pattern, url) is not None


ProxyPolicy = Annotated[
    Union[
        RefuseRegisteredServiceProxyPolicy,
        RegexMatchingRegisteredServiceProxyPolicy,
    ],
    Field(discriminator="type"),
]
