"""Directory attribute schema for registered services."""

from typing import Dict

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator, model_validator

from ....core.exceptions import SchemaMisconfigurationError


class LdapAttributeSchema(BaseModel):
    """Physical directory attribute names for each logical service field.

    Validation runs on construction and on every assignment, so a schema that
    exists is always usable for mapping. Failures surface as
    SchemaMisconfigurationError.
    """

    model_config = ConfigDict(
        validate_assignment=True,
        str_strip_whitespace=True,
        extra="forbid",
    )

    object_class: str = Field("casRegisteredService", description="Object class of service entries")
    id_attribute: str = Field("uid", description="Numeric service identifier")
    service_id_attribute: str = Field("casServiceUrlPattern", description="Service URL pattern")
    service_name_attribute: str = Field("cn", description="Display name")
    service_description_attribute: str = Field("description", description="Description")
    service_enabled_attribute: str = Field("casServiceEnabled", description="Enabled flag")
    service_sso_enabled_attribute: str = Field("casServiceSsoEnabled", description="SSO enabled flag")
    evaluation_order_attribute: str = Field("casEvaluationOrder", description="Evaluation order")
    service_theme_attribute: str = Field("casServiceTheme", description="Theme name")
    required_handlers_attribute: str = Field("casRequiredHandlers", description="Required handler names")
    service_proxy_policy_attribute: str = Field("casServiceProxyPolicy", description="Proxy policy JSON")
    username_attribute_provider_attribute: str = Field(
        "casUsernameAttributeProvider", description="Username provider JSON"
    )
    attribute_release_policy_attribute: str = Field(
        "casAttributeReleasePolicy", description="Attribute release policy JSON"
    )

    @field_validator('*', mode='before')
    @classmethod
    def validate_not_blank(cls, v, info):
        """Reject missing or blank attribute names."""
        if v is None or not str(v).strip():
            raise ValueError(f"{info.field_name} must not be blank")
        return v

    @model_validator(mode='after')
    def validate_unique_attributes(self):
        """Each physical attribute may back only one logical field."""
        seen: Dict[str, str] = {}
        for field_name, value in self.attribute_fields().items():
            key = value.lower()
            if key in seen:
                raise ValueError(
                    f"{field_name} and {seen[key]} both map to directory attribute '{value}'"
                )
            seen[key] = field_name
        return self

    def attribute_fields(self) -> Dict[str, str]:
        """Logical field name -> physical attribute name, object class excluded."""
        return {
            name: getattr(self, name)
            for name in type(self).model_fields
            if name != "object_class"
        }

    def __init__(self, **data):
        try:
            super().__init__(**data)
        except ValidationError as e:
            raise SchemaMisconfigurationError(
                f"Invalid directory attribute schema: {e.errors()[0]['msg']}",
                details={"errors": _error_summary(e)},
            ) from e

    def __setattr__(self, name, value):
        previous = self.__dict__.get(name)
        try:
            super().__setattr__(name, value)
        except ValidationError as e:
            # Model validators run after the field is stored
            if name in self.__dict__:
                self.__dict__[name] = previous
            raise SchemaMisconfigurationError(
                f"Invalid value for {name}: {e.errors()[0]['msg']}",
                details={"field": name, "errors": _error_summary(e)},
            ) from e

    def to_dict(self) -> Dict[str, str]:
        """Convert schema to dictionary for diagnostics."""
        return self.model_dump()


def _error_summary(error: ValidationError):
    return [
        {"loc": list(item["loc"]), "msg": item["msg"]}
        for item in error.errors()
    ]
