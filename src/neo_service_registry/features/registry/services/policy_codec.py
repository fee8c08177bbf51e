"""Codec for policy objects embedded as JSON in directory attributes."""

import logging
from typing import Any, Generic, Optional, Tuple, TypeVar, get_args

from pydantic import TypeAdapter, ValidationError
from pydantic_core import PydanticSerializationError

from ....core.exceptions import PolicyDeserializationError, PolicySerializationError
from ..entities.directory_entry import DirectoryAttribute, DirectoryEntry
from ..entities.policies import AttributeReleasePolicy, ProxyPolicy, UsernameAttributeProvider

logger = logging.getLogger(__name__)

T = TypeVar("T")


class PolicyCodec(Generic[T]):
    """Serialize one policy kind to and from a single directory attribute.

    The stored document is ``{"@type": "<variant>", ...}``. Unknown variants
    are rejected rather than skipped, since silently dropping a policy would
    change what a service is allowed to receive.
    """

    def __init__(self, kind: str, policy_type: Any):
        """Initialize codec.

        Args:
            kind: Human readable policy kind, used in errors and logs
            policy_type: Annotated discriminated union of the kind's variants
        """
        self.kind = kind
        self._adapter = TypeAdapter(policy_type)
        self._variants: Tuple[type, ...] = _union_members(policy_type)

    @property
    def variants(self) -> Tuple[type, ...]:
        """Concrete policy classes accepted by this codec."""
        return self._variants

    def embed(self, policy: T, attribute_name: str) -> DirectoryAttribute:
        """Serialize a policy into a single-valued directory attribute.

        Raises:
            PolicySerializationError: If the object is not a known variant or
                cannot be serialized
        """
        if not isinstance(policy, self._variants):
            raise PolicySerializationError(
                f"Cannot store {type(policy).__name__} as {self.kind}",
                details={"attribute": attribute_name, "type": type(policy).__name__},
            )

        try:
            document = self._adapter.dump_json(policy, by_alias=True).decode("utf-8")
        except PydanticSerializationError as e:
            logger.error(f"Failed to serialize {self.kind} into {attribute_name}: {e}")
            raise PolicySerializationError(
                f"Failed to serialize {self.kind}: {e}",
                details={"attribute": attribute_name, "type": type(policy).__name__},
            ) from e

        return DirectoryAttribute.of(attribute_name, document)

    def extract(self, entry: DirectoryEntry, attribute_name: str) -> Optional[T]:
        """Read a policy from an entry attribute.

        Returns:
            The policy variant, or None when the attribute is absent or blank

        Raises:
            PolicyDeserializationError: If the document is malformed or its
                ``@type`` is not a known variant
        """
        document = entry.get_value(attribute_name)
        if document is None or not document.strip():
            return None

        try:
            return self._adapter.validate_json(document)
        except ValidationError as e:
            logger.error(f"Invalid {self.kind} in {attribute_name} of {entry.dn}: {e}")
            raise PolicyDeserializationError(
                f"Invalid {self.kind} document in attribute {attribute_name}",
                details={
                    "dn": entry.dn,
                    "attribute": attribute_name,
                    "errors": [
                        {"type": item["type"], "msg": item["msg"]}
                        for item in e.errors(include_url=False)
                    ],
                },
            ) from e


def _union_members(policy_type: Any) -> Tuple[type, ...]:
    # Annotated[Union[...], Field(...)] -> (Union[...], FieldInfo)
    union = get_args(policy_type)[0]
    return tuple(get_args(union))


USERNAME_PROVIDER_CODEC: PolicyCodec = PolicyCodec("username attribute provider", UsernameAttributeProvider)
ATTRIBUTE_RELEASE_POLICY_CODEC: PolicyCodec = PolicyCodec("attribute release policy", AttributeReleasePolicy)
PROXY_POLICY_CODEC: PolicyCodec = PolicyCodec("proxy policy", ProxyPolicy)
