"""Mapping between registered services and directory entries.

The mapper translates the typed RegisteredService model into flat,
multi-valued directory attributes and back. It performs no I/O; the
repository hands it entries and stores what it produces.
"""

import logging
from dataclasses import dataclass
from typing import List, Optional

from ....core.exceptions import ServiceMappingError
from ....utils.identifiers import generate_service_id, stable_dn_hash
from ..entities.attribute_schema import LdapAttributeSchema
from ..entities.directory_entry import DirectoryAttribute, DirectoryEntry
from ..entities.policies import (
    DefaultRegisteredServiceUsernameProvider,
    RefuseRegisteredServiceProxyPolicy,
    ReturnAllowedAttributeReleasePolicy,
)
from ..entities.protocols import ServiceMapperProtocol
from ..entities.registered_service import INITIAL_IDENTIFIER_VALUE, RegisteredService
from .policy_codec import (
    ATTRIBUTE_RELEASE_POLICY_CODEC,
    PROXY_POLICY_CODEC,
    USERNAME_PROVIDER_CODEC,
)
from .variant_resolver import SERVICE_VARIANT_TYPES, resolve_service_variant

logger = logging.getLogger(__name__)

OBJECT_CLASS_ATTRIBUTE = "objectClass"
TOP_OBJECT_CLASS = "top"

TRUE_TOKEN = "TRUE"
FALSE_TOKEN = "FALSE"


@dataclass(frozen=True)
class MappedServiceEntry:
    """Result of mapping a service to a directory entry.

    ``service`` is the same instance that was passed in. When
    ``identifier_assigned`` is set, its id was generated by this call and is
    now authoritative.
    """

    entry: DirectoryEntry
    service: RegisteredService
    identifier_assigned: bool


class LdapServiceMapper(ServiceMapperProtocol):
    """Map registered services to and from LDAP-style directory entries."""

    def __init__(self, schema: Optional[LdapAttributeSchema] = None):
        """Initialize mapper.

        Args:
            schema: Attribute schema; a private copy is kept so later changes
                to the caller's instance do not affect mapping
        """
        self._schema = (schema or LdapAttributeSchema()).model_copy()

    @property
    def schema(self) -> LdapAttributeSchema:
        """Copy of the attribute schema in use."""
        return self._schema.model_copy()

    def get_dn_for_registered_service(self, parent_dn: str, service: RegisteredService) -> str:
        """Build the distinguished name of a service below a parent DN."""
        return f"{self._schema.id_attribute}={service.id},{parent_dn}"

    def map_from_registered_service(
        self, parent_dn: str, service: RegisteredService
    ) -> MappedServiceEntry:
        """Convert a service into a directory entry.

        A service without an identifier gets one assigned in place before the
        DN is computed. Missing policies are written as their defaults
        without modifying the service.

        Raises:
            ServiceMappingError: If any part of the service cannot be mapped
        """
        identifier_assigned = False
        if service.id == INITIAL_IDENTIFIER_VALUE:
            service.id = generate_service_id()
            identifier_assigned = True
            logger.debug(f"Assigned identifier {service.id} to service {service.service_id}")
        elif service.id <= 0:
            logger.error(f"Refusing to map service {service.service_id} with identifier {service.id}")
            raise ServiceMappingError(
                f"Service identifier must be a positive integer, got {service.id}",
                details={"id": service.id, "service_id": service.service_id},
            )

        schema = self._schema
        dn = self.get_dn_for_registered_service(parent_dn, service)
        logger.debug(f"Creating entry {dn}")

        try:
            attributes: List[DirectoryAttribute] = [
                DirectoryAttribute.of(schema.id_attribute, str(service.id)),
            ]
            attributes.extend(self._scalar_attribute(schema.service_id_attribute, service.service_id))
            attributes.extend(self._scalar_attribute(schema.service_name_attribute, service.name))
            attributes.extend(
                self._scalar_attribute(schema.service_description_attribute, service.description)
            )
            attributes.append(
                DirectoryAttribute.of(schema.service_enabled_attribute, _format_boolean(service.enabled))
            )
            attributes.append(
                DirectoryAttribute.of(
                    schema.service_sso_enabled_attribute, _format_boolean(service.sso_enabled)
                )
            )
            attributes.append(
                DirectoryAttribute.of(schema.evaluation_order_attribute, str(service.evaluation_order))
            )
            attributes.extend(self._scalar_attribute(schema.service_theme_attribute, service.theme))

            attributes.append(
                ATTRIBUTE_RELEASE_POLICY_CODEC.embed(
                    service.attribute_release_policy or ReturnAllowedAttributeReleasePolicy(),
                    schema.attribute_release_policy_attribute,
                )
            )
            attributes.append(
                PROXY_POLICY_CODEC.embed(
                    service.proxy_policy or RefuseRegisteredServiceProxyPolicy(),
                    schema.service_proxy_policy_attribute,
                )
            )
            attributes.append(
                USERNAME_PROVIDER_CODEC.embed(
                    service.username_attribute_provider or DefaultRegisteredServiceUsernameProvider(),
                    schema.username_attribute_provider_attribute,
                )
            )

            # Some directories reject an attribute with no values
            if service.required_handlers:
                attributes.append(
                    DirectoryAttribute(
                        name=schema.required_handlers_attribute,
                        values=sorted(service.required_handlers),
                    )
                )

            attributes.append(
                DirectoryAttribute.of(OBJECT_CLASS_ATTRIBUTE, TOP_OBJECT_CLASS, schema.object_class)
            )
        except ServiceMappingError:
            raise
        except (TypeError, ValueError) as e:
            logger.error(f"Failed to map service {service.id} to entry {dn}: {e}")
            raise ServiceMappingError(
                f"Failed to map service {service.id}: {e}",
                details={"dn": dn},
            ) from e

        entry = DirectoryEntry.from_attributes(dn, attributes)
        return MappedServiceEntry(
            entry=entry, service=service, identifier_assigned=identifier_assigned
        )

    def map_to_registered_service(self, entry: DirectoryEntry) -> Optional[RegisteredService]:
        """Convert a directory entry into a registered service.

        Returns:
            The service, or None if the entry has no service pattern or the
            pattern is neither a regex nor an ant pattern

        Raises:
            PolicyDeserializationError: If an embedded policy is malformed
        """
        schema = self._schema
        service_id = entry.get_value(schema.service_id_attribute)
        if service_id is None:
            logger.debug(f"Entry {entry.dn} has no {schema.service_id_attribute}; not a service")
            return None

        variant = resolve_service_variant(service_id)
        service_type = SERVICE_VARIANT_TYPES.get(variant)
        if service_type is None:
            logger.debug(f"Entry {entry.dn} has unresolvable service pattern [{service_id}]")
            return None

        return service_type(
            id=self._read_identifier(entry),
            service_id=service_id,
            name=entry.get_value(schema.service_name_attribute),
            description=entry.get_value(schema.service_description_attribute),
            enabled=_parse_boolean(entry.get_value(schema.service_enabled_attribute)),
            sso_enabled=_parse_boolean(entry.get_value(schema.service_sso_enabled_attribute)),
            evaluation_order=_parse_int(entry.get_value(schema.evaluation_order_attribute)) or 0,
            theme=entry.get_value(schema.service_theme_attribute),
            required_handlers=set(entry.get_values(schema.required_handlers_attribute)),
            username_attribute_provider=USERNAME_PROVIDER_CODEC.extract(
                entry, schema.username_attribute_provider_attribute
            ),
            attribute_release_policy=ATTRIBUTE_RELEASE_POLICY_CODEC.extract(
                entry, schema.attribute_release_policy_attribute
            ),
            proxy_policy=PROXY_POLICY_CODEC.extract(entry, schema.service_proxy_policy_attribute),
        )

    def _read_identifier(self, entry: DirectoryEntry) -> int:
        raw = entry.get_value(self._schema.id_attribute)
        identifier = _parse_int(raw)
        if identifier is not None and identifier > 0:
            return identifier

        recovered = stable_dn_hash(entry.dn)
        logger.warning(
            f"Entry {entry.dn} has missing or invalid {self._schema.id_attribute} "
            f"[{raw}]; using identifier {recovered} derived from its DN"
        )
        return recovered

    @staticmethod
    def _scalar_attribute(name: str, value: Optional[str]) -> List[DirectoryAttribute]:
        if value is None:
            return []
        return [DirectoryAttribute.of(name, value)]


def _format_boolean(value: bool) -> str:
    return TRUE_TOKEN if value else FALSE_TOKEN


def _parse_boolean(value: Optional[str]) -> bool:
    # Exact, case-sensitive match; anything else is false
    return value == TRUE_TOKEN


def _parse_int(value: Optional[str]) -> Optional[int]:
    if value is None:
        return None
    try:
        return int(value.strip())
    except ValueError:
        return None
