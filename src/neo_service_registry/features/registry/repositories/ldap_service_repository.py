"""Repository for registered services stored in a directory."""

import logging
from typing import List, Optional

from ....core.exceptions import (
    DirectoryAccessError,
    ServiceNotFoundError,
    UnresolvedServiceVariantError,
)
from ..entities.directory_entry import DirectoryEntry
from ..entities.protocols import DirectoryClientProtocol
from ..entities.registered_service import RegisteredService
from ..services.ldap_service_mapper import LdapServiceMapper

logger = logging.getLogger(__name__)


class LdapServiceRegistryRepository:
    """Repository for managing registered service persistence."""
    
    def __init__(
        self,
        client: DirectoryClientProtocol,
        base_dn: str,
        mapper: Optional[LdapServiceMapper] = None,
    ):
        """Initialize repository.
        
        Args:
            client: Directory transport
            base_dn: Parent DN under which service entries live
            mapper: Entry mapper, defaults to the standard attribute schema
        """
        if not base_dn or not base_dn.strip():
            raise ValueError("base_dn is required")
        
        self.client = client
        self.base_dn = base_dn
        self.mapper = mapper or LdapServiceMapper()
    
    def _dn_for_id(self, service_id: int) -> str:
        return f"{self.mapper.schema.id_attribute}={service_id},{self.base_dn}"
    
    async def save(self, service: RegisteredService) -> RegisteredService:
        """Create or update a service, assigning an id to new services."""
        mapped = self.mapper.map_from_registered_service(self.base_dn, service)
        logger.info(f"Saving registered service {service.id} ({service.service_id})")
        
        try:
            await self.client.save(mapped.entry)
        except Exception as e:
            logger.error(f"Failed to save service entry {mapped.entry.dn}: {e}")
            raise DirectoryAccessError(
                f"Failed to save registered service {service.id}: {e}",
                details={"dn": mapped.entry.dn},
            ) from e
        
        if mapped.identifier_assigned:
            logger.info(f"Created registered service {service.id} at {mapped.entry.dn}")
        return mapped.service
    
    async def find_by_id(self, service_id: int) -> Optional[RegisteredService]:
        """Get a service by id, or None if absent or not a service entry."""
        dn = self._dn_for_id(service_id)
        logger.debug(f"Loading registered service entry {dn}")
        
        entry = await self._load(dn)
        if entry is None:
            logger.debug(f"Registered service not found: {dn}")
            return None
        
        return self.mapper.map_to_registered_service(entry)
    
    async def get_by_id(self, service_id: int) -> RegisteredService:
        """Get a service by id.
        
        Raises:
            ServiceNotFoundError: If no entry exists with this id
            UnresolvedServiceVariantError: If the entry exists but its service
                pattern is neither a regex nor an ant pattern
        """
        dn = self._dn_for_id(service_id)
        entry = await self._load(dn)
        if entry is None:
            raise ServiceNotFoundError(
                f"Registered service {service_id} not found",
                details={"id": service_id, "dn": dn},
            )

        service = self.mapper.map_to_registered_service(entry)
        if service is None:
            pattern = entry.get_value(self.mapper.schema.service_id_attribute)
            if pattern is None:
                raise ServiceNotFoundError(
                    f"Entry {dn} is not a registered service",
                    details={"id": service_id, "dn": dn},
                )
            raise UnresolvedServiceVariantError(
                f"Service pattern of {dn} is neither a regular expression nor an ant pattern",
                details={"id": service_id, "dn": dn, "pattern": pattern},
            )
        return service
    
    async def delete(self, service: RegisteredService) -> bool:
        """Delete a service entry, returning whether it existed."""
        dn = self.mapper.get_dn_for_registered_service(self.base_dn, service)
        logger.info(f"Deleting registered service entry {dn}")
        
        try:
            return await self.client.delete(dn)
        except Exception as e:
            logger.error(f"Failed to delete service entry {dn}: {e}")
            raise DirectoryAccessError(
                f"Failed to delete registered service {service.id}: {e}",
                details={"dn": dn},
            ) from e
    
    async def load_all(self) -> List[RegisteredService]:
        """Load all services, ordered by evaluation order."""
        object_class = self.mapper.schema.object_class
        
        try:
            entries = await self.client.search(self.base_dn, object_class)
        except Exception as e:
            logger.error(f"Failed to search {self.base_dn} for {object_class}: {e}")
            raise DirectoryAccessError(
                f"Failed to load registered services: {e}",
                details={"base_dn": self.base_dn, "object_class": object_class},
            ) from e
        
        services = []
        for entry in entries:
            service = self.mapper.map_to_registered_service(entry)
            if service is None:
                logger.debug(f"Skipping non-service entry {entry.dn}")
                continue
            services.append(service)
        
        services.sort(key=lambda s: s.evaluation_order)
        logger.debug(f"Loaded {len(services)} registered services from {self.base_dn}")
        return services
    
    async def _load(self, dn: str) -> Optional[DirectoryEntry]:
        try:
            return await self.client.load_by_id(dn)
        except Exception as e:
            logger.error(f"Failed to load entry {dn}: {e}")
            raise DirectoryAccessError(
                f"Failed to load entry {dn}: {e}",
                details={"dn": dn},
            ) from e
