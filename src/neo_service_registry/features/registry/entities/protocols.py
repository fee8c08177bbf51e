"""Protocol interfaces for the registry feature."""

from abc import abstractmethod
from typing import List, Optional, Protocol, runtime_checkable

from .directory_entry import DirectoryEntry
from .registered_service import RegisteredService


@runtime_checkable
class DirectoryClientProtocol(Protocol):
    """Protocol for the directory transport used by the repository."""
    
    @abstractmethod
    async def load_by_id(self, dn: str) -> Optional[DirectoryEntry]:
        """Load a single entry by distinguished name."""
        ...
    
    @abstractmethod
    async def save(self, entry: DirectoryEntry) -> None:
        """Create or replace an entry."""
        ...
    
    @abstractmethod
    async def delete(self, dn: str) -> bool:
        """Delete an entry, returning whether it existed."""
        ...
    
    @abstractmethod
    async def search(self, base_dn: str, object_class: str) -> List[DirectoryEntry]:
        """List entries of an object class below a base DN."""
        ...


@runtime_checkable
class ServiceMapperProtocol(Protocol):
    """Protocol for mapping registered services to and from directory entries."""
    
    @abstractmethod
    def map_from_registered_service(self, parent_dn: str, service: RegisteredService):
        """Convert a service into a directory entry, assigning an id if needed."""
        ...
    
    @abstractmethod
    def map_to_registered_service(self, entry: DirectoryEntry) -> Optional[RegisteredService]:
        """Convert a directory entry into a service, or None if it is not one."""
        ...
    
    @abstractmethod
    def get_dn_for_registered_service(self, parent_dn: str, service: RegisteredService) -> str:
        """Build the distinguished name of a service below a parent DN."""
        ...
