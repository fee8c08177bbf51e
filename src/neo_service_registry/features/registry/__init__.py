"""Registry feature module - registered services backed by a directory store.

This module maps the RegisteredService domain entity to and from LDAP-style
directory entries:
- Configurable attribute schema with fail-fast validation
- Policy objects embedded as self-describing JSON documents
- Regex / ant pattern service variant resolution
- Identifier and DN generation for new services
- A repository wrapping any directory client that honours the protocol

Usage Example:
```python
from neo_service_registry.features.registry import (
    LdapServiceMapper,
    RegexRegisteredService,
)

mapper = LdapServiceMapper()
service = RegexRegisteredService(service_id="^https://.*\\.example\\.com/.*")
mapped = mapper.map_from_registered_service("ou=services,dc=example,dc=org", service)
restored = mapper.map_to_registered_service(mapped.entry)
```
"""

from .entities import *  # noqa: F401,F403
from .entities import __all__ as _entities_all
from .repositories import LdapServiceRegistryRepository
from .services import *  # noqa: F401,F403
from .services import __all__ as _services_all

__all__ = [*_entities_all, *_services_all, "LdapServiceRegistryRepository"]
