"""HTTP status code mapping for exceptions.

The registry has no HTTP surface of its own; this mapping lets the REST layer
translate failures consistently (not found vs. bad request vs. server error).
"""

from typing import Dict, Type

from .base import ServiceRegistryError
from .registry import (
    ConfigurationError,
    DirectoryAccessError,
    PolicyDeserializationError,
    PolicySerializationError,
    SchemaMisconfigurationError,
    ServiceMappingError,
    ServiceNotFoundError,
    UnresolvedServiceVariantError,
)


HTTP_STATUS_MAP: Dict[Type[Exception], int] = {
    # 400 Bad Request
    PolicySerializationError: 400,
    
    # 404 Not Found
    ServiceNotFoundError: 404,
    UnresolvedServiceVariantError: 404,
    
    # 422 Unprocessable Entity
    PolicyDeserializationError: 422,
    
    # 500 Internal Server Error
    ServiceMappingError: 500,
    ConfigurationError: 500,
    SchemaMisconfigurationError: 500,
    DirectoryAccessError: 500,
    ServiceRegistryError: 500,
}


def get_http_status_code(exception: Exception) -> int:
    """Get HTTP status code for an exception.
    
    The most specific mapped class in the exception's MRO wins.
    
    Args:
        exception: The exception instance
        
    Returns:
        HTTP status code, 500 for unmapped exceptions
    """
    for exception_type in type(exception).__mro__:
        if exception_type in HTTP_STATUS_MAP:
            return HTTP_STATUS_MAP[exception_type]
    return 500
