"""Tests for the exception hierarchy."""

import pytest

from neo_service_registry.core.exceptions import (
    ConfigurationError,
    DirectoryAccessError,
    PolicyDeserializationError,
    PolicySerializationError,
    SchemaMisconfigurationError,
    ServiceMappingError,
    ServiceNotFoundError,
    ServiceRegistryError,
    UnresolvedServiceVariantError,
    create_error_response,
    get_http_status_code,
)


class TestServiceRegistryError:
    """Test cases for the base exception."""
    
    def test_defaults(self):
        """Test error code defaults to the class name."""
        error = ServiceNotFoundError("Registered service 7 not found")
        
        assert error.message == "Registered service 7 not found"
        assert error.error_code == "ServiceNotFoundError"
        assert error.details == {}
        assert str(error) == "Registered service 7 not found"
    
    def test_custom_code_and_details(self):
        """Test explicit error code and details are kept."""
        error = DirectoryAccessError("down", error_code="LDAP_DOWN", details={"dn": "ou=x"})
        
        assert error.error_code == "LDAP_DOWN"
        assert error.details == {"dn": "ou=x"}
    
    def test_hierarchy(self):
        """Test specific errors are catchable through their families."""
        assert issubclass(SchemaMisconfigurationError, ConfigurationError)
        assert issubclass(PolicySerializationError, ServiceMappingError)
        assert issubclass(PolicyDeserializationError, ServiceMappingError)
        assert issubclass(UnresolvedServiceVariantError, ServiceNotFoundError)
        assert issubclass(DirectoryAccessError, ServiceRegistryError)
    
    def test_create_error_response(self):
        """Test the standardized error response shape."""
        error = PolicyDeserializationError("bad policy", details={"attribute": "casServiceProxyPolicy"})
        
        assert create_error_response(error) == {
            "error": {
                "code": "PolicyDeserializationError",
                "message": "bad policy",
                "details": {"attribute": "casServiceProxyPolicy"},
                "type": "PolicyDeserializationError",
            }
        }


class TestHttpMapping:
    """Test cases for HTTP status mapping."""
    
    @pytest.mark.parametrize(
        "error,status",
        [
            (PolicySerializationError("x"), 400),
            (ServiceNotFoundError("x"), 404),
            (UnresolvedServiceVariantError("x"), 404),
            (PolicyDeserializationError("x"), 422),
            (ServiceMappingError("x"), 500),
            (SchemaMisconfigurationError("x"), 500),
            (DirectoryAccessError("x"), 500),
            (ServiceRegistryError("x"), 500),
            (KeyError("x"), 500),
        ],
    )
    def test_status_codes(self, error, status):
        """Test each error maps to its status."""
        assert get_http_status_code(error) == status
