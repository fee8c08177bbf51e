"""Tests for service variant resolution."""

import pytest

from neo_service_registry.features.registry.entities import (
    AntPatternRegisteredService,
    RegexRegisteredService,
)
from neo_service_registry.features.registry.services import (
    ServiceVariant,
    get_service_type,
    is_ant_pattern,
    is_valid_regex_pattern,
    resolve_service_variant,
)


class TestResolveServiceVariant:
    """Test cases for resolve_service_variant."""
    
    def test_regex_pattern(self):
        """Test a compiling regular expression resolves to regex."""
        assert resolve_service_variant(r"^https://.*\.example\.com/.*") == ServiceVariant.REGEX
    
    def test_glob_that_fails_regex_compilation(self):
        """Test a glob that is not a valid regex resolves to ant pattern."""
        assert resolve_service_variant("https://**.example.com/**") == ServiceVariant.ANT_PATTERN
    
    def test_glob_that_compiles_as_regex_is_regex(self):
        """Test regex compilation takes priority over glob detection."""
        # Valid (if unintended) regex: "/*" means zero or more slashes
        assert resolve_service_variant("https://*.example.com/*") == ServiceVariant.REGEX
    
    def test_template_variable_pattern(self):
        """Test ant template variables are recognized."""
        assert resolve_service_variant("https://example.com/{tenant}/(") == ServiceVariant.ANT_PATTERN
    
    @pytest.mark.parametrize("pattern", ["", "   ", None])
    def test_blank_pattern_unresolved(self, pattern):
        """Test blank patterns are unresolved."""
        assert resolve_service_variant(pattern) == ServiceVariant.UNRESOLVED
    
    def test_invalid_regex_without_wildcards_unresolved(self):
        """Test an invalid regex without glob wildcards is unresolved."""
        assert resolve_service_variant("https://example.com/[unclosed") == ServiceVariant.UNRESOLVED
    
    def test_template_constraint_with_braces(self):
        """Test nested braces inside a template constraint are kept together."""
        assert resolve_service_variant("https://x.com/{id:[0-9]{3}}/**(") == ServiceVariant.ANT_PATTERN
    
    def test_invalid_template_constraint_unresolved(self):
        """Test an ant pattern whose constraint is not a regex is unresolved."""
        assert resolve_service_variant("https://x.com/{id:[}") == ServiceVariant.UNRESOLVED
        assert get_service_type("https://x.com/{id:[}") is None


class TestHelpers:
    """Test cases for the resolver helpers."""
    
    def test_is_valid_regex_pattern(self):
        """Test regex validity check."""
        assert is_valid_regex_pattern(r"^https://.+$")
        assert not is_valid_regex_pattern("https://**")
    
    @pytest.mark.parametrize(
        "pattern, expected",
        [
            ("https://*.example.com", True),
            ("https://example.com/page?", True),
            ("https://example.com/{id}", True),
            ("https://example.com/page", False),
        ],
    )
    def test_is_ant_pattern(self, pattern, expected):
        """Test wildcard detection."""
        assert is_ant_pattern(pattern) is expected
    
    def test_get_service_type(self):
        """Test variant to class lookup."""
        assert get_service_type(r"^https://.+") is RegexRegisteredService
        assert get_service_type("https://**.example.com/**") is AntPatternRegisteredService
        assert get_service_type("") is None
