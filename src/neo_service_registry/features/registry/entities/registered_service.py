"""Registered service entities.

A registered service describes a client application allowed to use the
authentication gateway: the pattern its URLs must match, whether it may
participate in SSO, and the policies governing username release, attribute
release and proxying.
"""

import re
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from functools import lru_cache
from typing import Dict, Optional, Pattern, Set

from .policies import AttributeReleasePolicy, ProxyPolicy, UsernameAttributeProvider
from ....utils.identifiers import MAX_SERVICE_ID

# Sentinel for a service that has not been persisted yet
INITIAL_IDENTIFIER_VALUE = MAX_SERVICE_ID


@dataclass
class RegisteredService(ABC):
    """Base registered service entity."""

    service_id: str = ""
    id: int = INITIAL_IDENTIFIER_VALUE
    name: Optional[str] = None
    description: Optional[str] = None
    enabled: bool = True
    sso_enabled: bool = True
    evaluation_order: int = 0
    theme: Optional[str] = None
    required_handlers: Set[str] = field(default_factory=set)

    # Policies; None means "not configured"
    username_attribute_provider: Optional[UsernameAttributeProvider] = None
    attribute_release_policy: Optional[AttributeReleasePolicy] = None
    proxy_policy: Optional[ProxyPolicy] = None

    def __post_init__(self):
        """Validate service after initialization."""
        if self.service_id is None:
            self.service_id = ""

        if self.id <= 0:
            raise ValueError("id must be a positive integer")

        self.required_handlers = set(self.required_handlers or ())

    @property
    def has_identifier(self) -> bool:
        """Check if the service has been assigned an identifier."""
        return self.id != INITIAL_IDENTIFIER_VALUE

    @abstractmethod
    def matches(self, service_url: str) -> bool:
        """Check if a requested service URL is served by this entry."""
        ...

    def to_dict(self) -> Dict:
        """Convert service to dictionary."""
        return {
            'id': self.id,
            'type': self.__class__.__name__,
            'service_id': self.service_id,
            'name': self.name,
            'description': self.description,
            'enabled': self.enabled,
            'sso_enabled': self.sso_enabled,
            'evaluation_order': self.evaluation_order,
            'theme': self.theme,
            'required_handlers': sorted(self.required_handlers),
            'username_attribute_provider': _policy_to_dict(self.username_attribute_provider),
            'attribute_release_policy': _policy_to_dict(self.attribute_release_policy),
            'proxy_policy': _policy_to_dict(self.proxy_policy),
        }


def _policy_to_dict(policy) -> Optional[Dict]:
    if policy is None:
        return None
    return policy.model_dump(by_alias=True)


@dataclass
class RegexRegisteredService(RegisteredService):
    """Registered service whose pattern is a regular expression."""

    def matches(self, service_url: str) -> bool:
        if not service_url or not self.service_id:
            return False
        try:
            compiled = _compile_regex(self.service_id)
        except re.error:
            return False
        return compiled.fullmatch(service_url) is not None


@dataclass
class AntPatternRegisteredService(RegisteredService):
    """Registered service whose pattern is an ant-style path glob.

    ``?`` matches one character, ``*`` matches within a path segment and
    ``**`` matches across segments.
    """

    def matches(self, service_url: str) -> bool:
        if not service_url or not self.service_id:
            return False
        try:
            compiled = ant_pattern_to_regex(self.service_id)
        except re.error:
            return False
        return compiled.fullmatch(service_url) is not None


@lru_cache(maxsize=256)
def _compile_regex(pattern: str) -> Pattern:
    return re.compile(pattern)


def _closing_brace(pattern: str, start: int) -> int:
    depth = 0
    for index in range(start, len(pattern)):
        if pattern[index] == "{":
            depth += 1
        elif pattern[index] == "}":
            depth -= 1
            if depth == 0:
                return index
    return -1


@lru_cache(maxsize=256)
def ant_pattern_to_regex(pattern: str) -> Pattern:
    """Translate an ant-style path pattern into a compiled regular expression.

    Raises:
        re.error: If a ``{name:regex}`` constraint is not a valid regex
    """
    parts = []
    i = 0
    while i < len(pattern):
        char = pattern[i]
        if pattern.startswith("**", i):
            parts.append(".*")
            i += 2
            continue
        if char == "*":
            parts.append("[^/]*")
        elif char == "?":
            parts.append("[^/]")
        elif char == "{":
            end = _closing_brace(pattern, i)
            if end == -1:
                parts.append(re.escape(char))
            else:
                # URI template variable, optionally constrained: {name:regex}
                _, _, constraint = pattern[i + 1:end].partition(":")
                parts.append(f"({constraint})" if constraint else "[^/]+")
                i = end
        else:
            parts.append(re.escape(char))
        i += 1
    return re.compile("".join(parts))
