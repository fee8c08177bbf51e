"""Service variant resolution from a service identifier pattern."""

import logging
import re
from enum import Enum
from typing import Dict, Optional, Type

from ..entities.registered_service import (
    AntPatternRegisteredService,
    RegexRegisteredService,
    RegisteredService,
    ant_pattern_to_regex,
)

logger = logging.getLogger(__name__)

ANT_WILDCARD_PATTERN = re.compile(r"[*?]|\{[^}]*\}")


class ServiceVariant(str, Enum):
    """Concrete service types a pattern can resolve to."""
    REGEX = "regex"
    ANT_PATTERN = "ant_pattern"
    UNRESOLVED = "unresolved"


SERVICE_VARIANT_TYPES: Dict[ServiceVariant, Type[RegisteredService]] = {
    ServiceVariant.REGEX: RegexRegisteredService,
    ServiceVariant.ANT_PATTERN: AntPatternRegisteredService,
}


def is_valid_regex_pattern(pattern: str) -> bool:
    """Check if a pattern compiles as a regular expression."""
    try:
        re.compile(pattern)
    except re.error:
        logger.debug(f"Failed to identify [{pattern}] as a regular expression")
        return False
    return True


def is_ant_pattern(pattern: str) -> bool:
    """Check if a pattern contains ant-style wildcards or template variables."""
    return ANT_WILDCARD_PATTERN.search(pattern) is not None


def is_valid_ant_pattern(pattern: str) -> bool:
    """Check if an ant pattern has wildcards and translates to a valid regex."""
    if not is_ant_pattern(pattern):
        return False
    try:
        ant_pattern_to_regex(pattern)
    except re.error:
        logger.debug(f"Ant pattern [{pattern}] has an invalid template constraint")
        return False
    return True


def resolve_service_variant(pattern: Optional[str]) -> ServiceVariant:
    """Decide which service type a pattern describes.

    Regular expressions win over ant patterns: a glob that also compiles as a
    regex is treated as a regex.
    """
    if pattern is None or not pattern.strip():
        return ServiceVariant.UNRESOLVED

    if is_valid_regex_pattern(pattern):
        return ServiceVariant.REGEX

    if is_valid_ant_pattern(pattern):
        return ServiceVariant.ANT_PATTERN

    logger.debug(f"Pattern [{pattern}] is neither a regular expression nor an ant pattern")
    return ServiceVariant.UNRESOLVED


def get_service_type(pattern: Optional[str]) -> Optional[Type[RegisteredService]]:
    """Get the service class for a pattern, or None when unresolved."""
    return SERVICE_VARIANT_TYPES.get(resolve_service_variant(pattern))
