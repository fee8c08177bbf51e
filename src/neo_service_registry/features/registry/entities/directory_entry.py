"""Directory entry entities.

Directory attributes are multi-valued strings. These types keep that shape
at the boundary; typed parsing happens only inside the service mapper.
"""

from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional, Tuple


@dataclass(frozen=True)
class DirectoryAttribute:
    """A single directory attribute with its ordered values."""

    name: str
    values: Tuple[str, ...]

    def __post_init__(self):
        """Validate attribute after initialization."""
        if not self.name or not self.name.strip():
            raise ValueError("Attribute name is required")

        # Accept any iterable of strings, store as tuple
        values = tuple(self.values)
        for value in values:
            if not isinstance(value, str):
                raise TypeError(
                    f"Values of attribute {self.name} must be strings, got {type(value).__name__}"
                )
        object.__setattr__(self, "values", values)

    @classmethod
    def of(cls, name: str, *values: str) -> "DirectoryAttribute":
        """Create an attribute from positional values."""
        return cls(name=name, values=values)

    @property
    def first_value(self) -> Optional[str]:
        """Get the first value, or None for an attribute without values."""
        return self.values[0] if self.values else None


@dataclass
class DirectoryEntry:
    """A distinguished-name keyed record of multi-valued string attributes.

    Attribute names are matched case-insensitively, as in LDAP, while the
    spelling used when the attribute was added is preserved.
    """

    dn: str
    attributes: Dict[str, List[str]] = field(default_factory=dict)

    def __post_init__(self):
        """Normalize attribute values after initialization."""
        normalized: Dict[str, List[str]] = {}
        for name, values in self.attributes.items():
            if isinstance(values, str):
                values = [values]
            normalized[name] = list(values)
        self.attributes = normalized

    @classmethod
    def from_attributes(
        cls, dn: str, attributes: Iterable[DirectoryAttribute]
    ) -> "DirectoryEntry":
        """Build an entry from a sequence of attributes."""
        entry = cls(dn=dn)
        for attribute in attributes:
            entry.add_attribute(attribute)
        return entry

    def _find_key(self, name: str) -> Optional[str]:
        lowered = name.lower()
        for key in self.attributes:
            if key.lower() == lowered:
                return key
        return None

    def add_attribute(self, attribute: DirectoryAttribute) -> None:
        """Add an attribute, replacing any attribute with the same name."""
        existing = self._find_key(attribute.name)
        if existing is not None:
            del self.attributes[existing]
        self.attributes[attribute.name] = list(attribute.values)

    def get_attribute(self, name: str) -> Optional[DirectoryAttribute]:
        """Get an attribute by name, or None when absent."""
        key = self._find_key(name)
        if key is None:
            return None
        return DirectoryAttribute(name=key, values=self.attributes[key])

    def has_attribute(self, name: str) -> bool:
        """Check if the entry carries the named attribute."""
        return self._find_key(name) is not None

    def get_values(self, name: str) -> List[str]:
        """Get all values of an attribute, empty when absent."""
        key = self._find_key(name)
        if key is None:
            return []
        return list(self.attributes[key])

    def get_value(self, name: str) -> Optional[str]:
        """Get the first value of an attribute, or None when absent."""
        values = self.get_values(name)
        return values[0] if values else None

    @property
    def attribute_names(self) -> List[str]:
        """Names of all attributes in insertion order."""
        return list(self.attributes.keys())

    def to_dict(self) -> Dict:
        """Convert entry to dictionary."""
        return {
            'dn': self.dn,
            'attributes': {name: list(values) for name, values in self.attributes.items()},
        }
