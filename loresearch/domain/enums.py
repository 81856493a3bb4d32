"""Domain enumerations for loresearch.

Enums represent fixed sets of domain values (e.g. attribute kind).
"""

from enum import Enum


class AttributeKind(str, Enum):
    """Tag of an attribute value inside an entity.

    STRING and MAPPING are the two shapes a well-formed attribute can take.
    UNKNOWN covers everything else a loaded document may contain (numbers,
    booleans, null, lists); traversal treats it as non-matching.
    """

    STRING = "string"
    MAPPING = "mapping"
    UNKNOWN = "unknown"

    @classmethod
    def values(cls) -> list[str]:
        """Return all kind values as strings.

        Returns:
            List of enum value strings (e.g. for validation or serialization).
        """
        return [kind.value for kind in cls]
