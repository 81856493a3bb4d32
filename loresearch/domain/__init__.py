"""Domain layer: store types, value objects, enums, and exceptions.

No dependencies on infrastructure or presentation. Used by application
and infrastructure layers.
"""

from loresearch.domain.entities import Attribute, Store, classify_attribute
from loresearch.domain.enums import AttributeKind
from loresearch.domain.exceptions import LoreSearchException, ValidationException
from loresearch.domain.value_objects import MatchSpan, SearchQuery

__all__ = [
    # Entities
    "Attribute",
    "Store",
    "classify_attribute",
    # Enums
    "AttributeKind",
    # Exceptions
    "LoreSearchException",
    "ValidationException",
    # Value objects
    "MatchSpan",
    "SearchQuery",
]
