"""Domain entities: the record store and its attribute tree.

Pure domain types; no loader or transport concerns.
"""

from loresearch.domain.entities.store import Attribute, Store, classify_attribute

__all__ = [
    "Attribute",
    "Store",
    "classify_attribute",
]
