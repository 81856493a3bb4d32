"""Record store types.

A store maps entity names to a root attribute mapping. An attribute is
either a string leaf or a nested mapping of attributes. The store is
read-only while a search runs; loaders hand out a fresh snapshot instead
of mutating one in place.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, TypeAlias, Union

from loresearch.domain.enums import AttributeKind

Attribute: TypeAlias = Union[str, Mapping[str, "Attribute"]]
Store: TypeAlias = Mapping[str, Mapping[str, Attribute]]


def classify_attribute(value: Any) -> AttributeKind:
    """Return the tag of an attribute value.

    Args:
        value: Any value found inside an entity.

    Returns:
        STRING for str, MAPPING for any Mapping, UNKNOWN otherwise.
    """
    if isinstance(value, str):
        return AttributeKind.STRING
    if isinstance(value, Mapping):
        return AttributeKind.MAPPING
    return AttributeKind.UNKNOWN
