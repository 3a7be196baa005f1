"""
Complex List - Repeatable structured parameters

Transforms:
    ComplexList("Items.member")
        .add_member({"SellerSKU": "SKU1", "Quantity": 5})
        .add_member({"SellerSKU": "SKU2", "Quantity": 1, "GiftMessage": None})
Into:
    {
        "Items.member.1.SellerSKU": "SKU1",
        "Items.member.1.Quantity": "5",
        "Items.member.2.SellerSKU": "SKU2",
        "Items.member.2.Quantity": "1",
    }
"""

import logging
from typing import Any, Dict, Iterator, List, Optional

from .coercion import to_wire_string

logger = logging.getLogger(__name__)


class ComplexList:
    """Ordered sequence of members bound to a wire prefix"""

    def __init__(self, wire_prefix: str):
        """
        Initialize ComplexList

        Args:
            wire_prefix: Key prefix for every member (e.g., "Items.member")
        """
        self.wire_prefix = wire_prefix
        self.members: List[Dict[str, Any]] = []

    def __len__(self) -> int:
        return len(self.members)

    def __iter__(self) -> Iterator[Dict[str, Any]]:
        return iter(self.members)

    def __repr__(self) -> str:
        return f"ComplexList({self.wire_prefix!r}, members={len(self.members)})"

    def add_member(self, fields: Optional[Dict[str, Any]] = None, **sub_fields) -> "ComplexList":
        """
        Append one member and return self for chaining

        Sub-fields can be passed as a mapping, as keywords, or both. Dotted
        sub-field names (e.g., "Weight.Unit") are only reachable via the mapping.
        """
        member = dict(fields or {})
        member.update(sub_fields)
        self.members.append(member)
        return self

    def flatten(self, prefix: Optional[str] = None) -> Dict[str, str]:
        """
        Flatten members into indexed wire keys

        Args:
            prefix: Key prefix, defaults to this list's wire_prefix

        Returns:
            {"{prefix}.{i}.{sub_field}": value} with 1-based i in insertion order;
            sub-fields set to None are omitted
        """
        if prefix is None:
            prefix = self.wire_prefix
        result = {}

        for index, member in enumerate(self.members, start=1):
            for sub_field, value in member.items():
                if value is None:
                    continue
                result[f"{prefix}.{index}.{sub_field}"] = to_wire_string(value)

        logger.debug(f"Flattened {len(self.members)} members under {prefix}")
        return result
