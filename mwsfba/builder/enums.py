"""Closed-set value validation for enum-typed parameters."""
from dataclasses import dataclass
from typing import Dict, Iterable, Optional, Tuple

from mwsfba.errors import InvalidEnumValueError

from .coercion import expand_list


class Enum:
    """A closed set of allowed string values"""

    def __init__(self, allowed_values: Iterable[str]):
        # Keep declaration order for messages and listings
        self.values: Tuple[str, ...] = tuple(dict.fromkeys(allowed_values))
        self.allowed_values = frozenset(self.values)

    def __contains__(self, value) -> bool:
        return isinstance(value, str) and value in self.allowed_values

    def __repr__(self) -> str:
        return f"Enum({list(self.values)!r})"

    def validate(self, value, field_name: Optional[str] = None) -> str:
        """
        Return value unchanged if it belongs to the allowed set

        Matching is exact: no case folding, no trimming.

        Raises:
            InvalidEnumValueError: if value is not allowed
        """
        if value not in self:
            raise InvalidEnumValueError(value, self.values, field_name)
        return value

    def select(self, *values: str) -> "EnumSelection":
        """Bind a validated choice of values for a complex enum field"""
        for value in values:
            self.validate(value)
        return EnumSelection(self, tuple(values))


@dataclass(frozen=True)
class EnumSelection:
    """Validated enum values ready to flatten as an indexed list"""

    enum: Enum
    values: Tuple[str, ...]

    def __len__(self) -> int:
        return len(self.values)

    def flatten(self, prefix: str) -> Dict[str, str]:
        """Emit prefix.1 .. prefix.N in selection order"""
        return expand_list(prefix, self.values, self.enum.validate)
