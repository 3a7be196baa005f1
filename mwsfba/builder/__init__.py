"""
Request Builder Module

Builds flat MWS query parameters from typed action schemas with:
- Plain, timestamp and enum value coercion
- List expansion (Name.1, Name.2, ...)
- ComplexList flattening (Name.member.N.SubField)
- Required field validation
"""

from .complex_list import ComplexList
from .enums import Enum, EnumSelection
from .request import Request
from .coercion import coerce_timestamp, expand_list, to_wire_string

__all__ = [
    "ComplexList",
    "Enum",
    "EnumSelection",
    "Request",
    "coerce_timestamp",
    "expand_list",
    "to_wire_string",
]
