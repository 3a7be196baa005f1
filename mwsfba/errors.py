"""Errors raised while declaring schemas and building request parameters."""
from typing import Any, Iterable, Optional


class RequestBuildError(Exception):
    """Base class for every request-building failure."""


class SchemaError(RequestBuildError):
    """An action schema or parameter definition is malformed."""


class DuplicateWirePathError(SchemaError):
    """Two fields resolve to the same wire key."""

    def __init__(self, wire_path: str, first: str = "", second: str = ""):
        self.wire_path = wire_path
        self.first = first
        self.second = second
        if first and second:
            message = f"Fields '{first}' and '{second}' share wire path '{wire_path}'"
        else:
            message = f"Duplicate wire key '{wire_path}'"
        super().__init__(message)


class UnknownActionError(RequestBuildError):
    """No action with that name exists in the catalog section."""

    def __init__(self, section: str, action: str):
        self.section = section
        self.action = action
        super().__init__(f"Unknown action '{action}' in section '{section}'")


class UnknownFieldError(RequestBuildError):
    """Assignment to a field the action schema does not declare."""

    def __init__(self, field_name: str, action: str = ""):
        self.field_name = field_name
        self.action = action
        suffix = f" for action '{action}'" if action else ""
        super().__init__(f"Unknown field '{field_name}'{suffix}")


class MissingRequiredFieldError(RequestBuildError):
    """A required field has no value (or an empty list) at finalize time."""

    def __init__(self, field_name: str):
        self.field_name = field_name
        super().__init__(f"Missing required field '{field_name}'")


class InvalidEnumValueError(RequestBuildError):
    """A value is outside the allowed set of an enum."""

    def __init__(self, value: Any, allowed: Iterable[str], field_name: Optional[str] = None):
        self.value = value
        self.allowed = tuple(allowed)
        self.field_name = field_name
        where = f" for field '{field_name}'" if field_name else ""
        super().__init__(
            f"Invalid value {value!r}{where}; expected one of {', '.join(self.allowed)}"
        )


class InvalidTimestampError(RequestBuildError):
    """A value cannot be interpreted as a date/time."""

    def __init__(self, value: Any, field_name: Optional[str] = None):
        self.value = value
        self.field_name = field_name
        where = f" for field '{field_name}'" if field_name else ""
        super().__init__(f"Cannot interpret {value!r} as a timestamp{where}")


class InvalidComplexValueError(RequestBuildError):
    """A complex field was assigned something other than a prepared builder."""

    def __init__(self, field_name: str, value: Any):
        self.field_name = field_name
        self.value = value
        super().__init__(
            f"Field '{field_name}' expects a ComplexList or EnumSelection, "
            f"got {type(value).__name__}"
        )
