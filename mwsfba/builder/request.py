"""
Request - Orchestrates validation, coercion and flattening for one API action

Integrates:
- ActionSchema: static field definitions for the action
- Coercion: plain values, timestamps and list expansion
- Enum: closed-set validation
- ComplexList / EnumSelection: indexed structured parameters
"""

import logging
from collections.abc import Iterable, Mapping as MappingABC
from typing import Any, Dict, List, Mapping

from mwsfba.errors import (
    DuplicateWirePathError,
    InvalidComplexValueError,
    InvalidEnumValueError,
    MissingRequiredFieldError,
    SchemaError,
    UnknownFieldError,
)
from mwsfba.schema.models import ActionSchema, ParameterDefinition, ParamKind

from .coercion import coerce_timestamp, expand_list, to_wire_string
from .complex_list import ComplexList
from .enums import Enum, EnumSelection

logger = logging.getLogger(__name__)


class Request:
    """
    Parameters for a single API call

    Usage:
    ```python
    request = Request(schema)
    request.assign("ShipmentId", "FBA123")
    items = request.new_complex("InboundShipmentItems")
    items.add_member({"SellerSKU": "SKU1", "QuantityShipped": 5})
    request.assign("InboundShipmentItems", items)

    params = request.finalize()
    # Returns: {"Action": ..., "Version": ..., "ShipmentId": "FBA123",
    #           "InboundShipmentItems.member.1.SellerSKU": "SKU1", ...}
    ```
    """

    def __init__(self, schema: ActionSchema):
        self.schema = schema
        self._values: Dict[str, Any] = {}

    def __repr__(self) -> str:
        return f"Request({self.schema.group!r}, {self.action!r}, assigned={sorted(self._values)})"

    @property
    def action(self) -> str:
        return self.schema.action

    @property
    def group(self) -> str:
        return self.schema.group

    @property
    def path(self) -> str:
        return self.schema.path

    @property
    def version(self) -> str:
        return self.schema.version

    @property
    def values(self) -> Dict[str, Any]:
        return dict(self._values)

    def assign(self, field_name: str, value: Any) -> "Request":
        """
        Assign a value to a declared field

        Assigning None clears the field. No type checking happens here;
        values are validated by finalize().

        Raises:
            UnknownFieldError: if the schema has no such field
        """
        definition = self._definition(field_name)

        if value is None:
            self._values.pop(field_name, None)
            return self

        # Iterators are read once so finalize() can run repeatedly
        if definition.is_list and _is_sequence(value):
            value = tuple(value)

        self._values[field_name] = value
        return self

    def assign_many(self, values: Mapping[str, Any]) -> "Request":
        """Assign several fields at once"""
        for field_name, value in values.items():
            self.assign(field_name, value)
        return self

    def is_assigned(self, field_name: str) -> bool:
        self._definition(field_name)
        return field_name in self._values

    def new_complex(self, field_name: str):
        """Return a fresh ComplexList or Enum from the field's factory"""
        definition = self._definition(field_name)
        if definition.construct is None:
            raise SchemaError(f"Field '{field_name}' has no construct factory")
        return definition.construct()

    def finalize(self) -> Dict[str, str]:
        """
        Build the flat wire parameter mapping

        Returns:
            {wire_key: string_value}, including Action and Version

        Raises:
            MissingRequiredFieldError, InvalidEnumValueError,
            InvalidTimestampError, InvalidComplexValueError,
            DuplicateWirePathError
        """
        self._check_required()

        params: Dict[str, str] = {}

        for field_name, value in self._values.items():
            definition = self.schema.fields[field_name]
            emitted = self._flatten_field(field_name, definition, value)
            logger.debug(f"{self.action}.{field_name}: {len(emitted)} keys")
            _merge(params, emitted)

        _merge(params, {"Action": self.action, "Version": self.version})

        logger.info(f"Finalized {self.group} {self.action} with {len(params)} parameters")
        return params

    def _definition(self, field_name: str) -> ParameterDefinition:
        definition = self.schema.get_field(field_name)
        if definition is None:
            raise UnknownFieldError(field_name, self.action)
        return definition

    def missing_fields(self) -> List[str]:
        """Names of required fields that would fail finalize(), in schema order"""
        missing = []
        for field_name in self.schema.required_fields:
            value = self._values.get(field_name)
            if value is None:
                missing.append(field_name)
            # Empty ComplexLists and selections count as missing
            elif isinstance(value, (ComplexList, EnumSelection)):
                if len(value) == 0:
                    missing.append(field_name)
            # So do lists with nothing but None, which emit no keys
            elif _is_sequence(value) and not any(item is not None for item in value):
                missing.append(field_name)
        return missing

    def _check_required(self) -> None:
        missing = self.missing_fields()
        if missing:
            raise MissingRequiredFieldError(missing[0])

    def _flatten_field(
        self,
        field_name: str,
        definition: ParameterDefinition,
        value: Any,
    ) -> Dict[str, str]:
        kind = definition.kind

        if kind is ParamKind.COMPLEX:
            return self._flatten_complex(field_name, definition, value)

        if kind is ParamKind.PLAIN:
            coerce = to_wire_string
        elif kind is ParamKind.TIMESTAMP:
            def coerce(item):
                return coerce_timestamp(item, field_name)
        elif kind is ParamKind.ENUM:
            coerce = self._enum_validator(field_name, definition)
        else:
            raise SchemaError(f"Unsupported parameter kind: {kind}")

        if definition.is_list:
            items = list(value) if _is_sequence(value) else [value]
            return expand_list(definition.wire_path, items, coerce)

        return {definition.wire_path: coerce(value)}

    def _flatten_complex(
        self,
        field_name: str,
        definition: ParameterDefinition,
        value: Any,
    ) -> Dict[str, str]:
        if isinstance(value, ComplexList):
            return value.flatten()

        if isinstance(value, EnumSelection):
            try:
                return value.flatten(definition.wire_path)
            except InvalidEnumValueError as e:
                raise InvalidEnumValueError(e.value, e.allowed, field_name) from e

        raise InvalidComplexValueError(field_name, value)

    @staticmethod
    def _enum_validator(field_name: str, definition: ParameterDefinition):
        enum = definition.construct()
        if not isinstance(enum, Enum):
            raise SchemaError(f"Enum field '{field_name}' factory returned {type(enum).__name__}")

        def validate(item) -> str:
            return enum.validate(item, field_name)

        return validate


def _is_sequence(value: Any) -> bool:
    return (
        isinstance(value, Iterable)
        and not isinstance(value, (str, bytes, MappingABC, ComplexList, EnumSelection))
    )


def _merge(params: Dict[str, str], emitted: Dict[str, str]) -> None:
    """Merge emitted keys, refusing to overwrite an existing key"""
    for key, value in emitted.items():
        if key in params:
            raise DuplicateWirePathError(key)
        params[key] = value

