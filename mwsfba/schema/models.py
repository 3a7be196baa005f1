"""Static models describing API actions and their parameters."""
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Callable, Dict, Mapping, Optional

from mwsfba.errors import DuplicateWirePathError, SchemaError


class ParamKind(str, Enum):
    """How a parameter value is coerced onto the wire."""

    PLAIN = "plain"
    TIMESTAMP = "timestamp"
    ENUM = "enum"
    COMPLEX = "complex"


@dataclass(frozen=True)
class ParameterDefinition:
    """Static metadata for one logical field of an action."""

    wire_path: str
    required: bool = False
    kind: ParamKind = ParamKind.PLAIN
    is_list: bool = False
    construct: Optional[Callable[[], Any]] = None  # ComplexList or Enum factory

    def __post_init__(self):
        if not self.wire_path:
            raise SchemaError("Parameter definitions need a wire path")
        if self.kind in (ParamKind.ENUM, ParamKind.COMPLEX) and self.construct is None:
            raise SchemaError(f"{self.kind.value} parameter '{self.wire_path}' needs a construct factory")

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "wire_path": self.wire_path,
            "required": self.required,
            "kind": self.kind.value,
            "is_list": self.is_list,
        }


@dataclass(frozen=True)
class ActionSchema:
    """Everything needed to build one API action's parameters."""

    action: str
    group: str
    path: str
    version: str
    fields: Mapping[str, ParameterDefinition] = field(default_factory=dict)

    def __post_init__(self):
        seen: Dict[str, str] = {}
        for name, definition in self.fields.items():
            if definition.wire_path in seen:
                raise DuplicateWirePathError(definition.wire_path, seen[definition.wire_path], name)
            seen[definition.wire_path] = name

        # Read-only once declared
        object.__setattr__(self, "fields", MappingProxyType(dict(self.fields)))

    def get_field(self, name: str) -> Optional[ParameterDefinition]:
        """Returns field definition by name."""
        return self.fields.get(name)

    @property
    def required_fields(self):
        return [name for name, definition in self.fields.items() if definition.required]

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "action": self.action,
            "group": self.group,
            "path": self.path,
            "version": self.version,
            "fields": {name: d.to_dict() for name, d in self.fields.items()},
        }


@dataclass(frozen=True)
class ServiceGroup:
    """A family of actions sharing a path and API version."""

    name: str
    group: str
    path: str
    version: str

    def action(self, action: str, fields: Optional[Mapping[str, ParameterDefinition]] = None) -> ActionSchema:
        """Declare an action belonging to this group."""
        return ActionSchema(
            action=action,
            group=self.group,
            path=self.path,
            version=self.version,
            fields=fields or {},
        )
