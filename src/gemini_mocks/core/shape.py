"""Declared output shapes for schema-constrained generation.

A ``Shape`` is a small closed tree of typed nodes. It can be built and checked
without the provider SDK; ``to_genai_schema`` translates it for the Gemini
request config at the adapter boundary.
"""

from __future__ import annotations

from collections.abc import Mapping
import dataclasses
from enum import Enum
from types import MappingProxyType
import typing

from gemini_mocks.core.types import _require
from gemini_mocks.exceptions import ShapeError

if typing.TYPE_CHECKING:
    from google.genai import types as genai_types


class ShapeType(str, Enum):
    """Node kinds a shape tree may contain."""

    STRING = "STRING"
    NUMBER = "NUMBER"
    BOOLEAN = "BOOLEAN"
    OBJECT = "OBJECT"
    ARRAY = "ARRAY"


@dataclasses.dataclass(frozen=True, slots=True)
class Violation:
    """A single place where a value departs from its shape."""

    path: str
    message: str

    def __str__(self) -> str:
        return f"{self.path}: {self.message}"


@dataclasses.dataclass(frozen=True, slots=True)
class Shape:
    """One node of a declared output shape.

    Attributes:
        type: Node kind.
        description: Optional hint forwarded to the model.
        enum: Allowed values (STRING nodes only).
        properties: Child shapes by field name (OBJECT nodes only).
        required: Field names that must be present (OBJECT nodes only).
        items: Element shape (ARRAY nodes only, mandatory there).
    """

    type: ShapeType
    description: str | None = None
    enum: tuple[str, ...] | None = None
    properties: Mapping[str, Shape] | None = dataclasses.field(default=None, hash=False)
    required: tuple[str, ...] = ()
    items: Shape | None = None

    def __post_init__(self) -> None:
        _require(
            condition=isinstance(self.type, ShapeType),
            message="must be a ShapeType",
            field_name="type",
            exc=ShapeError,
        )
        if self.properties is not None and not isinstance(
            self.properties, MappingProxyType
        ):
            object.__setattr__(self, "properties", MappingProxyType(dict(self.properties)))
        object.__setattr__(self, "required", tuple(self.required))
        if self.enum is not None:
            object.__setattr__(self, "enum", tuple(self.enum))

        if self.type is ShapeType.OBJECT:
            declared = self.properties or {}
            unknown = [name for name in self.required if name not in declared]
            _require(
                condition=not unknown,
                message=f"references undeclared properties {unknown}",
                field_name="required",
                exc=ShapeError,
            )
            _require(
                condition=all(isinstance(s, Shape) for s in declared.values()),
                message="values must be Shape instances",
                field_name="properties",
                exc=ShapeError,
            )
        else:
            _require(
                condition=self.properties is None and not self.required,
                message=f"only OBJECT nodes may declare fields, not {self.type.value}",
                field_name="properties",
                exc=ShapeError,
            )

        if self.type is ShapeType.ARRAY:
            _require(
                condition=isinstance(self.items, Shape),
                message="ARRAY nodes must declare an items shape",
                field_name="items",
                exc=ShapeError,
            )
        else:
            _require(
                condition=self.items is None,
                message=f"only ARRAY nodes may declare items, not {self.type.value}",
                field_name="items",
                exc=ShapeError,
            )

        if self.enum is not None:
            _require(
                condition=self.type is ShapeType.STRING and len(self.enum) > 0,
                message="must be a non-empty value set on a STRING node",
                field_name="enum",
                exc=ShapeError,
            )

    # --- Conversions ---

    def to_dict(self) -> dict[str, typing.Any]:
        """Return a plain JSON-schema-like dictionary."""
        out: dict[str, typing.Any] = {"type": self.type.value}
        if self.description:
            out["description"] = self.description
        if self.enum is not None:
            out["enum"] = list(self.enum)
        if self.properties is not None:
            out["properties"] = {k: v.to_dict() for k, v in self.properties.items()}
        if self.required:
            out["required"] = list(self.required)
        if self.items is not None:
            out["items"] = self.items.to_dict()
        return out

    def to_genai_schema(self) -> genai_types.Schema:
        """Translate into the SDK schema used by ``response_schema``."""
        from google.genai import types as genai_types

        kwargs: dict[str, typing.Any] = {"type": genai_types.Type(self.type.value)}
        if self.description:
            kwargs["description"] = self.description
        if self.enum is not None:
            kwargs["enum"] = list(self.enum)
        if self.properties is not None:
            kwargs["properties"] = {
                k: v.to_genai_schema() for k, v in self.properties.items()
            }
        if self.required:
            kwargs["required"] = list(self.required)
        if self.items is not None:
            kwargs["items"] = self.items.to_genai_schema()
        return genai_types.Schema(**kwargs)

    # --- Record-only conformance check ---

    def violations(self, value: typing.Any, path: str = "$") -> list[Violation]:
        """List the ways ``value`` departs from this shape.

        Only required fields, enum membership and node kinds are checked.
        Callers decide what to do with the result; nothing here raises.
        """
        found: list[Violation] = []
        match self.type:
            case ShapeType.STRING:
                if not isinstance(value, str):
                    found.append(Violation(path, "expected a string"))
                elif self.enum is not None and value not in self.enum:
                    found.append(
                        Violation(path, f"{value!r} is not one of {list(self.enum)}")
                    )
            case ShapeType.NUMBER:
                if isinstance(value, bool) or not isinstance(value, int | float):
                    found.append(Violation(path, "expected a number"))
            case ShapeType.BOOLEAN:
                if not isinstance(value, bool):
                    found.append(Violation(path, "expected a boolean"))
            case ShapeType.OBJECT:
                if not isinstance(value, dict):
                    found.append(Violation(path, "expected an object"))
                else:
                    for name in self.required:
                        if name not in value:
                            found.append(
                                Violation(path, f"missing required field {name!r}")
                            )
                    for name, child in (self.properties or {}).items():
                        if name in value:
                            found.extend(child.violations(value[name], f"{path}.{name}"))
            case ShapeType.ARRAY:
                if not isinstance(value, list):
                    found.append(Violation(path, "expected an array"))
                else:
                    assert self.items is not None
                    for index, element in enumerate(value):
                        found.extend(self.items.violations(element, f"{path}[{index}]"))
        return found


# --- Constructors ---


def string(
    description: str | None = None, *, enum: typing.Iterable[str] | None = None
) -> Shape:
    """STRING node, optionally restricted to an enumerated value set."""
    return Shape(
        ShapeType.STRING,
        description=description,
        enum=tuple(enum) if enum is not None else None,
    )


def number(description: str | None = None) -> Shape:
    """NUMBER node."""
    return Shape(ShapeType.NUMBER, description=description)


def boolean(description: str | None = None) -> Shape:
    """BOOLEAN node."""
    return Shape(ShapeType.BOOLEAN, description=description)


def obj(
    properties: Mapping[str, Shape],
    *,
    required: typing.Iterable[str] = (),
    description: str | None = None,
) -> Shape:
    """OBJECT node with named children and a required-field set."""
    return Shape(
        ShapeType.OBJECT,
        description=description,
        properties=properties,
        required=tuple(required),
    )


def array(items: Shape, *, description: str | None = None) -> Shape:
    """ARRAY node whose elements all follow ``items``."""
    return Shape(ShapeType.ARRAY, description=description, items=items)


def record(**fields: Shape) -> Shape:
    """OBJECT node in which every declared field is required."""
    return obj(fields, required=fields.keys())
