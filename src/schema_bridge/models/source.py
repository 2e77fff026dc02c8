"""Source validation schema nodes.

A source schema is an immutable tree of tagged nodes. Leaf kinds describe
primitive values, ``object``/``array`` give the tree its shape, and the
``optional``/``nullable``/``default`` modifiers wrap a single inner node
without changing its base type. Anything the model cannot express
(unions, records, tuples, ``Any``) is kept as an ``unrecognized`` node so that
conversion never has to reject a schema.

Example:
    >>> user = ObjectNode(fields={
    ...     "name": StringNode().describe("Display name"),
    ...     "age": NumberNode().optional(),
    ...     "tags": ArrayNode(element=StringNode()),
    ... })
"""
from __future__ import annotations

from typing import Annotated, Any, Dict, List, Literal, Optional, Union

from pydantic import Field, TypeAdapter

from .common import BasePydanticModel

LiteralValue = Union[str, bool, int, float, None]


class SourceNodeBase(BasePydanticModel):
    """Fields and fluent modifiers shared by every source node."""

    model_config = {"frozen": True}

    description: Optional[str] = None

    def optional(self) -> OptionalNode:
        """Wrap the node so the enclosing object may omit it."""
        return OptionalNode(inner=self)

    def nullable(self) -> NullableNode:
        """Wrap the node so it also accepts null."""
        return NullableNode(inner=self)

    def with_default(self, value: Any) -> DefaultNode:
        """Wrap the node with a default used when the value is missing."""
        return DefaultNode(inner=self, default=value)

    def describe(self, description: str) -> SourceNodeBase:
        """Return a copy of the node carrying a human-readable description."""
        return self.model_copy(update={"description": description})


class ObjectNode(SourceNodeBase):
    kind: Literal["object"] = "object"
    fields: Dict[str, SourceNode] = Field(default_factory=dict)


class ArrayNode(SourceNodeBase):
    kind: Literal["array"] = "array"
    element: SourceNode


class StringNode(SourceNodeBase):
    kind: Literal["string"] = "string"


class NumberNode(SourceNodeBase):
    kind: Literal["number"] = "number"


class BooleanNode(SourceNodeBase):
    kind: Literal["boolean"] = "boolean"


class EnumNode(SourceNodeBase):
    kind: Literal["enum"] = "enum"
    values: List[str]


class LiteralNode(SourceNodeBase):
    kind: Literal["literal"] = "literal"
    value: LiteralValue


class OptionalNode(SourceNodeBase):
    kind: Literal["optional"] = "optional"
    inner: SourceNode


class NullableNode(SourceNodeBase):
    kind: Literal["nullable"] = "nullable"
    inner: SourceNode


class DefaultNode(SourceNodeBase):
    kind: Literal["default"] = "default"
    inner: SourceNode
    default: Any = None


class UnrecognizedNode(SourceNodeBase):
    """Catch-all for constructs without a dedicated node (unions, records, ...)."""

    kind: Literal["unrecognized"] = "unrecognized"
    origin: Optional[str] = None


SourceNode = Annotated[
    Union[
        ObjectNode,
        ArrayNode,
        StringNode,
        NumberNode,
        BooleanNode,
        EnumNode,
        LiteralNode,
        OptionalNode,
        NullableNode,
        DefaultNode,
        UnrecognizedNode,
    ],
    Field(discriminator="kind"),
]

for _model in (ObjectNode, ArrayNode, OptionalNode, NullableNode, DefaultNode):
    _model.model_rebuild()

_source_node_adapter: TypeAdapter[SourceNode] = TypeAdapter(SourceNode)


def parse_source_node(data: Any) -> SourceNodeBase:
    """Validate a JSON-like document (e.g. a ``model_dump()``) into a node tree.

    Raises:
        pydantic.ValidationError: If the document is not a valid node tree.
    """
    return _source_node_adapter.validate_python(data)
