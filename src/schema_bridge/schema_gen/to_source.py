"""
Reverse conversion: Gemini response schemas back to source schemas.

The node constructors are supplied by a ``SchemaBuilder``, so the same
traversal can produce ``models.source`` nodes (the default) or any other
schema representation, e.g. Python type annotations for pydantic.
"""
from typing import Any, Dict, Optional, Protocol, TypeVar

import structlog

from ..models.source import (
    ArrayNode,
    BooleanNode,
    NumberNode,
    ObjectNode,
    SourceNodeBase,
    StringNode,
    UnrecognizedNode,
)
from ..models.target import SchemaType, TargetSchema

logger = structlog.get_logger(__name__)

T = TypeVar("T")


class SchemaBuilder(Protocol[T]):
    """Constructors the reverse converter needs from a schema library."""

    def array(self, element: T) -> T: ...

    def object(self, fields: Dict[str, T]) -> T: ...

    def string(self) -> T: ...

    def number(self) -> T: ...

    def boolean(self) -> T: ...

    def any(self) -> T: ...

    def optional(self, schema: T) -> T: ...

    def nullable(self, schema: T) -> T: ...

    def describe(self, schema: T, description: str) -> T: ...


class SourceNodeBuilder:
    """Builds ``models.source`` nodes."""

    def array(self, element: SourceNodeBase) -> SourceNodeBase:
        return ArrayNode(element=element)

    def object(self, fields: Dict[str, SourceNodeBase]) -> SourceNodeBase:
        return ObjectNode(fields=fields)

    def string(self) -> SourceNodeBase:
        return StringNode()

    def number(self) -> SourceNodeBase:
        return NumberNode()

    def boolean(self) -> SourceNodeBase:
        return BooleanNode()

    def any(self) -> SourceNodeBase:
        return UnrecognizedNode(origin="any")

    def optional(self, schema: SourceNodeBase) -> SourceNodeBase:
        return schema.optional()

    def nullable(self, schema: SourceNodeBase) -> SourceNodeBase:
        return schema.nullable()

    def describe(self, schema: SourceNodeBase, description: str) -> SourceNodeBase:
        return schema.describe(description)


def decorate_source(schema: Any, target: TargetSchema, builder: SchemaBuilder) -> Any:
    """Re-apply ``nullable`` and ``description`` from ``target`` onto ``schema``."""
    if target.nullable:
        schema = builder.nullable(schema)
    if target.description:
        schema = builder.describe(schema, target.description)
    return schema


def to_source_schema(target: TargetSchema, builder: Optional[SchemaBuilder] = None) -> Any:
    """Convert a response schema back into a source schema.

    Optional, Nullable and Default wrappers all flatten to ``nullable`` in
    the target format, so they come back as Nullable; object keys missing from
    ``required`` come back Optional. ``integer`` collapses to number and
    unknown type tags become an accept-anything schema. Never raises.
    """
    builder = builder or SourceNodeBuilder()

    if target.type == SchemaType.ARRAY:
        element = to_source_schema(target.items, builder) if target.items is not None else builder.any()
        schema = builder.array(element)
    elif target.type == SchemaType.OBJECT:
        required = target.required or []
        fields = {}
        for name, property_schema in (target.properties or {}).items():
            field_schema = to_source_schema(property_schema, builder)
            if name not in required:
                field_schema = builder.optional(field_schema)
            fields[name] = field_schema
        schema = builder.object(fields)
    elif target.type == SchemaType.STRING:
        schema = builder.string()
    elif target.type in (SchemaType.NUMBER, SchemaType.INTEGER):
        schema = builder.number()
    elif target.type == SchemaType.BOOLEAN:
        schema = builder.boolean()
    else:
        logger.debug("Unknown response schema type; accepting any value.", schema_type=target.type)
        schema = builder.any()

    return decorate_source(schema, target, builder)
