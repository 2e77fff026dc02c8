"""
Forward conversion: source schema nodes to Gemini response schemas.
"""
import json
from typing import Any

import structlog

from ..models.target import JSON_MIME_TYPE, ResponseFormat, SchemaType, TargetSchema
from .discriminator import SchemaKind, get_schema_kind, is_optional, unwrap_modifiers

logger = structlog.get_logger(__name__)


def _literal_to_enum_value(value: Any) -> str:
    # The target format only has string enums; other scalars keep their JSON text.
    if isinstance(value, str):
        return value
    return json.dumps(value)


def decorate_target(target: TargetSchema, node: Any) -> TargetSchema:
    """Copy nullability and description from ``node`` onto ``target``.

    A ``nullable`` already set by the kind-specific step is left alone.
    """
    if target.nullable is None and is_optional(node):
        target.nullable = True

    description = getattr(node, "description", None)
    if description:
        target.description = description

    return target


def to_target_schema(node: Any) -> TargetSchema:
    """Convert a source schema node into a response schema.

    Never raises: constructs the target format cannot express become a
    permissive nullable object.

    Example:
        >>> to_target_schema(ArrayNode(element=StringNode())).to_payload()
        {'type': 'array', 'items': {'type': 'string'}}
    """
    stack = unwrap_modifiers(node)
    if stack.modifiers:
        target = to_target_schema(stack.base)
        target.nullable = True
        if stack.description:
            target.description = stack.description
        return target

    kind = get_schema_kind(node)

    if kind is SchemaKind.ARRAY:
        target = TargetSchema(type=SchemaType.ARRAY, items=to_target_schema(node.element))
    elif kind is SchemaKind.OBJECT:
        properties = {}
        required = []
        for name, field_node in node.fields.items():
            properties[name] = to_target_schema(field_node)
            if unwrap_modifiers(field_node).required:
                required.append(name)
        target = TargetSchema(
            type=SchemaType.OBJECT,
            properties=properties,
            required=required or None,
        )
    elif kind is SchemaKind.STRING:
        target = TargetSchema(type=SchemaType.STRING)
    elif kind is SchemaKind.NUMBER:
        target = TargetSchema(type=SchemaType.NUMBER)
    elif kind is SchemaKind.BOOLEAN:
        target = TargetSchema(type=SchemaType.BOOLEAN)
    elif kind is SchemaKind.ENUM:
        target = TargetSchema(type=SchemaType.STRING, enum=list(node.values))
    elif kind is SchemaKind.LITERAL:
        target = TargetSchema(type=SchemaType.STRING, enum=[_literal_to_enum_value(node.value)])
    else:
        logger.debug(
            "Unrecognized source schema construct; emitting a permissive object.",
            origin=getattr(node, "origin", None) or type(node).__name__,
        )
        target = TargetSchema(type=SchemaType.OBJECT, nullable=True)

    return decorate_target(target, node)


def response_schema_from_source(node: Any, mime_type: str = JSON_MIME_TYPE) -> ResponseFormat:
    """Build the response-format fragment (MIME type plus schema) for ``node``."""
    return ResponseFormat(response_mime_type=mime_type, response_schema=to_target_schema(node))
