"""
Pydantic models for Schema Bridge.
"""
from .common import BasePydanticModel
from .source import (
    ArrayNode,
    BooleanNode,
    DefaultNode,
    EnumNode,
    LiteralNode,
    NullableNode,
    NumberNode,
    ObjectNode,
    OptionalNode,
    SourceNode,
    StringNode,
    UnrecognizedNode,
    parse_source_node,
)
from .target import ResponseFormat, SchemaType, TargetSchema

__all__ = [
    "ArrayNode",
    "BasePydanticModel",
    "BooleanNode",
    "DefaultNode",
    "EnumNode",
    "LiteralNode",
    "NullableNode",
    "NumberNode",
    "ObjectNode",
    "OptionalNode",
    "ResponseFormat",
    "SchemaType",
    "SourceNode",
    "StringNode",
    "TargetSchema",
    "UnrecognizedNode",
    "parse_source_node",
]
