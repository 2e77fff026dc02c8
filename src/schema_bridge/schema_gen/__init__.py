"""
Schema conversion module for Schema Bridge.

Handles the bidirectional transformation between source validation schemas
and Gemini response schemas, plus the Pydantic integration built on top.
"""
from .discriminator import ModifierStack, SchemaKind, get_schema_kind, is_optional, unwrap_modifiers
from .documents import load_source_document, load_target_document
from .pydantic_bridge import (
    PydanticTypeBuilder,
    annotation_from_target,
    source_from_annotation,
    source_from_model,
    validator_from_target,
)
from .schema_converter_service import SchemaConverterService
from .to_source import SchemaBuilder, SourceNodeBuilder, decorate_source, to_source_schema
from .to_target import decorate_target, response_schema_from_source, to_target_schema

__all__ = [
    "ModifierStack",
    "PydanticTypeBuilder",
    "SchemaBuilder",
    "SchemaConverterService",
    "SchemaKind",
    "SourceNodeBuilder",
    "annotation_from_target",
    "decorate_source",
    "decorate_target",
    "get_schema_kind",
    "is_optional",
    "load_source_document",
    "load_target_document",
    "response_schema_from_source",
    "source_from_annotation",
    "source_from_model",
    "to_source_schema",
    "to_target_schema",
    "unwrap_modifiers",
    "validator_from_target",
]
