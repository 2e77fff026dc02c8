"""
Service responsible for converting source schemas to Gemini response schemas
and vice-versa, using the application configuration.
"""
from typing import Any, Optional

import structlog
from pydantic import BaseModel, TypeAdapter

from ..config import Config
from ..models.source import ObjectNode
from ..models.target import ResponseFormat, TargetSchema
from .discriminator import SchemaKind, get_schema_kind
from .pydantic_bridge import source_from_model, validator_from_target
from .to_source import SchemaBuilder, to_source_schema
from .to_target import response_schema_from_source, to_target_schema

logger = structlog.get_logger(__name__)


class SchemaConverterService:
    """
    Entry point for applications that embed response schemas in structured-output
    requests or validate responses against schemas they received.
    """

    def __init__(self, app_config: Optional[Config] = None):
        self.app_config = app_config or Config()
        self.logger = logger.bind(service="SchemaConverterService")

    def to_target_schema(self, node: Any) -> TargetSchema:
        """Converts a source schema node to a response schema."""
        kind = get_schema_kind(node)
        target = to_target_schema(node)
        self.logger.debug("Source schema converted.", source_kind=kind.value, target_type=target.type)
        if kind is SchemaKind.UNRECOGNIZED:
            self.logger.warning(
                "Top-level source schema is not representable; response schema accepts any object.",
                origin=getattr(node, "origin", None) or type(node).__name__,
            )
        return target

    def response_format(self, node: Any) -> ResponseFormat:
        """Builds the response-format fragment for a request's generation config."""
        return response_schema_from_source(node, mime_type=self.app_config.conversion.response_mime_type)

    def from_model(self, model: type[BaseModel]) -> ResponseFormat:
        """Builds the response-format fragment for a Pydantic model class."""
        node: ObjectNode = source_from_model(model)
        self.logger.debug("Pydantic model mapped to source schema.", model=model.__name__, fields=len(node.fields))
        return self.response_format(node)

    def to_source_schema(self, target: TargetSchema, builder: Optional[SchemaBuilder] = None) -> Any:
        """Converts a response schema back to a source schema (lossy, see ``to_source_schema``)."""
        source = to_source_schema(target, builder)
        self.logger.debug("Response schema converted back.", target_type=target.type)
        return source

    def validator_for(self, target: TargetSchema) -> TypeAdapter:
        """Builds a ``TypeAdapter`` validating data against a response schema."""
        return validator_from_target(target, model_prefix=self.app_config.conversion.generated_model_prefix)
