"""Schema Bridge - converts validation schemas to and from Gemini response schemas.

Builds the flat ``responseSchema`` declaration a structured-output request
expects from a composable source schema tree, and rebuilds source schemas
from previously obtained response schemas.
"""

__version__ = "0.1.0"

from .config import Config
from .models.source import SourceNode
from .models.target import ResponseFormat, SchemaType, TargetSchema
from .schema_gen.to_source import to_source_schema
from .schema_gen.to_target import response_schema_from_source, to_target_schema

__all__ = [
    "Config",
    "ResponseFormat",
    "SchemaType",
    "SourceNode",
    "TargetSchema",
    "response_schema_from_source",
    "to_source_schema",
    "to_target_schema",
]
