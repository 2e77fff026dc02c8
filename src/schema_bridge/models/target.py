"""Models for the flat Gemini response schema format."""
from __future__ import annotations

from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import Field, field_validator

from .common import BasePydanticModel

JSON_MIME_TYPE = "application/json"


class SchemaType(str, Enum):
    """Type tags understood by the structured-output API."""
    OBJECT = "object"
    ARRAY = "array"
    STRING = "string"
    NUMBER = "number"
    INTEGER = "integer"
    BOOLEAN = "boolean"


_KNOWN_TYPE_TAGS = {member.value for member in SchemaType}


class TargetSchema(BasePydanticModel):
    """A node of a response schema.

    ``properties`` and ``required`` belong to ``object`` nodes, ``items`` to
    ``array`` nodes. Unknown wire keys (``format``, ``example``, ...) are
    dropped on input.
    """
    type: Optional[str] = None
    properties: Optional[Dict[str, TargetSchema]] = None
    required: Optional[List[str]] = None
    items: Optional[TargetSchema] = None
    enum: Optional[List[str]] = None
    nullable: Optional[bool] = None
    description: Optional[str] = None

    model_config = {"extra": "ignore"}

    @field_validator("type", mode="before")
    @classmethod
    def normalize_type(cls, v: Any) -> Any:
        """Match known tags case-insensitively ("STRING" -> "string"); keep others verbatim."""
        if isinstance(v, SchemaType):
            return v.value
        if isinstance(v, str) and v.lower() in _KNOWN_TYPE_TAGS:
            return v.lower()
        return v

    @field_validator("nullable")
    @classmethod
    def normalize_nullable(cls, v: Optional[bool]) -> Optional[bool]:
        # false and absent mean the same thing on the wire
        return True if v else None

    def to_payload(self) -> Dict[str, Any]:
        """JSON-ready dict with absent fields omitted."""
        return self.model_dump(mode="json", exclude_none=True)


class ResponseFormat(BasePydanticModel):
    """Response-format fragment of a generation config."""
    response_mime_type: str = Field(default=JSON_MIME_TYPE, alias="responseMimeType")
    response_schema: TargetSchema = Field(..., alias="responseSchema")

    def to_generation_config(self) -> Dict[str, Any]:
        """Camel-cased dict ready to merge into a request's ``generationConfig``."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


TargetSchema.model_rebuild()
