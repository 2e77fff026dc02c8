"""Loading source and response schema documents from JSON files."""
import json
from pathlib import Path
from typing import Any, Union

import structlog
from pydantic import ValidationError

from ..exceptions import SchemaDocumentError
from ..models.source import SourceNodeBase, parse_source_node
from ..models.target import TargetSchema

logger = structlog.get_logger(__name__)


def _read_json(path: Union[str, Path]) -> Any:
    try:
        with open(path, encoding="utf-8") as f:
            return json.load(f)
    except OSError as e:
        raise SchemaDocumentError("Cannot read schema document", path, str(e)) from e
    except json.JSONDecodeError as e:
        raise SchemaDocumentError("Schema document is not valid JSON", path, str(e)) from e


def load_source_document(path: Union[str, Path]) -> SourceNodeBase:
    """Load a source schema tree serialized as JSON (as written by ``model_dump``).

    Raises:
        SchemaDocumentError: If the file is unreadable, not JSON, or not a node tree.
    """
    data = _read_json(path)
    try:
        node = parse_source_node(data)
    except ValidationError as e:
        raise SchemaDocumentError("Invalid source schema document", path, str(e)) from e
    logger.debug("Loaded source schema document.", path=str(path), kind=node.kind)
    return node


def load_target_document(path: Union[str, Path]) -> TargetSchema:
    """Load a response schema from JSON.

    Either a bare schema or a generation-config fragment carrying it under
    ``responseSchema`` is accepted.

    Raises:
        SchemaDocumentError: If the file is unreadable, not JSON, or not a schema.
    """
    data = _read_json(path)
    if isinstance(data, dict) and "responseSchema" in data:
        data = data["responseSchema"]
    if not isinstance(data, dict):
        raise SchemaDocumentError("Invalid response schema document", path, "expected a JSON object")
    try:
        target = TargetSchema.model_validate(data)
    except ValidationError as e:
        raise SchemaDocumentError("Invalid response schema document", path, str(e)) from e
    logger.debug("Loaded response schema document.", path=str(path), schema_type=target.type)
    return target
