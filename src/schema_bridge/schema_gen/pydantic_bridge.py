"""
Bridges between Python type annotations (including Pydantic models) and
source schema nodes.

``source_from_model`` lets callers author schemas as ordinary Pydantic models;
``validator_from_target`` goes the other way and builds a
``pydantic.TypeAdapter`` that validates data against a response schema.
"""
from __future__ import annotations

import enum
import types
from dataclasses import dataclass
from typing import Annotated, Any, Dict, Literal, Optional, Union, get_args, get_origin

import structlog
from pydantic import BaseModel, Field, TypeAdapter, create_model
from pydantic.fields import FieldInfo

from ..models.source import (
    ArrayNode,
    BooleanNode,
    EnumNode,
    LiteralNode,
    NumberNode,
    ObjectNode,
    SourceNodeBase,
    StringNode,
    UnrecognizedNode,
)
from ..models.target import TargetSchema
from .to_source import to_source_schema

logger = structlog.get_logger(__name__)

_SCALAR_TYPES = (str, int, float, bool)
_SEQUENCE_ORIGINS = (list, set, frozenset)


def _construct_name(tp: Any) -> str:
    return getattr(tp, "__name__", None) or repr(tp)


def source_from_annotation(tp: Any) -> SourceNodeBase:
    """Convert a Python type annotation into a source schema node.

    Args:
        tp: Annotation such as ``str``, ``list[int]``, ``Literal["a", "b"]``,
            ``int | None`` or a Pydantic model class.

    Returns:
        The matching node. Annotations without a dedicated node kind
        (other unions, dicts, ``Any``, arbitrary classes) become an
        ``UnrecognizedNode`` naming the construct.
    """
    origin = get_origin(tp)
    args = get_args(tp)

    if origin is Annotated:
        node = source_from_annotation(args[0])
        for meta in args[1:]:
            if isinstance(meta, FieldInfo) and meta.description:
                node = node.describe(meta.description)
        return node

    if tp is bool:
        return BooleanNode()
    if tp is str:
        return StringNode()
    if tp in (int, float):
        return NumberNode()

    if origin in _SEQUENCE_ORIGINS or (origin is tuple and len(args) == 2 and args[1] is Ellipsis):
        if args:
            return ArrayNode(element=source_from_annotation(args[0]))
        return ArrayNode(element=UnrecognizedNode(origin="any"))
    if tp in _SEQUENCE_ORIGINS:
        return ArrayNode(element=UnrecognizedNode(origin="any"))

    if origin is Literal:
        if len(args) == 1:
            return LiteralNode(value=args[0])
        if all(isinstance(arg, str) for arg in args):
            return EnumNode(values=list(args))
        return UnrecognizedNode(origin="union")

    if origin is Union or origin is types.UnionType:
        members = [arg for arg in args if arg is not type(None)]
        if len(members) == 1 and len(members) < len(args):
            return source_from_annotation(members[0]).nullable()
        return UnrecognizedNode(origin="union")

    if isinstance(tp, type) and issubclass(tp, enum.Enum):
        values = [member.value for member in tp]
        if all(isinstance(value, str) for value in values):
            return EnumNode(values=values)
        return UnrecognizedNode(origin=tp.__name__)

    if isinstance(tp, type) and issubclass(tp, BaseModel):
        return source_from_model(tp)

    if tp is dict or origin is dict:
        return UnrecognizedNode(origin="record")
    if tp is Any:
        return UnrecognizedNode(origin="any")

    logger.debug("No source node kind for annotation.", annotation=_construct_name(tp))
    return UnrecognizedNode(origin=_construct_name(tp))


def source_from_model(model: type[BaseModel]) -> ObjectNode:
    """Convert a Pydantic model class into an object node.

    Fields keep their declaration order and descriptions. A field that is not
    required becomes Optional, wrapped around a Default when it carries a
    scalar default.

    Raises:
        ValueError: If ``model`` is not a Pydantic model class.
    """
    if not (isinstance(model, type) and issubclass(model, BaseModel)):
        raise ValueError(f"{model!r} is not a Pydantic model")

    fields: Dict[str, SourceNodeBase] = {}
    for name, field in model.model_fields.items():
        node = source_from_annotation(field.annotation)
        if field.description:
            node = node.describe(field.description)
        if not field.is_required():
            if isinstance(field.default, _SCALAR_TYPES):
                node = node.with_default(field.default)
            node = node.optional()
        fields[field.alias or name] = node

    description = model.__doc__.strip() if model.__doc__ else None
    return ObjectNode(fields=fields, description=description or None)


@dataclass(frozen=True)
class _Omittable:
    """Marks an object field annotation whose key may be left out."""
    annotation: Any


def _unwrap(schema: Any) -> Any:
    return schema.annotation if isinstance(schema, _Omittable) else schema


def _usable_attribute(name: str) -> bool:
    # Wire names that clash with BaseModel are kept as aliases of a generated attribute.
    return (
        name.isidentifier()
        and not name.startswith(("_", "model_"))
        and not hasattr(BaseModel, name)
    )


class PydanticTypeBuilder:
    """``SchemaBuilder`` producing Python annotations that pydantic can validate.

    Objects become models created with ``pydantic.create_model``; their
    names are ``model_prefix`` plus a counter.
    """

    def __init__(self, model_prefix: str = "GeneratedModel") -> None:
        self.model_prefix = model_prefix
        self._model_count = 0

    def array(self, element: Any) -> Any:
        return list[_unwrap(element)]

    def object(self, fields: Dict[str, Any]) -> Any:
        definitions: Dict[str, Any] = {}
        taken = {name for name in fields if _usable_attribute(name)}
        for index, (name, schema) in enumerate(fields.items()):
            if isinstance(schema, _Omittable):
                annotation, default = schema.annotation, None
            else:
                annotation, default = schema, ...
            if name in taken:
                attr = name
            else:
                attr = f"field_{index}"
                while attr in taken:
                    attr = f"{attr}_"
                taken.add(attr)
            definitions[attr] = (annotation, Field(default, alias=name))
        self._model_count += 1
        return create_model(f"{self.model_prefix}{self._model_count}", **definitions)

    def string(self) -> Any:
        return str

    def number(self) -> Any:
        return float

    def boolean(self) -> Any:
        return bool

    def any(self) -> Any:
        return Any

    def optional(self, schema: Any) -> Any:
        return _Omittable(_unwrap(schema))

    def nullable(self, schema: Any) -> Any:
        if isinstance(schema, _Omittable):
            return _Omittable(Optional[schema.annotation])
        return Optional[schema]

    def describe(self, schema: Any, description: str) -> Any:
        if isinstance(schema, _Omittable):
            return _Omittable(Annotated[schema.annotation, Field(description=description)])
        return Annotated[schema, Field(description=description)]


def annotation_from_target(target: TargetSchema, model_prefix: str = "GeneratedModel") -> Any:
    """Convert a response schema into a Python annotation."""
    return _unwrap(to_source_schema(target, PydanticTypeBuilder(model_prefix)))


def validator_from_target(target: TargetSchema, model_prefix: str = "GeneratedModel") -> TypeAdapter:
    """Build a ``TypeAdapter`` that validates data against ``target``.

    Example:
        >>> adapter = validator_from_target(TargetSchema(type="array", items=TargetSchema(type="string")))
        >>> adapter.validate_python(["a", "b"])
        ['a', 'b']
    """
    return TypeAdapter(annotation_from_target(target, model_prefix))
