"""
Unit tests for converting source schema nodes to response schemas.
"""
from typing import Any, Dict

import pytest  # type: ignore[import-not-found]

from schema_bridge.models.source import (
    ArrayNode,
    BooleanNode,
    EnumNode,
    LiteralNode,
    NumberNode,
    ObjectNode,
    StringNode,
    UnrecognizedNode,
)
from schema_bridge.models.target import SchemaType, TargetSchema
from schema_bridge.schema_gen.discriminator import unwrap_modifiers
from schema_bridge.schema_gen.to_target import (
    decorate_target,
    response_schema_from_source,
    to_target_schema,
)

# --- Leaves and containers ---

@pytest.mark.parametrize("node, expected_payload", [
    (StringNode(), {"type": "string"}),
    (NumberNode(), {"type": "number"}),
    (BooleanNode(), {"type": "boolean"}),
    (EnumNode(values=["low", "high"]), {"type": "string", "enum": ["low", "high"]}),
    (LiteralNode(value="x"), {"type": "string", "enum": ["x"]}),
    (LiteralNode(value=5), {"type": "string", "enum": ["5"]}),
    (LiteralNode(value=True), {"type": "string", "enum": ["true"]}),
    (ArrayNode(element=StringNode()), {"type": "array", "items": {"type": "string"}}),
    (StringNode().optional(), {"type": "string", "nullable": True}),
    (StringNode().nullable(), {"type": "string", "nullable": True}),
    (StringNode().with_default("x"), {"type": "string", "nullable": True}),
    (StringNode().describe("A name"), {"type": "string", "description": "A name"}),
])
def test_to_target_schema_payloads(node: Any, expected_payload: Dict[str, Any]) -> None:
    assert to_target_schema(node).to_payload() == expected_payload


def test_array_of_strings() -> None:
    target = to_target_schema(ArrayNode(element=StringNode()))
    assert target.type == SchemaType.ARRAY
    assert target.items is not None
    assert target.items.type == SchemaType.STRING


def test_empty_object_omits_required() -> None:
    target = to_target_schema(ObjectNode(fields={}))
    assert target.properties == {}
    assert target.required is None
    assert target.to_payload() == {"type": "object", "properties": {}}


def test_object_required_follows_declaration_order() -> None:
    node = ObjectNode(fields={
        "zeta": StringNode(),
        "alpha": NumberNode(),
        "mid": BooleanNode().optional(),
        "omega": ArrayNode(element=StringNode()),
    })
    target = to_target_schema(node)

    assert list(target.properties) == ["zeta", "alpha", "mid", "omega"]
    assert target.required == ["zeta", "alpha", "omega"]
    assert set(target.required) <= set(target.properties)


def test_object_with_only_optional_fields_has_no_required() -> None:
    node = ObjectNode(fields={"a": StringNode().optional(), "b": NumberNode().optional()})
    payload = to_target_schema(node).to_payload()
    assert "required" not in payload
    assert payload["properties"] == {
        "a": {"type": "string", "nullable": True},
        "b": {"type": "number", "nullable": True},
    }


def test_only_outermost_optional_removes_field_from_required() -> None:
    """Nullable and Default make a field nullable but keep it required."""
    node = ObjectNode(fields={
        "plain": StringNode(),
        "nullable": StringNode().nullable(),
        "defaulted": StringNode().with_default("x"),
        "optional": StringNode().optional(),
        "nullable_optional": StringNode().optional().nullable(),
        "optional_nullable": StringNode().nullable().optional(),
    })
    target = to_target_schema(node)

    assert target.required == ["plain", "nullable", "defaulted", "nullable_optional"]
    assert target.properties["plain"].nullable is None
    for name in ["nullable", "defaulted", "optional", "nullable_optional", "optional_nullable"]:
        assert target.properties[name].nullable is True


def test_unrecognized_becomes_permissive_object() -> None:
    target = to_target_schema(UnrecognizedNode(origin="union"))
    assert target.to_payload() == {"type": "object", "nullable": True}
    assert target.properties is None


def test_foreign_object_becomes_permissive_object() -> None:
    assert to_target_schema(object()).to_payload() == {"type": "object", "nullable": True}


def test_unrecognized_keeps_description() -> None:
    target = to_target_schema(UnrecognizedNode(origin="record", description="Free-form metadata"))
    assert target.to_payload() == {"type": "object", "nullable": True, "description": "Free-form metadata"}


def test_wrapper_description_overrides_inner() -> None:
    node = StringNode().describe("inner").optional().describe("outer")
    assert to_target_schema(node).to_payload() == {"type": "string", "nullable": True, "description": "outer"}


def test_inner_description_survives_undescribed_wrapper() -> None:
    node = StringNode().describe("inner").nullable()
    assert to_target_schema(node).to_payload() == {"type": "string", "nullable": True, "description": "inner"}


def test_optional_object_only_marks_its_own_level_nullable() -> None:
    node = ObjectNode(fields={"id": NumberNode()}).optional()
    payload = to_target_schema(node).to_payload()
    assert payload == {
        "type": "object",
        "properties": {"id": {"type": "number"}},
        "required": ["id"],
        "nullable": True,
    }


def test_nested_structure() -> None:
    node = ObjectNode(
        fields={
            "title": StringNode().describe("Recipe title"),
            "steps": ArrayNode(element=ObjectNode(fields={
                "order": NumberNode(),
                "text": StringNode(),
                "note": StringNode().optional(),
            })),
            "difficulty": EnumNode(values=["easy", "hard"]).with_default("easy"),
        },
        description="A recipe",
    )

    assert to_target_schema(node).to_payload() == {
        "type": "object",
        "description": "A recipe",
        "properties": {
            "title": {"type": "string", "description": "Recipe title"},
            "steps": {
                "type": "array",
                "items": {
                    "type": "object",
                    "properties": {
                        "order": {"type": "number"},
                        "text": {"type": "string"},
                        "note": {"type": "string", "nullable": True},
                    },
                    "required": ["order", "text"],
                },
            },
            "difficulty": {"type": "string", "enum": ["easy", "hard"], "nullable": True},
        },
        "required": ["title", "steps", "difficulty"],
    }


def test_output_does_not_alias_input() -> None:
    node = EnumNode(values=["a", "b"])
    target = to_target_schema(node)
    target.enum.append("c")
    assert node.values == ["a", "b"]


# --- Decoration ---

def test_decorate_target_keeps_nullable_already_set() -> None:
    target = decorate_target(TargetSchema(type="object", nullable=True), StringNode())
    assert target.nullable is True


def test_decorate_target_fills_nullable_from_optionality() -> None:
    assert decorate_target(TargetSchema(type="string"), StringNode().optional()).nullable is True
    assert decorate_target(TargetSchema(type="string"), StringNode()).nullable is None


def test_decorate_target_copies_description() -> None:
    target = decorate_target(TargetSchema(type="string"), StringNode().describe("d"))
    assert target.description == "d"


# --- Response format ---

def test_response_schema_from_source() -> None:
    response_format = response_schema_from_source(ArrayNode(element=NumberNode()))
    assert response_format.to_generation_config() == {
        "responseMimeType": "application/json",
        "responseSchema": {"type": "array", "items": {"type": "number"}},
    }


def test_response_schema_from_source_custom_mime_type() -> None:
    response_format = response_schema_from_source(EnumNode(values=["a"]), mime_type="text/x.enum")
    assert response_format.response_mime_type == "text/x.enum"


def test_empty_wrapper_description_keeps_inner_wrapper_description() -> None:
    node = StringNode().nullable().describe("mid").optional().describe("")
    assert to_target_schema(node).to_payload() == {"type": "string", "nullable": True, "description": "mid"}


@pytest.mark.parametrize("field_node", [
    StringNode(),
    StringNode().optional(),
    StringNode().nullable(),
    StringNode().with_default("x"),
    StringNode().optional().nullable(),
    StringNode().nullable().optional(),
    StringNode().optional().with_default("x"),
])
def test_required_matches_modifier_stack(field_node: Any) -> None:
    target = to_target_schema(ObjectNode(fields={"f": field_node}))
    expected = ["f"] if unwrap_modifiers(field_node).required else None
    assert target.required == expected
