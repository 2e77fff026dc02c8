"""
Structural classification of source schema nodes.

Nodes are classified by their ``kind`` tag, never by probing behaviour, so
classification cannot fail: a missing or unknown tag is ``UNRECOGNIZED``.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional, Tuple


class SchemaKind(str, Enum):
    OBJECT = "object"
    ARRAY = "array"
    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    ENUM = "enum"
    LITERAL = "literal"
    OPTIONAL = "optional"
    NULLABLE = "nullable"
    DEFAULT = "default"
    UNRECOGNIZED = "unrecognized"


MODIFIER_KINDS = frozenset({SchemaKind.OPTIONAL, SchemaKind.NULLABLE, SchemaKind.DEFAULT})


def get_schema_kind(node: Any) -> SchemaKind:
    """Return the structural kind of ``node``.

    Accepts any object; objects that are not source nodes classify as
    ``SchemaKind.UNRECOGNIZED``.
    """
    tag = getattr(node, "kind", None)
    try:
        return SchemaKind(tag)
    except ValueError:
        return SchemaKind.UNRECOGNIZED


@dataclass(frozen=True)
class ModifierStack:
    """A node split into its modifier chain and the base node beneath it.

    Attributes:
        modifiers: Modifier kinds, outermost first.
        base: First node in the chain that is not a modifier.
        description: Outermost description found on the modifier chain, if any.
    """
    modifiers: Tuple[SchemaKind, ...]
    base: Any
    description: Optional[str] = None

    @property
    def nullable(self) -> bool:
        """Every modifier kind flattens to a nullable target node."""
        return bool(self.modifiers)

    @property
    def required(self) -> bool:
        """Only an outermost Optional lets the enclosing object omit the key.

        Nullable and Default keep the key required, even around an Optional.
        """
        return not self.modifiers or self.modifiers[0] is not SchemaKind.OPTIONAL

    @property
    def optional(self) -> bool:
        """The chain accepts a missing value (Optional or Default anywhere)."""
        return SchemaKind.OPTIONAL in self.modifiers or SchemaKind.DEFAULT in self.modifiers


def unwrap_modifiers(node: Any) -> ModifierStack:
    """Peel Optional/Nullable/Default wrappers off ``node``."""
    modifiers = []
    description = None
    current = node
    while True:
        kind = get_schema_kind(current)
        if kind not in MODIFIER_KINDS:
            break
        modifiers.append(kind)
        if not description:
            description = getattr(current, "description", None)
        current = current.inner
    return ModifierStack(modifiers=tuple(modifiers), base=current, description=description)


def is_optional(node: Any) -> bool:
    """Whether ``node`` accepts a missing value."""
    return unwrap_modifiers(node).optional
