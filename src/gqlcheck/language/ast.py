"""Syntax tree of GraphQL documents

The tree covers executable documents and the schema definition language used by
:func:`~gqlcheck.utilities.build_schema`. Argument and default values are not
interpreted, so apart from strings they only keep the text they were written as.
"""

from enum import Enum
from typing import Any, Dict, Optional, Tuple, Type, Union

from .source import Source

__all__ = [
    "Location",
    "Node",
    "node_kinds",
    "NameNode",
    "DocumentNode",
    "DefinitionNode",
    "ExecutableDefinitionNode",
    "OperationDefinitionNode",
    "OperationType",
    "VariableDefinitionNode",
    "SelectionSetNode",
    "SelectionNode",
    "FieldNode",
    "ArgumentNode",
    "FragmentSpreadNode",
    "InlineFragmentNode",
    "FragmentDefinitionNode",
    "ValueNode",
    "StringValueNode",
    "DirectiveNode",
    "TypeNode",
    "NamedTypeNode",
    "ListTypeNode",
    "NonNullTypeNode",
    "TypeSystemDefinitionNode",
    "SchemaDefinitionNode",
    "OperationTypeDefinitionNode",
    "TypeDefinitionNode",
    "ScalarTypeDefinitionNode",
    "ObjectTypeDefinitionNode",
    "FieldDefinitionNode",
    "InputValueDefinitionNode",
    "InterfaceTypeDefinitionNode",
    "UnionTypeDefinitionNode",
    "EnumTypeDefinitionNode",
    "EnumValueDefinitionNode",
]


class Location:
    """The span of source text a node was parsed from.

    Compares equal to a ``(start, end)`` pair of character offsets.
    """

    __slots__ = "start", "end", "source"

    def __init__(self, start: int, end: int, source: Source) -> None:
        self.start = start
        self.end = end
        self.source = source

    def __repr__(self) -> str:
        return f"<Location {self.start}:{self.end}>"

    def __eq__(self, other: Any) -> bool:
        if isinstance(other, Location):
            other = other.start, other.end
        elif isinstance(other, list):
            other = tuple(other)
        return (self.start, self.end) == other

    def __ne__(self, other: Any) -> bool:
        return not self == other

    def __hash__(self) -> int:
        return hash((self.start, self.end))


class OperationType(Enum):
    QUERY = "query"
    MUTATION = "mutation"
    SUBSCRIPTION = "subscription"


node_kinds: Dict[str, Type["Node"]] = {}
"""Concrete node classes by their kind"""


class Node:
    """Base class of the syntax tree nodes.

    Concrete subclasses name their ``kind`` and the attributes holding child nodes
    as class keywords, for instance::

        class NamedTypeNode(TypeNode, kind="named_type", children=("name",)):
            __slots__ = ("name",)

    The ``children`` are walked by :func:`~gqlcheck.language.visit` in the given
    order. All attributes declared in ``__slots__`` along the hierarchy become the
    ``keys`` of the node, which are accepted as keyword arguments.
    """

    __slots__ = ("loc",)

    loc: Optional[Location]

    kind = "node"
    keys: Tuple[str, ...] = ("loc",)
    children: Tuple[str, ...] = ()

    def __init_subclass__(
        cls, kind: Optional[str] = None, children: Tuple[str, ...] = ()
    ) -> None:
        super().__init_subclass__()
        cls.keys = cls.keys + tuple(cls.__dict__.get("__slots__", ()))
        if kind:
            cls.kind = kind
            cls.children = children
            node_kinds[kind] = cls

    def __init__(self, **kwargs: Any) -> None:
        for key in self.keys:
            value = kwargs.pop(key, None)
            setattr(self, key, tuple(value) if isinstance(value, list) else value)
        if kwargs:
            raise TypeError(
                f"{self.__class__.__name__} has no attributes {', '.join(kwargs)}."
            )

    def __repr__(self) -> str:
        name = self.__class__.__name__
        return f"<{name} {self.loc.start}:{self.loc.end}>" if self.loc else f"<{name}>"

    def __eq__(self, other: Any) -> bool:
        return type(other) is type(self) and all(
            getattr(self, key) == getattr(other, key) for key in self.keys
        )

    def __hash__(self) -> int:
        return hash((self.kind, *(getattr(self, key) for key in self.keys)))


class NameNode(Node, kind="name"):
    __slots__ = ("value",)

    value: str


class DocumentNode(Node, kind="document", children=("definitions",)):
    __slots__ = ("definitions",)

    definitions: Tuple["DefinitionNode", ...]


class DefinitionNode(Node):
    __slots__ = ()


# Executable definitions


class ExecutableDefinitionNode(DefinitionNode):
    __slots__ = "name", "directives", "selection_set"

    name: Optional[NameNode]
    directives: Tuple["DirectiveNode", ...]
    selection_set: "SelectionSetNode"


class OperationDefinitionNode(
    ExecutableDefinitionNode,
    kind="operation_definition",
    children=("name", "variable_definitions", "directives", "selection_set"),
):
    __slots__ = "operation", "variable_definitions"

    operation: OperationType
    variable_definitions: Tuple["VariableDefinitionNode", ...]


class VariableDefinitionNode(
    Node,
    kind="variable_definition",
    children=("name", "type", "default_value", "directives"),
):
    """A ``$name: Type = default`` entry, the name is kept without the dollar."""

    __slots__ = "name", "type", "default_value", "directives"

    name: NameNode
    type: "TypeNode"
    default_value: Optional["ValueNode"]
    directives: Tuple["DirectiveNode", ...]


class SelectionSetNode(Node, kind="selection_set", children=("selections",)):
    __slots__ = ("selections",)

    selections: Tuple["SelectionNode", ...]


class SelectionNode(Node):
    __slots__ = ("directives",)

    directives: Tuple["DirectiveNode", ...]


class FieldNode(
    SelectionNode,
    kind="field",
    children=("alias", "name", "arguments", "directives", "selection_set"),
):
    __slots__ = "alias", "name", "arguments", "selection_set"

    alias: Optional[NameNode]
    name: NameNode
    arguments: Tuple["ArgumentNode", ...]
    selection_set: Optional[SelectionSetNode]


class ArgumentNode(Node, kind="argument", children=("name", "value")):
    __slots__ = "name", "value"

    name: NameNode
    value: "ValueNode"


class FragmentSpreadNode(
    SelectionNode, kind="fragment_spread", children=("name", "directives")
):
    __slots__ = ("name",)

    name: NameNode


class InlineFragmentNode(
    SelectionNode,
    kind="inline_fragment",
    children=("type_condition", "directives", "selection_set"),
):
    __slots__ = "type_condition", "selection_set"

    type_condition: Optional["NamedTypeNode"]
    selection_set: SelectionSetNode


class FragmentDefinitionNode(
    ExecutableDefinitionNode,
    kind="fragment_definition",
    children=("name", "type_condition", "directives", "selection_set"),
):
    __slots__ = ("type_condition",)

    name: NameNode
    type_condition: "NamedTypeNode"


# Values


class ValueNode(Node, kind="value"):
    """An argument or default value, given as the text it was written as."""

    __slots__ = ("text",)

    text: str


class StringValueNode(ValueNode, kind="string_value"):
    __slots__ = ("value",)

    value: str


class DirectiveNode(Node, kind="directive", children=("name", "arguments")):
    __slots__ = "name", "arguments"

    name: NameNode
    arguments: Tuple[ArgumentNode, ...]


# Type references


class TypeNode(Node):
    __slots__ = ()


class NamedTypeNode(TypeNode, kind="named_type", children=("name",)):
    __slots__ = ("name",)

    name: NameNode


class ListTypeNode(TypeNode, kind="list_type", children=("type",)):
    __slots__ = ("type",)

    type: TypeNode


class NonNullTypeNode(TypeNode, kind="non_null_type", children=("type",)):
    __slots__ = ("type",)

    type: Union[NamedTypeNode, ListTypeNode]


# Type system definitions


class TypeSystemDefinitionNode(DefinitionNode):
    __slots__ = ()


class SchemaDefinitionNode(
    TypeSystemDefinitionNode,
    kind="schema_definition",
    children=("directives", "operation_types"),
):
    __slots__ = "directives", "operation_types"

    directives: Tuple[DirectiveNode, ...]
    operation_types: Tuple["OperationTypeDefinitionNode", ...]


class OperationTypeDefinitionNode(
    Node, kind="operation_type_definition", children=("type",)
):
    __slots__ = "operation", "type"

    operation: OperationType
    type: NamedTypeNode


class TypeDefinitionNode(TypeSystemDefinitionNode):
    __slots__ = "description", "name", "directives"

    description: Optional[StringValueNode]
    name: NameNode
    directives: Tuple[DirectiveNode, ...]


class ScalarTypeDefinitionNode(
    TypeDefinitionNode,
    kind="scalar_type_definition",
    children=("description", "name", "directives"),
):
    __slots__ = ()


class ObjectTypeDefinitionNode(
    TypeDefinitionNode,
    kind="object_type_definition",
    children=("description", "name", "interfaces", "directives", "fields"),
):
    __slots__ = "interfaces", "fields"

    interfaces: Tuple[NamedTypeNode, ...]
    fields: Tuple["FieldDefinitionNode", ...]


class FieldDefinitionNode(
    Node,
    kind="field_definition",
    children=("description", "name", "arguments", "type", "directives"),
):
    __slots__ = "description", "name", "arguments", "type", "directives"

    description: Optional[StringValueNode]
    name: NameNode
    arguments: Tuple["InputValueDefinitionNode", ...]
    type: TypeNode
    directives: Tuple[DirectiveNode, ...]


class InputValueDefinitionNode(
    Node,
    kind="input_value_definition",
    children=("description", "name", "type", "default_value", "directives"),
):
    __slots__ = "description", "name", "type", "default_value", "directives"

    description: Optional[StringValueNode]
    name: NameNode
    type: TypeNode
    default_value: Optional[ValueNode]
    directives: Tuple[DirectiveNode, ...]


class InterfaceTypeDefinitionNode(
    TypeDefinitionNode,
    kind="interface_type_definition",
    children=("description", "name", "directives", "fields"),
):
    __slots__ = ("fields",)

    fields: Tuple[FieldDefinitionNode, ...]


class UnionTypeDefinitionNode(
    TypeDefinitionNode,
    kind="union_type_definition",
    children=("description", "name", "directives", "types"),
):
    __slots__ = ("types",)

    types: Tuple[NamedTypeNode, ...]


class EnumTypeDefinitionNode(
    TypeDefinitionNode,
    kind="enum_type_definition",
    children=("description", "name", "directives", "values"),
):
    __slots__ = ("values",)

    values: Tuple["EnumValueDefinitionNode", ...]


class EnumValueDefinitionNode(
    Node,
    kind="enum_value_definition",
    children=("description", "name", "directives"),
):
    __slots__ = "description", "name", "directives"

    description: Optional[StringValueNode]
    name: NameNode
    directives: Tuple[DirectiveNode, ...]
