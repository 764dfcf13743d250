from typing import Any, Callable, List, Optional, TypeVar, Union, cast

from ..language import (
    FieldNode,
    FragmentDefinitionNode,
    InlineFragmentNode,
    Node,
    OperationDefinitionNode,
    SelectionSetNode,
    Visitor,
)
from ..type import (
    GraphQLCompositeType,
    GraphQLField,
    GraphQLOutputType,
    GraphQLSchema,
    GraphQLType,
    SchemaMetaFieldDef,
    TypeMetaFieldDef,
    TypeNameMetaFieldDef,
    get_named_type,
    is_composite_type,
    is_interface_type,
    is_object_type,
    is_output_type,
)
from .type_from_ast import type_from_ast

__all__ = ["TypeInfo", "TypeInfoVisitor", "get_field_def"]


GetFieldDefType = Callable[
    [GraphQLSchema, GraphQLType, FieldNode], Optional[GraphQLField]
]

T = TypeVar("T")


def _top(stack: List[Optional[T]]) -> Optional[T]:
    return stack[-1] if stack else None


class TypeInfo:
    """Where a walk through a document currently is in terms of the schema.

    The visitor that walks the document calls :meth:`enter` and :meth:`leave` for
    every node, see :class:`TypeInfoVisitor`. In between, the type expected at the
    current node, the composite type the selections belong to, and the definition of
    the current field can be asked for. Each of them is None where the document
    does not fit the schema.
    """

    def __init__(
        self,
        schema: GraphQLSchema,
        get_field_def_fn: Optional[GetFieldDefType] = None,
        initial_type: Optional[GraphQLType] = None,
    ) -> None:
        """Start tracking types in the given schema.

        With an initial type the walk can start at a selection set somewhere inside
        a document instead of at the document itself.
        """
        self._schema = schema
        self._get_field_def = get_field_def_fn or get_field_def
        self._types: List[Optional[GraphQLOutputType]] = []
        self._parent_types: List[Optional[GraphQLCompositeType]] = []
        self._field_defs: List[Optional[GraphQLField]] = []
        if is_composite_type(initial_type):
            self._parent_types.append(cast(GraphQLCompositeType, initial_type))
        if is_output_type(initial_type):
            self._types.append(cast(GraphQLOutputType, initial_type))

    @property
    def schema(self) -> GraphQLSchema:
        return self._schema

    def get_type(self) -> Optional[GraphQLOutputType]:
        return _top(self._types)

    def get_parent_type(self) -> Optional[GraphQLCompositeType]:
        return _top(self._parent_types)

    def get_field_def(self) -> Optional[GraphQLField]:
        return _top(self._field_defs)

    def enter(self, node: Node) -> None:
        enter = getattr(self, f"enter_{node.kind}", None)
        if enter:
            enter(node)

    def leave(self, node: Node) -> None:
        leave = getattr(self, f"leave_{node.kind}", None)
        if leave:
            leave()

    def _push_type(self, type_: Optional[GraphQLType]) -> None:
        self._types.append(
            cast(GraphQLOutputType, type_) if is_output_type(type_) else None
        )

    def enter_operation_definition(self, node: OperationDefinitionNode) -> None:
        self._push_type(self._schema.get_root_type(node.operation))

    def enter_fragment_definition(
        self, node: Union[FragmentDefinitionNode, InlineFragmentNode]
    ) -> None:
        condition = node.type_condition
        if condition:
            self._push_type(type_from_ast(self._schema, condition))
        else:
            self._push_type(get_named_type(self.get_type()))

    enter_inline_fragment = enter_fragment_definition

    def enter_selection_set(self, _node: SelectionSetNode) -> None:
        named_type = get_named_type(self.get_type())
        self._parent_types.append(
            cast(GraphQLCompositeType, named_type)
            if is_composite_type(named_type)
            else None
        )

    def enter_field(self, node: FieldNode) -> None:
        parent_type = self.get_parent_type()
        field_def = (
            self._get_field_def(self._schema, parent_type, node)
            if parent_type
            else None
        )
        self._field_defs.append(field_def)
        self._push_type(field_def.type if field_def else None)

    def leave_operation_definition(self) -> None:
        self._types.pop()

    leave_fragment_definition = leave_operation_definition
    leave_inline_fragment = leave_operation_definition

    def leave_selection_set(self) -> None:
        self._parent_types.pop()

    def leave_field(self) -> None:
        self._field_defs.pop()
        self._types.pop()


def get_field_def(
    schema: GraphQLSchema, parent_type: GraphQLType, field_node: FieldNode
) -> Optional[GraphQLField]:
    """Look up the definition of the selected field on the parent type.

    Besides object types, the parent can be an interface or a union, since this is
    about the document and not about actual values. Unions have no fields except for
    ``__typename``, which every composite type has. The ``__schema`` and ``__type``
    fields only exist on the query root type.
    """
    name = field_node.name.value
    if name == "__typename":
        return TypeNameMetaFieldDef if is_composite_type(parent_type) else None
    if parent_type is schema.query_type:
        if name == "__schema":
            return SchemaMetaFieldDef
        if name == "__type":
            return TypeMetaFieldDef
    if is_object_type(parent_type) or is_interface_type(parent_type):
        return cast(Any, parent_type).fields.get(name)
    return None


class TypeInfoVisitor(Visitor):
    """Keeps a TypeInfo up to date while passing the nodes on to another visitor.

    If the other visitor skips a node or breaks off, its ``leave`` method is not
    called, so the TypeInfo leaves the node right away.
    """

    def __init__(self, type_info: TypeInfo, visitor: Visitor):
        self.type_info = type_info
        self.visitor = visitor

    def enter(self, node: Node, *args: Any) -> Any:
        self.type_info.enter(node)
        fn = self.visitor.get_visit_fn(node.kind)
        result = fn(node, *args) if fn else None
        if result is not None:
            self.type_info.leave(node)
        return result

    def leave(self, node: Node, *args: Any) -> Any:
        fn = self.visitor.get_visit_fn(node.kind, is_leaving=True)
        result = fn(node, *args) if fn else None
        self.type_info.leave(node)
        return result
