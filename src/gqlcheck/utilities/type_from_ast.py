from typing import Optional, cast

from ..language import ListTypeNode, NamedTypeNode, NonNullTypeNode, TypeNode
from ..type import GraphQLList, GraphQLNonNull, GraphQLNullableType, GraphQLSchema
from ..type.definition import GraphQLType

__all__ = ["type_from_ast"]


def type_from_ast(
    schema: GraphQLSchema, type_node: Optional[TypeNode]
) -> Optional[GraphQLType]:
    """Look up the type a type reference like ``[User!]`` stands for in the schema.

    The list and non-null modifiers are applied to the named type. If the schema
    has no type of that name, the result is None.
    """
    if isinstance(type_node, NamedTypeNode):
        return schema.get_type(type_node.name.value)
    if not isinstance(type_node, (ListTypeNode, NonNullTypeNode)):
        return None
    of_type = type_from_ast(schema, type_node.type)
    if of_type is None:
        return None
    if isinstance(type_node, ListTypeNode):
        return GraphQLList(of_type)
    return GraphQLNonNull(cast(GraphQLNullableType, of_type))
