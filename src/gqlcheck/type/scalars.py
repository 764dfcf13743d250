from typing import Any, Dict

from .definition import GraphQLNamedType, GraphQLScalarType

__all__ = [
    "is_specified_scalar_type",
    "specified_scalar_types",
    "GraphQLInt",
    "GraphQLFloat",
    "GraphQLString",
    "GraphQLBoolean",
    "GraphQLID",
]

# The built-in scalars exist in every schema without being defined.

GraphQLString = GraphQLScalarType("String", "Text as a sequence of UTF-8 characters.")
GraphQLInt = GraphQLScalarType("Int", "A signed whole number with 32 bits.")
GraphQLFloat = GraphQLScalarType("Float", "A signed double-precision number.")
GraphQLBoolean = GraphQLScalarType("Boolean", "Either `true` or `false`.")
GraphQLID = GraphQLScalarType(
    "ID", "A unique identifier, serialized like a String but not meant to be read."
)

specified_scalar_types: Dict[str, GraphQLNamedType] = {
    scalar.name: scalar
    for scalar in (GraphQLString, GraphQLInt, GraphQLFloat, GraphQLBoolean, GraphQLID)
}


def is_specified_scalar_type(type_: Any) -> bool:
    """Check whether the type is one of the built-in scalars."""
    return any(type_ is scalar for scalar in specified_scalar_types.values())
