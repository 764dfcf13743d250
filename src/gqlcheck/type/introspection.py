from typing import Any, Mapping

from .definition import (
    GraphQLArgument,
    GraphQLEnumType,
    GraphQLField,
    GraphQLList,
    GraphQLNamedType,
    GraphQLNonNull,
    GraphQLObjectType,
)
from .scalars import GraphQLBoolean, GraphQLString

__all__ = [
    "SchemaMetaFieldDef",
    "TypeMetaFieldDef",
    "TypeNameMetaFieldDef",
    "introspection_types",
    "is_introspection_type",
    "is_meta_field_name",
    "meta_field_names",
]


class IntrospectionObjectType(GraphQLObjectType):
    """Object type of the introspection system, its name starts with ``__``"""

    reserved_name = True


class IntrospectionEnumType(GraphQLEnumType):
    """Enum type of the introspection system, its name starts with ``__``"""

    reserved_name = True


def _non_null_list(type_: GraphQLNamedType) -> GraphQLNonNull:
    return GraphQLNonNull(GraphQLList(GraphQLNonNull(type_)))


def _list(type_: GraphQLNamedType) -> GraphQLList:
    return GraphQLList(GraphQLNonNull(type_))


_include_deprecated = {
    "includeDeprecated": GraphQLArgument(GraphQLBoolean, "Include deprecated items.")
}

_Schema: GraphQLObjectType = IntrospectionObjectType(
    "__Schema",
    lambda: {
        "description": GraphQLString,
        "types": GraphQLField(
            _non_null_list(_Type), description="All types of the schema."
        ),
        "queryType": GraphQLNonNull(_Type),
        "mutationType": _Type,
        "subscriptionType": _Type,
        "directives": _non_null_list(_Directive),
    },
    description="The types and directives a GraphQL server supports,"
    " with the entry points of its operations.",
)

_Directive: GraphQLObjectType = IntrospectionObjectType(
    "__Directive",
    lambda: {
        "name": GraphQLNonNull(GraphQLString),
        "description": GraphQLString,
        "isRepeatable": GraphQLNonNull(GraphQLBoolean),
        "locations": _non_null_list(_DirectiveLocation),
        "args": GraphQLField(_non_null_list(_InputValue), _include_deprecated),
    },
    description="A directive with the places it can be used at.",
)

_DirectiveLocation = IntrospectionEnumType(
    "__DirectiveLocation",
    [
        "QUERY",
        "MUTATION",
        "SUBSCRIPTION",
        "FIELD",
        "FRAGMENT_DEFINITION",
        "FRAGMENT_SPREAD",
        "INLINE_FRAGMENT",
        "VARIABLE_DEFINITION",
        "SCHEMA",
        "SCALAR",
        "OBJECT",
        "FIELD_DEFINITION",
        "ARGUMENT_DEFINITION",
        "INTERFACE",
        "UNION",
        "ENUM",
        "ENUM_VALUE",
        "INPUT_OBJECT",
        "INPUT_FIELD_DEFINITION",
    ],
    description="The places in a document where a directive can be used.",
)

_Type: GraphQLObjectType = IntrospectionObjectType(
    "__Type",
    lambda: {
        "kind": GraphQLNonNull(_TypeKind),
        "name": GraphQLString,
        "description": GraphQLString,
        "specifiedByURL": GraphQLString,
        "fields": GraphQLField(_list(_Field), _include_deprecated),
        "interfaces": _list(_Type),
        "possibleTypes": _list(_Type),
        "enumValues": GraphQLField(_list(_EnumValue), _include_deprecated),
        "inputFields": GraphQLField(_list(_InputValue), _include_deprecated),
        "ofType": _Type,
        "isOneOf": GraphQLBoolean,
    },
    description="A named type or a list or non-null modifier of another type.",
)

_Field: GraphQLObjectType = IntrospectionObjectType(
    "__Field",
    lambda: {
        "name": GraphQLNonNull(GraphQLString),
        "description": GraphQLString,
        "args": GraphQLField(_non_null_list(_InputValue), _include_deprecated),
        "type": GraphQLNonNull(_Type),
        "isDeprecated": GraphQLNonNull(GraphQLBoolean),
        "deprecationReason": GraphQLString,
    },
    description="A field of an object or interface type.",
)

_InputValue: GraphQLObjectType = IntrospectionObjectType(
    "__InputValue",
    lambda: {
        "name": GraphQLNonNull(GraphQLString),
        "description": GraphQLString,
        "type": GraphQLNonNull(_Type),
        "defaultValue": GraphQLString,
        "isDeprecated": GraphQLNonNull(GraphQLBoolean),
        "deprecationReason": GraphQLString,
    },
    description="An argument of a field or directive, or an input field.",
)

_EnumValue: GraphQLObjectType = IntrospectionObjectType(
    "__EnumValue",
    {
        "name": GraphQLNonNull(GraphQLString),
        "description": GraphQLString,
        "isDeprecated": GraphQLNonNull(GraphQLBoolean),
        "deprecationReason": GraphQLString,
    },
    description="One of the values of an enum type.",
)

_TypeKind = IntrospectionEnumType(
    "__TypeKind",
    [
        "SCALAR",
        "OBJECT",
        "INTERFACE",
        "UNION",
        "ENUM",
        "INPUT_OBJECT",
        "LIST",
        "NON_NULL",
    ],
    description="The kinds of types that ``__Type`` can describe.",
)


# The names of the introspection types start with two underscores, so they are
# easiest to get at through this mapping.
introspection_types: Mapping[str, GraphQLNamedType] = {
    type_.name: type_
    for type_ in (
        _Schema,
        _Directive,
        _DirectiveLocation,
        _Type,
        _Field,
        _InputValue,
        _EnumValue,
        _TypeKind,
    )
}


def is_introspection_type(type_: GraphQLNamedType) -> bool:
    return type_.name in introspection_types


# Meta fields are not listed in the field maps of the types they can be selected
# on. The ``__typename`` field exists on every composite type, while ``__schema``
# and ``__type`` only exist on the query root type.

SchemaMetaFieldDef = GraphQLField(
    GraphQLNonNull(_Schema),
    description="Access the current type schema of this server.",
)

TypeMetaFieldDef = GraphQLField(
    _Type,
    args={"name": GraphQLNonNull(GraphQLString)},
    description="Request the type information of a single type.",
)

TypeNameMetaFieldDef = GraphQLField(
    GraphQLNonNull(GraphQLString),
    description="The name of the current Object type at runtime.",
)

meta_field_names = ("__schema", "__type", "__typename")


def is_meta_field_name(name: Any) -> bool:
    """Check whether the name is one of the introspection meta fields."""
    return name in meta_field_names
