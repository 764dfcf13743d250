from functools import partial
from typing import Collection, Dict, List, Optional, Union, cast

from ..language import (
    DocumentNode,
    EnumTypeDefinitionNode,
    FieldDefinitionNode,
    InputValueDefinitionNode,
    InterfaceTypeDefinitionNode,
    ListTypeNode,
    NamedTypeNode,
    NonNullTypeNode,
    ObjectTypeDefinitionNode,
    OperationType,
    ScalarTypeDefinitionNode,
    SchemaDefinitionNode,
    Source,
    StringValueNode,
    TypeDefinitionNode,
    TypeNode,
    UnionTypeDefinitionNode,
    parse,
)
from ..type import (
    GraphQLArgument,
    GraphQLArgumentMap,
    GraphQLEnumType,
    GraphQLField,
    GraphQLFieldMap,
    GraphQLInterfaceType,
    GraphQLList,
    GraphQLNamedType,
    GraphQLNonNull,
    GraphQLNullableType,
    GraphQLObjectType,
    GraphQLOutputType,
    GraphQLScalarType,
    GraphQLSchema,
    GraphQLType,
    GraphQLUnionType,
    specified_scalar_types,
)

__all__ = ["build_ast_schema", "build_schema"]

DEFAULT_DEPRECATION_REASON = "No longer supported"


def build_ast_schema(document_ast: DocumentNode) -> GraphQLSchema:
    """Build a GraphQL Schema from a given AST.

    This takes the ast of a schema document produced by the parse function in
    src/language/parser.py.

    If no schema definition is provided, then it will look for types named Query,
    Mutation and Subscription.

    Type references are resolved lazily, so types may refer to each other in any
    order. A reference to a type that is neither defined in the document nor one of
    the specified scalars raises a TypeError when the schema is created.
    """
    if not isinstance(document_ast, DocumentNode):
        raise TypeError("Must provide valid Document AST.")

    schema_def: Optional[SchemaDefinitionNode] = None
    type_defs: List[TypeDefinitionNode] = []
    for def_ in document_ast.definitions:
        if isinstance(def_, SchemaDefinitionNode):
            schema_def = def_
        elif isinstance(def_, TypeDefinitionNode):
            type_defs.append(def_)

    builder = SchemaBuilder()
    type_map = builder.type_map
    for type_node in type_defs:
        name = type_node.name.value
        if name in type_map:
            raise TypeError(f"Type '{name}' was defined more than once.")
        type_map[name] = specified_scalar_types.get(name) or builder.build_type(
            type_node
        )

    if schema_def:
        operation_types = builder.get_operation_types(schema_def)
        query = operation_types.get(OperationType.QUERY)
        mutation = operation_types.get(OperationType.MUTATION)
        subscription = operation_types.get(OperationType.SUBSCRIPTION)
    else:
        query = type_map.get("Query")
        mutation = type_map.get("Mutation")
        subscription = type_map.get("Subscription")

    return GraphQLSchema(
        query=cast(GraphQLObjectType, query),
        mutation=cast(GraphQLObjectType, mutation),
        subscription=cast(GraphQLObjectType, subscription),
        types=list(type_map.values()),
        ast_node=schema_def,
    )


def build_schema(
    source: Union[str, Source], no_location: bool = False
) -> GraphQLSchema:
    """Build a GraphQLSchema directly from a source document."""
    return build_ast_schema(parse(source, no_location=no_location))


class SchemaBuilder:
    """Build GraphQL types from type definition nodes."""

    type_map: Dict[str, GraphQLNamedType]

    def __init__(self) -> None:
        self.type_map = {}

    def get_operation_types(
        self, node: SchemaDefinitionNode
    ) -> Dict[OperationType, GraphQLNamedType]:
        return {
            operation_type.operation: self.get_named_type(operation_type.type)
            for operation_type in node.operation_types or []
        }

    def get_named_type(self, node: NamedTypeNode) -> GraphQLNamedType:
        name = node.name.value
        type_ = specified_scalar_types.get(name) or self.type_map.get(name)

        if not type_:
            raise TypeError(f"Unknown type: '{name}'.")
        return type_

    def get_wrapped_type(self, node: TypeNode) -> GraphQLType:
        if isinstance(node, ListTypeNode):
            return GraphQLList(self.get_wrapped_type(node.type))
        if isinstance(node, NonNullTypeNode):
            return GraphQLNonNull(
                cast(GraphQLNullableType, self.get_wrapped_type(node.type))
            )
        return self.get_named_type(cast(NamedTypeNode, node))

    def build_field_map(
        self,
        node: Union[InterfaceTypeDefinitionNode, ObjectTypeDefinitionNode],
    ) -> GraphQLFieldMap:
        field_map: GraphQLFieldMap = {}
        for field in node.fields or []:
            field_map[field.name.value] = GraphQLField(
                type_=cast(GraphQLOutputType, self.get_wrapped_type(field.type)),
                description=get_description(field),
                args=self.build_argument_map(field.arguments),
                deprecation_reason=get_deprecation_reason(field),
                ast_node=field,
            )
        return field_map

    def build_argument_map(
        self,
        args: Optional[Collection[InputValueDefinitionNode]],
    ) -> GraphQLArgumentMap:
        arg_map: GraphQLArgumentMap = {}
        for arg in args or []:
            arg_map[arg.name.value] = GraphQLArgument(
                type_=self.get_wrapped_type(arg.type),
                description=get_description(arg),
                ast_node=arg,
            )
        return arg_map

    def build_interfaces(
        self, node: ObjectTypeDefinitionNode
    ) -> List[GraphQLInterfaceType]:
        return [
            cast(GraphQLInterfaceType, self.get_named_type(type_))
            for type_ in node.interfaces or []
        ]

    def build_union_types(
        self, node: UnionTypeDefinitionNode
    ) -> List[GraphQLObjectType]:
        return [
            cast(GraphQLObjectType, self.get_named_type(type_))
            for type_ in node.types or []
        ]

    def build_object_type(
        self, ast_node: ObjectTypeDefinitionNode
    ) -> GraphQLObjectType:
        return GraphQLObjectType(
            name=ast_node.name.value,
            description=get_description(ast_node),
            interfaces=partial(self.build_interfaces, ast_node),
            fields=partial(self.build_field_map, ast_node),
            ast_node=ast_node,
        )

    def build_interface_type(
        self, ast_node: InterfaceTypeDefinitionNode
    ) -> GraphQLInterfaceType:
        return GraphQLInterfaceType(
            name=ast_node.name.value,
            description=get_description(ast_node),
            fields=partial(self.build_field_map, ast_node),
            ast_node=ast_node,
        )

    @staticmethod
    def build_enum_type(ast_node: EnumTypeDefinitionNode) -> GraphQLEnumType:
        return GraphQLEnumType(
            name=ast_node.name.value,
            values=[value.name.value for value in ast_node.values or []],
            description=get_description(ast_node),
            ast_node=ast_node,
        )

    def build_union_type(self, ast_node: UnionTypeDefinitionNode) -> GraphQLUnionType:
        return GraphQLUnionType(
            name=ast_node.name.value,
            description=get_description(ast_node),
            types=partial(self.build_union_types, ast_node),
            ast_node=ast_node,
        )

    @staticmethod
    def build_scalar_type(ast_node: ScalarTypeDefinitionNode) -> GraphQLScalarType:
        return GraphQLScalarType(
            name=ast_node.name.value,
            description=get_description(ast_node),
            ast_node=ast_node,
        )

    def build_type(self, ast_node: TypeDefinitionNode) -> GraphQLNamedType:
        kind = ast_node.kind
        if kind.endswith("_definition"):
            kind = kind[:-11]
        build = getattr(self, f"build_{kind}", None)
        if not build:
            raise TypeError(f"Unexpected type definition node: {ast_node!r}.")
        return build(ast_node)


def get_description(
    node: Union[TypeDefinitionNode, FieldDefinitionNode, InputValueDefinitionNode]
) -> Optional[str]:
    description = node.description
    return description.value if description else None


def get_deprecation_reason(node: FieldDefinitionNode) -> Optional[str]:
    """Given a field definition node, get deprecation reason as string."""
    for directive in node.directives or []:
        if directive.name.value == "deprecated":
            for arg in directive.arguments or []:
                if arg.name.value == "reason" and isinstance(
                    arg.value, StringValueNode
                ):
                    return arg.value.value
            return DEFAULT_DEPRECATION_REASON
    return None
