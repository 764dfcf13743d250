from typing import (
    Any,
    Collection,
    Dict,
    Iterator,
    List,
    NamedTuple,
    Optional,
    cast,
)

from ..language import OperationType, SchemaDefinitionNode
from .definition import (
    GraphQLAbstractType,
    GraphQLInterfaceType,
    GraphQLNamedType,
    GraphQLObjectType,
    GraphQLType,
    get_named_type,
    is_interface_type,
    is_named_type,
    is_object_type,
    is_union_type,
)
from .introspection import introspection_types

__all__ = ["GraphQLSchema", "InterfaceImplementations", "is_schema", "assert_schema"]


TypeMap = Dict[str, GraphQLNamedType]


class InterfaceImplementations(NamedTuple):
    """The object types implementing an interface"""

    objects: List[GraphQLObjectType]


class GraphQLSchema:
    """The types of a GraphQL service with the root types of its operations

    All types that can be reached from the root types through fields, arguments,
    interfaces and union members are collected into the ``type_map``. Types that
    cannot be reached that way, such as the implementations of an interface that
    is only used as a field type, need to be passed as additional ``types``::

        schema = GraphQLSchema(
            query=GraphQLObjectType("Query", {"hero": GraphQLField(CharacterType)}),
            types=[HumanType, DroidType],
        )

    The additional types come first in the type map, in the given order and each
    followed by the types it refers to. The types reached from the root types follow.

    The introspection types are not part of the type map, but can be looked up by
    name with :meth:`get_type` as well. A schema is not changed after construction.
    """

    query_type: Optional[GraphQLObjectType]
    mutation_type: Optional[GraphQLObjectType]
    subscription_type: Optional[GraphQLObjectType]
    type_map: TypeMap
    description: Optional[str]
    ast_node: Optional[SchemaDefinitionNode]

    def __init__(
        self,
        query: Optional[GraphQLObjectType] = None,
        mutation: Optional[GraphQLObjectType] = None,
        subscription: Optional[GraphQLObjectType] = None,
        types: Optional[Collection[GraphQLNamedType]] = None,
        description: Optional[str] = None,
        ast_node: Optional[SchemaDefinitionNode] = None,
    ) -> None:
        roots = {"query": query, "mutation": mutation, "subscription": subscription}
        for operation, root in roots.items():
            if root and not is_object_type(root):
                raise TypeError(f"Expected {operation} to be a GraphQL Object type.")
        if types is None:
            types = ()
        elif isinstance(types, (str, dict)) or not all(map(is_named_type, types)):
            raise TypeError(
                "Schema types must be specified as a collection of GraphQL types."
            )
        self.query_type = query
        self.mutation_type = mutation
        self.subscription_type = subscription
        self.description = description
        self.ast_node = ast_node

        self.type_map = {}
        self._implementations: Dict[str, InterfaceImplementations] = {}
        for named_type in _collect_types(types, [r for r in roots.values() if r]):
            name = named_type.name
            if name in self.type_map:
                raise TypeError(
                    "Schema must contain uniquely named types"
                    f" but contains multiple types named '{name}'."
                )
            self.type_map[name] = named_type
            if is_object_type(named_type):
                for interface in cast(GraphQLObjectType, named_type).interfaces:
                    self._implementations.setdefault(
                        interface.name, InterfaceImplementations([])
                    ).objects.append(cast(GraphQLObjectType, named_type))

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} with {len(self.type_map)} types>"

    def get_type(self, name: str) -> Optional[GraphQLNamedType]:
        return self.type_map.get(name) or introspection_types.get(name)

    def get_root_type(self, operation: OperationType) -> Optional[GraphQLObjectType]:
        """Get the root type of the given kind of operation, if there is one."""
        return getattr(self, f"{operation.value}_type")

    def get_implementations(
        self, interface_type: GraphQLInterfaceType
    ) -> InterfaceImplementations:
        return self._implementations.get(
            interface_type.name, InterfaceImplementations([])
        )

    def get_possible_types(
        self, abstract_type: GraphQLAbstractType
    ) -> List[GraphQLObjectType]:
        """Get the object types a value of the abstract type can have.

        For unions these are the members in the order they were given, for
        interfaces the implementations in the order of the type map.
        """
        if is_union_type(abstract_type):
            return list(abstract_type.types)  # type: ignore
        return list(self.get_implementations(abstract_type).objects)  # type: ignore

    def is_possible_type(
        self, abstract_type: GraphQLAbstractType, possible_type: GraphQLObjectType
    ) -> bool:
        return any(
            type_ is possible_type for type_ in self.get_possible_types(abstract_type)
        )


def _referenced_types(named_type: GraphQLNamedType) -> Iterator[GraphQLType]:
    """Yield the types a named type refers to directly."""
    if is_union_type(named_type):
        yield from named_type.types  # type: ignore
        return
    if is_object_type(named_type):
        yield from cast(GraphQLObjectType, named_type).interfaces
    if is_object_type(named_type) or is_interface_type(named_type):
        for field in named_type.fields.values():  # type: ignore
            yield field.type
            for arg in field.args.values():
                yield arg.type


def _collect_types(
    types: Collection[GraphQLNamedType], roots: Collection[GraphQLObjectType]
) -> List[GraphQLNamedType]:
    """Collect the given types and root types with all types they refer to.

    The types are visited depth first. The given types hold their places in front
    while their references are collected, so that they keep their order.
    """
    collected: Dict[GraphQLNamedType, None] = dict.fromkeys(types)

    def collect(type_: GraphQLType) -> None:
        named_type = get_named_type(type_)
        if named_type is not None and named_type not in collected:
            collected[named_type] = None
            for referenced_type in _referenced_types(named_type):
                collect(referenced_type)

    for type_ in types:
        collected.pop(type_, None)
        collect(type_)
    for root in roots:
        collect(root)
    return list(collected)


def is_schema(schema: Any) -> bool:
    return isinstance(schema, GraphQLSchema)


def assert_schema(schema: Any) -> GraphQLSchema:
    if not isinstance(schema, GraphQLSchema):
        raise TypeError(f"Expected {schema!r} to be a GraphQL schema.")
    return schema
