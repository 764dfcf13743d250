import re
from functools import cached_property
from typing import (
    Any,
    Callable,
    Collection,
    Dict,
    Generic,
    Mapping,
    Optional,
    Tuple,
    TypeVar,
    Union,
    cast,
)

from ..error import GraphQLError
from ..language import (
    EnumTypeDefinitionNode,
    FieldDefinitionNode,
    InputValueDefinitionNode,
    InterfaceTypeDefinitionNode,
    ObjectTypeDefinitionNode,
    ScalarTypeDefinitionNode,
    TypeDefinitionNode,
    UnionTypeDefinitionNode,
)

__all__ = [
    "assert_name",
    "is_type",
    "is_scalar_type",
    "is_object_type",
    "is_interface_type",
    "is_union_type",
    "is_enum_type",
    "is_list_type",
    "is_non_null_type",
    "is_output_type",
    "is_leaf_type",
    "is_composite_type",
    "is_abstract_type",
    "is_wrapping_type",
    "is_named_type",
    "assert_object_type",
    "assert_interface_type",
    "assert_union_type",
    "assert_abstract_type",
    "get_nullable_type",
    "get_named_type",
    "resolve_thunk",
    "GraphQLAbstractType",
    "GraphQLArgument",
    "GraphQLArgumentMap",
    "GraphQLCompositeType",
    "GraphQLEnumType",
    "GraphQLField",
    "GraphQLFieldMap",
    "GraphQLInterfaceType",
    "GraphQLLeafType",
    "GraphQLList",
    "GraphQLNamedType",
    "GraphQLNonNull",
    "GraphQLNullableType",
    "GraphQLObjectType",
    "GraphQLOutputType",
    "GraphQLScalarType",
    "GraphQLType",
    "GraphQLUnionType",
    "GraphQLWrappingType",
    "Thunk",
    "ThunkCollection",
    "ThunkMapping",
]

_name_pattern = "^[_a-zA-Z][_a-zA-Z0-9]*$"
_is_name = re.compile(_name_pattern).match


def assert_name(name: str, allow_reserved: bool = False) -> str:
    """Return the name if it can name a type, field, argument or enum value.

    Names starting with two underscores belong to the introspection system and are
    only accepted with ``allow_reserved``.
    """
    if not isinstance(name, str):
        raise TypeError("Expected name to be a string.")
    if name.startswith("__") and not allow_reserved:
        raise GraphQLError(
            f"Name {name!r} must not begin with '__',"
            " which is reserved by GraphQL introspection."
        )
    if not _is_name(name):
        raise GraphQLError(
            f"Names must match /{_name_pattern}/ but {name!r} does not."
        )
    return name


T = TypeVar("T")

Thunk = Union[Callable[[], T], T]
ThunkCollection = Union[Callable[[], Collection[T]], Collection[T]]
ThunkMapping = Union[Callable[[], Mapping[str, T]], Mapping[str, T]]


def resolve_thunk(thunk: Thunk[T]) -> T:
    """Call the thunk if it is callable, otherwise return it unchanged.

    Types referring to each other, or to themselves, pass their fields, interfaces
    or member types as thunks which are only resolved on first access.
    """
    return thunk() if callable(thunk) else thunk


def _resolve_members(owner: str, what: str, thunk: Thunk[Any]) -> Any:
    try:
        return resolve_thunk(thunk)
    except GraphQLError as error:
        raise GraphQLError(f"{owner} {what} cannot be resolved. {error}") from error
    except Exception as error:
        raise TypeError(f"{owner} {what} cannot be resolved. {error}") from error


# Base classes


class GraphQLType:
    """Base class for all GraphQL types"""


class GraphQLNamedType(GraphQLType):
    """Base class for the types that are defined under a name in a schema"""

    name: str
    description: Optional[str]
    ast_node: Optional[TypeDefinitionNode]

    reserved_name: bool = False  # set for the introspection types

    def __init__(
        self,
        name: str,
        description: Optional[str] = None,
        ast_node: Optional[TypeDefinitionNode] = None,
    ) -> None:
        assert_name(name, allow_reserved=self.reserved_name)
        if description is not None and not isinstance(description, str):
            raise TypeError("The description must be a string.")
        if ast_node and not isinstance(ast_node, TypeDefinitionNode):
            raise TypeError(f"{name} AST node must be a TypeDefinitionNode.")
        self.name = name
        self.description = description
        self.ast_node = ast_node

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} {self.name!r}>"

    def __str__(self) -> str:
        return self.name


GT = TypeVar("GT", bound=GraphQLType)


class GraphQLWrappingType(GraphQLType, Generic[GT]):
    """Base class for the list and non-null modifiers of another type"""

    of_type: GT

    def __init__(self, type_: GT) -> None:
        if not isinstance(type_, GraphQLType):
            raise TypeError(
                f"Can only create a wrapper for a GraphQLType, but got: {type_!r}."
            )
        self.of_type = type_

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} {self.of_type!r}>"


# Fields and their arguments


class GraphQLArgument:
    """An argument of a field, only its type and description are kept"""

    type: GraphQLType
    description: Optional[str]
    ast_node: Optional[InputValueDefinitionNode]

    def __init__(
        self,
        type_: GraphQLType,
        description: Optional[str] = None,
        ast_node: Optional[InputValueDefinitionNode] = None,
    ) -> None:
        if not isinstance(type_, GraphQLType):
            raise TypeError("Argument type must be a GraphQL type.")
        self.type = type_
        self.description = description
        self.ast_node = ast_node

    def __eq__(self, other: Any) -> bool:
        return self is other or (
            isinstance(other, GraphQLArgument)
            and (self.type, self.description) == (other.type, other.description)
        )


GraphQLArgumentMap = Dict[str, GraphQLArgument]


class GraphQLField:
    """A field of an object or interface type

    Arguments can be given as :class:`GraphQLArgument` instances or as plain types.
    """

    type: "GraphQLOutputType"
    args: GraphQLArgumentMap
    description: Optional[str]
    deprecation_reason: Optional[str]
    ast_node: Optional[FieldDefinitionNode]

    def __init__(
        self,
        type_: "GraphQLOutputType",
        args: Optional[Mapping[str, Union[GraphQLArgument, GraphQLType]]] = None,
        description: Optional[str] = None,
        deprecation_reason: Optional[str] = None,
        ast_node: Optional[FieldDefinitionNode] = None,
    ) -> None:
        if not is_output_type(type_):
            raise TypeError("Field type must be an output type.")
        if args is not None and not isinstance(args, Mapping):
            raise TypeError("Field args must be a dict with argument names as keys.")
        self.type = type_
        self.args = {}
        for name, arg in (args or {}).items():
            if not isinstance(arg, GraphQLArgument):
                arg = GraphQLArgument(arg)
            self.args[assert_name(name)] = arg
        self.description = description
        self.deprecation_reason = deprecation_reason
        self.ast_node = ast_node

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} {self.type!r}>"

    def __str__(self) -> str:
        return f"Field: {self.type}"

    def __eq__(self, other: Any) -> bool:
        if self is other:
            return True
        if not isinstance(other, GraphQLField):
            return False
        return (self.type, self.args, self.description, self.deprecation_reason) == (
            other.type,
            other.args,
            other.description,
            other.deprecation_reason,
        )

    @property
    def is_deprecated(self) -> bool:
        return self.deprecation_reason is not None


GraphQLFieldMap = Dict[str, GraphQLField]


# Named types


class GraphQLScalarType(GraphQLNamedType):
    """A leaf type such as ``String`` or a custom ``scalar Date``

    Scalars have no fields. Serialization is not a concern of static checks, so a
    scalar is nothing but its name::

        DateType = GraphQLScalarType("Date")
    """

    ast_node: Optional[ScalarTypeDefinitionNode]


class GraphQLEnumType(GraphQLNamedType):
    """A leaf type with a fixed set of values, given by their names::

        ColorType = GraphQLEnumType("Color", ["RED", "GREEN", "BLUE"])
    """

    values: Tuple[str, ...]
    ast_node: Optional[EnumTypeDefinitionNode]

    def __init__(
        self,
        name: str,
        values: Collection[str],
        description: Optional[str] = None,
        ast_node: Optional[EnumTypeDefinitionNode] = None,
    ) -> None:
        super().__init__(name, description, ast_node)
        if isinstance(values, str) or any(
            not isinstance(value, str) for value in values
        ):
            raise TypeError(f"{name} values must be a collection of names.")
        self.values = tuple(map(assert_name, values))


class _TypeWithFields(GraphQLNamedType):
    """Common part of object and interface types"""

    def __init__(
        self,
        name: str,
        fields: ThunkMapping[Union[GraphQLField, "GraphQLOutputType"]],
        description: Optional[str] = None,
        ast_node: Optional[TypeDefinitionNode] = None,
    ) -> None:
        super().__init__(name, description, ast_node)
        self._fields = fields

    @cached_property
    def fields(self) -> GraphQLFieldMap:
        """The fields by name, with plain output types wrapped as fields."""
        fields = _resolve_members(self.name, "fields", self._fields)
        if not isinstance(fields, Mapping):
            raise TypeError(
                f"{self.name} fields must be specified"
                " as a mapping with field names as keys."
            )
        return {
            assert_name(name): field
            if isinstance(field, GraphQLField)
            else GraphQLField(field)
            for name, field in fields.items()
        }


class GraphQLObjectType(_TypeWithFields):
    """A type with fields that can be selected in a query

    Fields can be given as :class:`GraphQLField` instances or as plain output types.
    To refer to types that are defined later, or to the type itself, pass a
    function returning the fields instead::

        PersonType = GraphQLObjectType("Person", lambda: {
            "name": GraphQLString,
            "bestFriend": GraphQLField(PersonType),
        }, interfaces=[NamedEntityType])
    """

    ast_node: Optional[ObjectTypeDefinitionNode]

    def __init__(
        self,
        name: str,
        fields: ThunkMapping[Union[GraphQLField, "GraphQLOutputType"]],
        interfaces: Optional[ThunkCollection["GraphQLInterfaceType"]] = None,
        description: Optional[str] = None,
        ast_node: Optional[ObjectTypeDefinitionNode] = None,
    ) -> None:
        super().__init__(name, fields, description, ast_node)
        self._interfaces = interfaces

    @cached_property
    def interfaces(self) -> Tuple["GraphQLInterfaceType", ...]:
        """The interfaces this type implements."""
        interfaces = _resolve_members(self.name, "interfaces", self._interfaces)
        if not interfaces:
            return ()
        if not all(map(is_interface_type, interfaces)):
            raise TypeError(f"{self.name} interfaces must be Interface types.")
        return tuple(interfaces)


class GraphQLInterfaceType(_TypeWithFields):
    """An abstract type naming the fields its implementations have in common

    Interfaces do not know their implementations, the schema collects them from the
    ``interfaces`` of its object types::

        NamedEntityType = GraphQLInterfaceType("NamedEntity", {"name": GraphQLString})
    """

    ast_node: Optional[InterfaceTypeDefinitionNode]


class GraphQLUnionType(GraphQLNamedType):
    """An abstract type that is one of several object types

    A union has no fields of its own, only ``__typename`` can be selected on it
    directly::

        PetType = GraphQLUnionType("Pet", [DogType, CatType])
    """

    ast_node: Optional[UnionTypeDefinitionNode]

    def __init__(
        self,
        name: str,
        types: ThunkCollection[GraphQLObjectType],
        description: Optional[str] = None,
        ast_node: Optional[UnionTypeDefinitionNode] = None,
    ) -> None:
        super().__init__(name, description, ast_node)
        self._types = types

    @cached_property
    def types(self) -> Tuple[GraphQLObjectType, ...]:
        """The member types of the union."""
        types = _resolve_members(self.name, "types", self._types)
        if not types:
            return ()
        if not all(map(is_object_type, types)):
            raise TypeError(f"{self.name} types must be Object types.")
        return tuple(types)


# Modifiers


class GraphQLList(GraphQLWrappingType[GT]):
    """A list of values of the wrapped type, written as ``[Type]``"""

    def __str__(self) -> str:
        return f"[{self.of_type}]"


class GraphQLNonNull(GraphQLWrappingType[GT]):
    """A value of the wrapped type that is never null, written as ``Type!``"""

    def __init__(self, type_: GT) -> None:
        super().__init__(type_)
        if isinstance(type_, GraphQLNonNull):
            raise TypeError(
                f"Can only create NonNull of a Nullable GraphQLType but got: {type_}."
            )

    def __str__(self) -> str:
        return f"{self.of_type}!"


GraphQLNullableType = Union[
    GraphQLScalarType,
    GraphQLObjectType,
    GraphQLInterfaceType,
    GraphQLUnionType,
    GraphQLEnumType,
    GraphQLList,
]
GraphQLOutputType = Union[GraphQLNullableType, GraphQLNonNull]
GraphQLLeafType = Union[GraphQLScalarType, GraphQLEnumType]
GraphQLCompositeType = Union[GraphQLObjectType, GraphQLInterfaceType, GraphQLUnionType]
GraphQLAbstractType = Union[GraphQLInterfaceType, GraphQLUnionType]

_leaf_classes = (GraphQLScalarType, GraphQLEnumType)
_abstract_classes = (GraphQLInterfaceType, GraphQLUnionType)
_composite_classes = (GraphQLObjectType, *_abstract_classes)


# Predicates


def is_type(type_: Any) -> bool:
    return isinstance(type_, GraphQLType)


def is_named_type(type_: Any) -> bool:
    return isinstance(type_, GraphQLNamedType)


def is_scalar_type(type_: Any) -> bool:
    return isinstance(type_, GraphQLScalarType)


def is_object_type(type_: Any) -> bool:
    return isinstance(type_, GraphQLObjectType)


def is_interface_type(type_: Any) -> bool:
    return isinstance(type_, GraphQLInterfaceType)


def is_union_type(type_: Any) -> bool:
    return isinstance(type_, GraphQLUnionType)


def is_enum_type(type_: Any) -> bool:
    return isinstance(type_, GraphQLEnumType)


def is_wrapping_type(type_: Any) -> bool:
    return isinstance(type_, GraphQLWrappingType)


def is_list_type(type_: Any) -> bool:
    return isinstance(type_, GraphQLList)


def is_non_null_type(type_: Any) -> bool:
    return isinstance(type_, GraphQLNonNull)


def is_leaf_type(type_: Any) -> bool:
    return isinstance(type_, _leaf_classes)


def is_composite_type(type_: Any) -> bool:
    """Check for the types that can have a selection set."""
    return isinstance(type_, _composite_classes)


def is_abstract_type(type_: Any) -> bool:
    return isinstance(type_, _abstract_classes)


def is_output_type(type_: Any) -> bool:
    """Check for types that fields can have, which excludes input object types."""
    while isinstance(type_, GraphQLWrappingType):
        type_ = type_.of_type
    return isinstance(type_, (*_leaf_classes, *_composite_classes))


# Assertions


def _assert_type(type_: Any, classes: Any, description: str) -> Any:
    if not isinstance(type_, classes):
        raise TypeError(f"Expected {type_} to be a GraphQL {description} type.")
    return type_


def assert_object_type(type_: Any) -> GraphQLObjectType:
    return _assert_type(type_, GraphQLObjectType, "Object")


def assert_interface_type(type_: Any) -> GraphQLInterfaceType:
    return _assert_type(type_, GraphQLInterfaceType, "Interface")


def assert_union_type(type_: Any) -> GraphQLUnionType:
    return _assert_type(type_, GraphQLUnionType, "Union")


def assert_abstract_type(type_: Any) -> GraphQLAbstractType:
    return _assert_type(type_, _abstract_classes, "abstract")


# Unmodifiers


def get_nullable_type(type_: Optional[GraphQLType]) -> Optional[GraphQLType]:
    """Strip a non-null modifier from the type if there is one."""
    if isinstance(type_, GraphQLNonNull):
        return type_.of_type
    return type_


def get_named_type(type_: Optional[GraphQLType]) -> Optional[GraphQLNamedType]:
    """Strip all list and non-null modifiers from the type."""
    while isinstance(type_, GraphQLWrappingType):
        type_ = type_.of_type
    return cast(Optional[GraphQLNamedType], type_)
