from pytest import raises

from gqlcheck.language import OperationType
from gqlcheck.type import (
    GraphQLBoolean,
    GraphQLField,
    GraphQLInterfaceType,
    GraphQLObjectType,
    GraphQLSchema,
    GraphQLString,
    GraphQLUnionType,
    assert_schema,
    is_schema,
)

BeingType = GraphQLInterfaceType("Being", {"name": GraphQLString})

PetType = GraphQLInterfaceType("Pet", {"name": GraphQLString})

HiddenType = GraphQLInterfaceType("Hidden", {"secret": GraphQLString})

DogType = GraphQLObjectType(
    "Dog",
    {"name": GraphQLString, "barks": GraphQLBoolean},
    interfaces=[BeingType, PetType],
)

CatType = GraphQLObjectType(
    "Cat", {"name": GraphQLString}, interfaces=[BeingType, PetType]
)

CatOrDogType = GraphQLUnionType("CatOrDog", [CatType, DogType])

QueryType = GraphQLObjectType(
    "Query",
    {"pet": GraphQLField(PetType), "catOrDog": GraphQLField(CatOrDogType)},
)


def describe_type_system_schema():
    def collects_referenced_types_in_traversal_order():
        schema = GraphQLSchema(QueryType)
        assert schema.query_type is QueryType
        assert schema.mutation_type is None
        assert schema.subscription_type is None
        assert list(schema.type_map) == [
            "Query",
            "Pet",
            "String",
            "CatOrDog",
            "Cat",
            "Being",
            "Dog",
            "Boolean",
        ]

    def puts_additional_types_first():
        schema = GraphQLSchema(QueryType, types=[DogType, CatType, HiddenType])
        assert list(schema.type_map) == [
            "Dog",
            "Being",
            "String",
            "Pet",
            "Boolean",
            "Cat",
            "Hidden",
            "Query",
            "CatOrDog",
        ]

    def gets_types_by_name():
        schema = GraphQLSchema(QueryType)
        assert schema.get_type("Dog") is DogType
        assert schema.get_type("Unknown") is None

    def gets_introspection_types_outside_the_type_map():
        schema = GraphQLSchema(QueryType)
        type_ = schema.get_type("__Schema")
        assert type_ is not None
        assert type_.name == "__Schema"
        assert "__Schema" not in schema.type_map

    def gets_root_types_by_operation():
        schema = GraphQLSchema(QueryType, mutation=DogType)
        assert schema.get_root_type(OperationType.QUERY) is QueryType
        assert schema.get_root_type(OperationType.MUTATION) is DogType
        assert schema.get_root_type(OperationType.SUBSCRIPTION) is None

    def can_be_stringified():
        schema = GraphQLSchema(QueryType)
        assert repr(schema) == "<GraphQLSchema with 8 types>"

    def rejects_root_types_that_are_not_object_types():
        with raises(TypeError) as exc_info:
            # noinspection PyTypeChecker
            GraphQLSchema(PetType)  # type: ignore
        assert str(exc_info.value) == "Expected query to be a GraphQL Object type."
        with raises(TypeError) as exc_info:
            # noinspection PyTypeChecker
            GraphQLSchema(QueryType, mutation=CatOrDogType)  # type: ignore
        assert str(exc_info.value) == (
            "Expected mutation to be a GraphQL Object type."
        )

    def rejects_types_that_are_not_named_types():
        with raises(TypeError) as exc_info:
            # noinspection PyTypeChecker
            GraphQLSchema(QueryType, types=["Dog"])  # type: ignore
        assert str(exc_info.value) == (
            "Schema types must be specified as a collection of GraphQL types."
        )

    def rejects_multiple_types_with_the_same_name():
        FakeDogType = GraphQLObjectType("Dog", {"name": GraphQLString})
        with raises(TypeError) as exc_info:
            GraphQLSchema(QueryType, types=[FakeDogType])
        assert str(exc_info.value) == (
            "Schema must contain uniquely named types"
            " but contains multiple types named 'Dog'."
        )

    def checks_for_schemas():
        schema = GraphQLSchema(QueryType)
        assert is_schema(schema)
        assert not is_schema(QueryType)
        assert assert_schema(schema) is schema
        with raises(TypeError) as exc_info:
            assert_schema(QueryType)
        assert str(exc_info.value) == (
            "Expected <GraphQLObjectType 'Query'> to be a GraphQL schema."
        )


def describe_type_system_possible_types():
    def returns_union_members_in_declaration_order():
        schema = GraphQLSchema(QueryType)
        assert schema.get_possible_types(CatOrDogType) == [CatType, DogType]

    def returns_interface_implementations_in_type_map_order():
        schema = GraphQLSchema(QueryType)
        assert schema.get_possible_types(PetType) == [CatType, DogType]
        schema = GraphQLSchema(QueryType, types=[DogType, CatType])
        assert schema.get_possible_types(PetType) == [DogType, CatType]
        assert schema.get_implementations(BeingType).objects == [DogType, CatType]

    def returns_nothing_for_interfaces_without_implementations():
        schema = GraphQLSchema(QueryType, types=[HiddenType])
        assert schema.get_possible_types(HiddenType) == []
        assert schema.get_implementations(HiddenType).objects == []

    def checks_possible_types():
        schema = GraphQLSchema(QueryType)
        assert schema.is_possible_type(PetType, DogType)
        assert schema.is_possible_type(CatOrDogType, CatType)
        assert not schema.is_possible_type(HiddenType, DogType)
