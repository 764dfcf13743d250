from pytest import mark, raises

from gqlcheck.error import GraphQLError
from gqlcheck.type import (
    GraphQLArgument,
    GraphQLEnumType,
    GraphQLField,
    GraphQLID,
    GraphQLInt,
    GraphQLInterfaceType,
    GraphQLList,
    GraphQLNonNull,
    GraphQLObjectType,
    GraphQLScalarType,
    GraphQLString,
    GraphQLUnionType,
    SchemaMetaFieldDef,
    TypeMetaFieldDef,
    TypeNameMetaFieldDef,
    assert_abstract_type,
    assert_interface_type,
    assert_name,
    assert_object_type,
    assert_union_type,
    get_named_type,
    get_nullable_type,
    introspection_types,
    is_abstract_type,
    is_composite_type,
    is_interface_type,
    is_introspection_type,
    is_leaf_type,
    is_meta_field_name,
    is_object_type,
    is_output_type,
    is_specified_scalar_type,
    is_union_type,
    is_wrapping_type,
    specified_scalar_types,
)

PetType = GraphQLInterfaceType("Pet", {"name": GraphQLField(GraphQLString)})

DogType = GraphQLObjectType(
    "Dog",
    lambda: {"name": GraphQLString, "friends": GraphQLList(DogType)},
    interfaces=lambda: [PetType],
)

CatType = GraphQLObjectType("Cat", {"name": GraphQLString}, interfaces=[PetType])

CatOrDogType = GraphQLUnionType("CatOrDog", lambda: [CatType, DogType])

ColorType = GraphQLEnumType("Color", ["RED", "GREEN", "BLUE"])

DateType = GraphQLScalarType("Date")


def describe_type_system_names():
    def accepts_valid_names():
        assert assert_name("_someName123") == "_someName123"

    def rejects_non_strings():
        with raises(TypeError) as exc_info:
            # noinspection PyTypeChecker
            assert_name(42)  # type: ignore
        assert str(exc_info.value) == "Expected name to be a string."

    def rejects_names_reserved_for_introspection():
        with raises(GraphQLError) as exc_info:
            GraphQLObjectType("__Reserved", {})
        assert str(exc_info.value) == (
            "Name '__Reserved' must not begin with '__',"
            " which is reserved by GraphQL introspection."
        )

    def accepts_reserved_names_where_allowed():
        assert assert_name("__Type", allow_reserved=True) == "__Type"
        with raises(GraphQLError):
            assert_name("__bad-name", allow_reserved=True)

    @mark.parametrize("name", ["bad-name", "1st", "", "with space"])
    def rejects_invalid_names(name):
        with raises(GraphQLError) as exc_info:
            GraphQLScalarType(name)
        assert str(exc_info.value) == (
            f"Names must match /^[_a-zA-Z][_a-zA-Z0-9]*$/ but {name!r} does not."
        )


def describe_type_system_object_and_interface_types():
    def wraps_output_types_as_fields():
        fields = CatType.fields
        assert list(fields) == ["name"]
        field = fields["name"]
        assert isinstance(field, GraphQLField)
        assert field.type is GraphQLString
        assert field.args == {}

    def resolves_thunks_lazily_and_caches_them():
        fields = DogType.fields
        assert list(fields) == ["name", "friends"]
        assert fields["friends"].type.of_type is DogType
        assert DogType.fields is fields
        assert DogType.interfaces == (PetType,)
        assert CatOrDogType.types == (CatType, DogType)

    def defaults_to_no_interfaces():
        assert GraphQLObjectType("Empty", {}).interfaces == ()

    def interfaces_only_define_fields():
        assert list(PetType.fields) == ["name"]
        assert not hasattr(PetType, "interfaces")

    def wraps_field_arguments():
        field = GraphQLField(GraphQLString, {"id": GraphQLID, "limit": GraphQLInt})
        assert list(field.args) == ["id", "limit"]
        assert isinstance(field.args["id"], GraphQLArgument)
        assert field.args["id"].type is GraphQLID
        assert not field.is_deprecated

    def knows_deprecated_fields():
        field = GraphQLField(GraphQLString, deprecation_reason="Gone")
        assert field.is_deprecated
        assert field.deprecation_reason == "Gone"

    def compares_fields_by_value():
        assert GraphQLField(GraphQLString) == GraphQLField(GraphQLString)
        assert GraphQLField(GraphQLString) != GraphQLField(GraphQLInt)

    def rejects_fields_that_are_not_output_types():
        with raises(TypeError) as exc_info:
            # noinspection PyTypeChecker
            GraphQLField("String")  # type: ignore
        assert str(exc_info.value) == "Field type must be an output type."

    def rejects_fields_that_cannot_be_resolved():
        def fields():
            raise RuntimeError("Oops!")

        type_ = GraphQLObjectType("Broken", fields)
        with raises(TypeError) as exc_info:
            assert type_.fields
        assert str(exc_info.value) == "Broken fields cannot be resolved. Oops!"

    def rejects_fields_that_are_not_a_mapping():
        # noinspection PyTypeChecker
        type_ = GraphQLInterfaceType("Broken", ["name"])  # type: ignore
        with raises(TypeError) as exc_info:
            assert type_.fields
        assert str(exc_info.value) == (
            "Broken fields must be specified as a mapping with field names as keys."
        )

    def rejects_interfaces_that_are_not_interface_types():
        # noinspection PyTypeChecker
        type_ = GraphQLObjectType(
            "Broken", {}, interfaces=[GraphQLString]  # type: ignore
        )
        with raises(TypeError) as exc_info:
            assert type_.interfaces
        assert str(exc_info.value) == "Broken interfaces must be Interface types."

    def rejects_union_members_that_are_not_object_types():
        # noinspection PyTypeChecker
        type_ = GraphQLUnionType("Broken", [PetType])  # type: ignore
        with raises(TypeError) as exc_info:
            assert type_.types
        assert str(exc_info.value) == "Broken types must be Object types."

    def can_be_stringified():
        assert str(DogType) == "Dog"
        assert repr(DogType) == "<GraphQLObjectType 'Dog'>"
        assert repr(PetType) == "<GraphQLInterfaceType 'Pet'>"
        assert repr(GraphQLField(GraphQLString)) == (
            "<GraphQLField <GraphQLScalarType 'String'>>"
        )


def describe_type_system_enum_types():
    def defines_values_by_name():
        assert ColorType.values == ("RED", "GREEN", "BLUE")

    def rejects_values_given_as_string():
        with raises(TypeError) as exc_info:
            GraphQLEnumType("Color", "RED")
        assert str(exc_info.value) == "Color values must be a collection of names."


def describe_type_system_wrappers():
    def stringifies_wrapped_types():
        assert str(GraphQLList(GraphQLString)) == "[String]"
        assert str(GraphQLNonNull(GraphQLString)) == "String!"
        assert (
            str(GraphQLNonNull(GraphQLList(GraphQLNonNull(GraphQLString))))
            == "[String!]!"
        )
        assert repr(GraphQLList(GraphQLString)) == (
            "<GraphQLList <GraphQLScalarType 'String'>>"
        )

    def rejects_wrapping_non_types():
        with raises(TypeError) as exc_info:
            # noinspection PyTypeChecker
            GraphQLList("String")  # type: ignore
        assert str(exc_info.value) == (
            "Can only create a wrapper for a GraphQLType, but got: 'String'."
        )

    def rejects_non_null_of_non_null():
        with raises(TypeError) as exc_info:
            GraphQLNonNull(GraphQLNonNull(GraphQLString))  # type: ignore
        assert str(exc_info.value) == (
            "Can only create NonNull of a Nullable GraphQLType but got: String!."
        )

    def unwraps_types():
        wrapped = GraphQLNonNull(GraphQLList(GraphQLNonNull(DogType)))
        assert get_named_type(wrapped) is DogType
        assert get_named_type(DogType) is DogType
        assert get_named_type(None) is None
        assert get_nullable_type(GraphQLNonNull(GraphQLString)) is GraphQLString
        assert get_nullable_type(GraphQLString) is GraphQLString


def describe_type_system_predicates():
    def identifies_composite_and_abstract_types():
        assert is_object_type(DogType)
        assert not is_object_type(PetType)
        assert is_interface_type(PetType)
        assert is_union_type(CatOrDogType)
        assert all(map(is_composite_type, (DogType, PetType, CatOrDogType)))
        assert not is_composite_type(GraphQLString)
        assert is_abstract_type(PetType)
        assert is_abstract_type(CatOrDogType)
        assert not is_abstract_type(DogType)
        assert not is_abstract_type(GraphQLList(PetType))

    def identifies_leaf_output_and_wrapping_types():
        assert is_leaf_type(GraphQLString)
        assert is_leaf_type(ColorType)
        assert is_leaf_type(DateType)
        assert not is_leaf_type(DogType)
        assert is_output_type(GraphQLNonNull(GraphQLList(DogType)))
        assert not is_output_type("Dog")
        assert is_wrapping_type(GraphQLList(DogType))
        assert not is_wrapping_type(DogType)

    def asserts_types():
        assert assert_object_type(DogType) is DogType
        assert assert_abstract_type(PetType) is PetType
        with raises(TypeError) as exc_info:
            assert_object_type(PetType)
        assert str(exc_info.value) == "Expected Pet to be a GraphQL Object type."
        with raises(TypeError) as exc_info:
            assert_abstract_type(DogType)
        assert str(exc_info.value) == "Expected Dog to be a GraphQL abstract type."
        assert assert_interface_type(PetType) is PetType
        with raises(TypeError) as exc_info:
            assert_interface_type(DogType)
        assert str(exc_info.value) == "Expected Dog to be a GraphQL Interface type."
        assert assert_union_type(CatOrDogType) is CatOrDogType
        with raises(TypeError) as exc_info:
            assert_union_type(PetType)
        assert str(exc_info.value) == "Expected Pet to be a GraphQL Union type."


def describe_type_system_introspection():
    def typename_is_a_non_null_string():
        assert str(TypeNameMetaFieldDef.type) == "String!"
        assert TypeNameMetaFieldDef.args == {}

    def schema_and_type_meta_fields_return_introspection_types():
        assert str(SchemaMetaFieldDef.type) == "__Schema!"
        assert SchemaMetaFieldDef.args == {}
        assert str(TypeMetaFieldDef.type) == "__Type"
        assert list(TypeMetaFieldDef.args) == ["name"]
        assert str(TypeMetaFieldDef.args["name"].type) == "String!"

    def knows_the_meta_field_names():
        assert all(map(is_meta_field_name, ("__schema", "__type", "__typename")))
        assert not is_meta_field_name("__other")
        assert not is_meta_field_name("name")

    def allows_reserved_names_for_introspection_types():
        assert list(introspection_types) == [
            "__Schema",
            "__Directive",
            "__DirectiveLocation",
            "__Type",
            "__Field",
            "__InputValue",
            "__EnumValue",
            "__TypeKind",
        ]
        assert all(map(is_introspection_type, introspection_types.values()))
        assert not is_introspection_type(DogType)
        type_ = introspection_types["__Type"]
        assert is_object_type(type_)
        assert str(type_.fields["ofType"].type) == "__Type"
        assert str(type_.fields["fields"].type) == "[__Field!]"
        assert list(type_.fields["fields"].args) == ["includeDeprecated"]
        assert "NON_NULL" in introspection_types["__TypeKind"].values


def describe_type_system_specified_scalars():
    def knows_the_specified_scalar_types():
        assert list(specified_scalar_types) == [
            "String",
            "Int",
            "Float",
            "Boolean",
            "ID",
        ]
        assert specified_scalar_types["ID"] is GraphQLID
        assert is_specified_scalar_type(GraphQLInt)
        assert not is_specified_scalar_type(DateType)
