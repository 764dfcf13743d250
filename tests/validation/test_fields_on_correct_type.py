from functools import partial

from gqlcheck.language import parse
from gqlcheck.type import GraphQLSchema
from gqlcheck.utilities import build_schema
from gqlcheck.validation import FieldsOnCorrectTypeRule, validate
from gqlcheck.validation.rules.fields_on_correct_type import (
    get_suggested_field_names,
    get_suggested_type_names,
    undefined_field_message,
)

from .harness import assert_validation_errors, test_schema

assert_errors = partial(assert_validation_errors, FieldsOnCorrectTypeRule)

assert_valid = partial(assert_errors, errors=[])


def describe_validate_fields_on_correct_type():
    def object_field_selection():
        assert_valid(
            """
            fragment objectFieldSelection on Dog {
              __typename
              name
            }
            """
        )

    def aliased_object_field_selection():
        assert_valid(
            """
            fragment aliasedObjectFieldSelection on Dog {
              tn : __typename
              otherName : name
            }
            """
        )

    def interface_field_selection():
        assert_valid(
            """
            fragment interfaceFieldSelection on Pet {
              __typename
              name
            }
            """
        )

    def aliased_interface_field_selection():
        assert_valid(
            """
            fragment interfaceFieldSelection on Pet {
              otherName : name
            }
            """
        )

    def lying_alias_selection():
        assert_valid(
            """
            fragment lyingAliasSelection on Dog {
              name : nickname
            }
            """
        )

    def ignores_fields_on_unknown_type():
        assert_valid(
            """
            fragment unknownSelection on UnknownType {
              unknownField
            }
            """
        )

    def ignores_fields_on_missing_root_types():
        assert_valid(
            """
            mutation {
              unknownField
            }
            """
        )

    def reports_errors_when_type_is_known_again():
        assert_errors(
            """
            fragment typeKnownAgain on Pet {
              unknown_pet_field {
                ... on Cat {
                  unknown_cat_field
                }
              }
            },
            """,
            [
                {
                    "message": 'Cannot query field "unknown_pet_field" on type "Pet".',
                    "locations": [(3, 15)],
                },
                {
                    "message": 'Cannot query field "unknown_cat_field" on type "Cat".',
                    "locations": [(5, 19)],
                },
            ],
        )

    def field_not_defined_on_fragment():
        assert_errors(
            """
            fragment fieldNotDefined on Dog {
              meowVolume
            }
            """,
            [
                {
                    "message": 'Cannot query field "meowVolume" on type "Dog".'
                    ' Did you mean "barkVolume"?',
                    "locations": [(3, 15)],
                },
            ],
        )

    def ignores_deeply_unknown_field():
        assert_errors(
            """
            fragment deepFieldNotDefined on Dog {
              unknown_field {
                deeper_unknown_field
              }
            }
            """,
            [
                {
                    "message": 'Cannot query field "unknown_field" on type "Dog".',
                    "locations": [(3, 15)],
                },
            ],
        )

    def sub_field_not_defined():
        assert_errors(
            """
            fragment subFieldNotDefined on Human {
              pets {
                unknown_field
              }
            }
            """,
            [
                {
                    "message": 'Cannot query field "unknown_field" on type "Pet".',
                    "locations": [(4, 17)],
                },
            ],
        )

    def field_not_defined_on_inline_fragment():
        assert_errors(
            """
            fragment fieldNotDefined on Pet {
              ... on Dog {
                meowVolume
              }
            }
            """,
            [
                {
                    "message": 'Cannot query field "meowVolume" on type "Dog".'
                    ' Did you mean "barkVolume"?',
                    "locations": [(4, 17)],
                },
            ],
        )

    def aliased_field_target_not_defined():
        assert_errors(
            """
            fragment aliasedFieldTargetNotDefined on Dog {
              volume : mooVolume
            }
            """,
            [
                {
                    "message": 'Cannot query field "mooVolume" on type "Dog".'
                    ' Did you mean "barkVolume"?',
                    "locations": [(3, 15)],
                },
            ],
        )

    def aliased_lying_field_target_not_defined():
        assert_errors(
            """
            fragment aliasedLyingFieldTargetNotDefined on Dog {
              barkVolume : kawVolume
            }
            """,
            [
                {
                    "message": 'Cannot query field "kawVolume" on type "Dog".'
                    ' Did you mean "barkVolume"?',
                    "locations": [(3, 15)],
                },
            ],
        )

    def not_defined_on_interface():
        assert_errors(
            """
            fragment notDefinedOnInterface on Pet {
              tailLength
            }
            """,
            [
                {
                    "message": 'Cannot query field "tailLength" on type "Pet".',
                    "locations": [(3, 15)],
                },
            ],
        )

    def defined_on_implementors_but_not_on_interface():
        assert_errors(
            """
            fragment definedOnImplementorsButNotInterface on Pet {
              nickname
            }
            """,
            [
                {
                    "message": 'Cannot query field "nickname" on type "Pet".'
                    ' Did you mean to use an inline fragment on "Dog" or "Cat"?',
                    "locations": [(3, 15)],
                },
            ],
        )

    def meta_field_selection_on_union():
        assert_valid(
            """
            fragment directFieldSelectionOnUnion on CatOrDog {
              __typename
            }
            """
        )

    def direct_field_selection_on_union():
        assert_errors(
            """
            fragment directFieldSelectionOnUnion on CatOrDog {
              directField
            }
            """,
            [
                {
                    "message": 'Cannot query field "directField" on type "CatOrDog".',
                    "locations": [(3, 15)],
                },
            ],
        )

    def defined_on_implementors_queried_on_union():
        assert_errors(
            """
            fragment definedOnImplementorsQueriedOnUnion on CatOrDog {
              name
            }
            """,
            [
                {
                    "message": 'Cannot query field "name" on type "CatOrDog".'
                    " Did you mean to use an inline fragment"
                    ' on "Being", "Pet", "Canine", "Cat", or "Dog"?',
                    "locations": [(3, 15)],
                },
            ],
        )

    def valid_field_in_inline_fragment():
        assert_valid(
            """
            fragment objectFieldSelection on Pet {
              ... on Dog {
                name
              }
              ... {
                name
              }
            }
            """
        )

    def reports_errors_in_document_order():
        assert_errors(
            """
            {
              dog { meowVolume }
              catOrDog { name }
              human { pets { tailLength } }
            }
            """,
            [
                {
                    "message": 'Cannot query field "meowVolume" on type "Dog".'
                    ' Did you mean "barkVolume"?',
                    "locations": [(3, 21)],
                },
                {
                    "message": 'Cannot query field "name" on type "CatOrDog".'
                    " Did you mean to use an inline fragment"
                    ' on "Being", "Pet", "Canine", "Cat", or "Dog"?',
                    "locations": [(4, 26)],
                },
                {
                    "message": 'Cannot query field "tailLength" on type "Pet".',
                    "locations": [(5, 30)],
                },
            ],
        )

    def reports_the_same_errors_on_repeated_validation():
        doc = parse("{ dog { meowVolume } }")
        first = validate(test_schema, doc, [FieldsOnCorrectTypeRule])
        second = validate(test_schema, doc, [FieldsOnCorrectTypeRule])
        assert len(first) == 1
        assert first == second
        nodes = first[0].nodes
        assert nodes and len(nodes) == 1
        assert nodes[0].name.value == "meowVolume"  # type: ignore

    def introspection_fields_on_the_query_root():
        schema = build_schema("type Query { a: String }")
        assert_errors(
            """
            {
              __schema { types { name } }
              __type(name: "Query") { name }
            }
            """,
            [],
            schema=schema,
        )
        assert_errors(
            """
            query {
              __typename
              __schema {
                queryType { name kind }
                types { name fields(includeDeprecated: true) { name } }
                directives { name locations args { name } }
              }
              __type(name: "Query") {
                fields { type { kind ofType { name } } }
              }
            }
            """,
            [],
            schema=schema,
        )

    def introspection_fields_below_other_types():
        schema = build_schema("type Query { pet: Pet } type Pet { name: String }")
        assert_errors(
            """
            {
              pet {
                __schema { types { name } }
                __type(name: "Pet") { name }
              }
            }
            """,
            [
                {
                    "message": 'Cannot query field "__schema" on type "Pet".',
                    "locations": [(4, 17)],
                },
                {
                    "message": 'Cannot query field "__type" on type "Pet".',
                    "locations": [(5, 17)],
                },
            ],
            schema=schema,
        )

    def unknown_field_on_introspection_type():
        schema = build_schema("type Query { a: String }")
        assert_errors(
            """
            {
              __schema { typez { name } }
            }
            """,
            [
                {
                    "message": 'Cannot query field "typez" on type "__Schema".'
                    ' Did you mean "types"?',
                    "locations": [(3, 26)],
                },
            ],
            schema=schema,
        )


def describe_fields_on_correct_type_error_message():
    def _error_message(schema: GraphQLSchema, query_str: str):
        errors = validate(schema, parse(query_str), [FieldsOnCorrectTypeRule])
        assert len(errors) == 1
        return errors[0].message

    def suggests_inline_fragments_on_implementing_types():
        schema = build_schema(
            """
            interface Pet { name: String }
            type Dog implements Pet { name: String, bark: String }
            type Cat implements Pet { name: String, meow: String }
            union CatOrDog = Cat | Dog
            type Query { pet: Pet, dog: Dog, catOrDog: CatOrDog }
            """
        )
        assert _error_message(schema, "{ pet { bark } }") == (
            'Cannot query field "bark" on type "Pet".'
            ' Did you mean to use an inline fragment on "Dog"?'
        )
        assert _error_message(schema, "{ dog { nam } }") == (
            'Cannot query field "nam" on type "Dog". Did you mean "name"?'
        )
        assert _error_message(schema, "{ catOrDog { name } }") == (
            'Cannot query field "name" on type "CatOrDog".'
            ' Did you mean to use an inline fragment on "Pet", "Cat", or "Dog"?'
        )

    def fields_correct_type_no_suggestion():
        schema = build_schema(
            """
            type T {
              fieldWithVeryLongNameThatWillNeverBeSuggested: String
            }
            type Query { t: T }
            """
        )
        assert _error_message(schema, "{ t { f } }") == (
            'Cannot query field "f" on type "T".'
        )

    def works_with_no_small_numbers_of_type_suggestion():
        schema = build_schema(
            """
            union T = A | B
            type Query { t: T }

            type A { f: String }
            type B { f: String }
            """
        )
        assert _error_message(schema, "{ t { f } }") == (
            'Cannot query field "f" on type "T".'
            ' Did you mean to use an inline fragment on "A" or "B"?'
        )

    def works_with_no_small_numbers_of_field_suggestion():
        schema = build_schema(
            """
            type T {
              y: String
              z: String
            }
            type Query { t: T }
            """
        )
        assert _error_message(schema, "{ t { f } }") == (
            'Cannot query field "f" on type "T". Did you mean "y" or "z"?'
        )

    def only_shows_one_set_of_suggestions_at_a_time_preferring_types():
        schema = build_schema(
            """
            interface T {
              y: String
              z: String
            }
            type Query { t: T }

            type A implements T {
              f: String
              y: String
              z: String
            }
            type B implements T {
              f: String
              y: String
              z: String
            }
            """
        )
        assert _error_message(schema, "{ t { f } }") == (
            'Cannot query field "f" on type "T".'
            ' Did you mean to use an inline fragment on "A" or "B"?'
        )

    def sorts_interfaces_by_usage_before_object_types():
        schema = build_schema(
            """
            interface Alpha { f: String }
            interface Beta { f: String }
            interface Gamma { g: String }
            type A implements Alpha & Gamma { f: String, g: String }
            type B implements Alpha & Beta & Gamma { f: String, g: String }
            type C implements Beta & Gamma { f: String, g: String }
            type D implements Beta { f: String }
            union T = A | B | C | D
            type Query { t: T }
            """
        )
        assert _error_message(schema, "{ t { f } }") == (
            'Cannot query field "f" on type "T". Did you mean to use'
            ' an inline fragment on "Beta", "Alpha", "A", "B", or "C"?'
        )

    def keeps_first_seen_order_for_equally_used_interfaces():
        schema = build_schema(
            """
            interface Alpha { f: String }
            interface Beta { f: String }
            type A implements Beta & Alpha { f: String }
            type B implements Alpha & Beta { f: String }
            union T = A | B
            type Query { t: T }
            """
        )
        assert _error_message(schema, "{ t { f } }") == (
            'Cannot query field "f" on type "T". Did you mean to use'
            ' an inline fragment on "Beta", "Alpha", "A", or "B"?'
        )

    def limits_lots_of_type_suggestions():
        schema = build_schema(
            """
            union T = A | B | C | D | E | F
            type Query { t: T }

            type A { f: String }
            type B { f: String }
            type C { f: String }
            type D { f: String }
            type E { f: String }
            type F { f: String }
            """
        )
        assert _error_message(schema, "{ t { f } }") == (
            'Cannot query field "f" on type "T". Did you mean to use'
            ' an inline fragment on "A", "B", "C", "D", or "E"?'
        )

    def limits_lots_of_field_suggestions():
        schema = build_schema(
            """
            type T {
              u: String
              v: String
              w: String
              x: String
              y: String
              z: String
            }
            type Query { t: T }
            """
        )
        assert _error_message(schema, "{ t { f } }") == (
            'Cannot query field "f" on type "T".'
            ' Did you mean "u", "v", "w", "x", or "y"?'
        )


def describe_fields_on_correct_type_suggestions():
    def formats_messages_preferring_type_suggestions():
        assert undefined_field_message("f", "T", [], []) == (
            'Cannot query field "f" on type "T".'
        )
        assert undefined_field_message("f", "T", [], ["g"]) == (
            'Cannot query field "f" on type "T". Did you mean "g"?'
        )
        assert undefined_field_message("f", "T", ["A", "B"], ["g"]) == (
            'Cannot query field "f" on type "T".'
            ' Did you mean to use an inline fragment on "A" or "B"?'
        )

    def suggests_no_types_for_object_types():
        dog = test_schema.get_type("Dog")
        assert get_suggested_type_names(test_schema, dog, "meows") == []  # type: ignore

    def suggests_types_for_abstract_types():
        pet = test_schema.get_type("Pet")
        assert get_suggested_type_names(test_schema, pet, "barks") == [  # type: ignore
            "Dog"
        ]
        assert get_suggested_type_names(test_schema, pet, "wings") == []  # type: ignore

    def suggests_fields_on_object_and_interface_types_only():
        dog, pet, cat_or_dog = map(test_schema.get_type, ("Dog", "Pet", "CatOrDog"))
        suggest = partial(get_suggested_field_names, test_schema)
        assert suggest(dog, "barkVolum") == ["barkVolume"]  # type: ignore
        assert suggest(pet, "nam") == ["name"]  # type: ignore
        assert suggest(cat_or_dog, "nam") == []  # type: ignore

    def suggests_fields_independent_of_the_schema_passed():
        dog = test_schema.get_type("Dog")
        other_schema = build_schema("type Query { a: String }")
        assert get_suggested_field_names(  # type: ignore
            other_schema, dog, "barkVolum"
        ) == ["barkVolume"]
