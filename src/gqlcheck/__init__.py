"""gqlcheck

Static checking of GraphQL documents: verifies that every selected field exists on
the type it is selected against, and suggests inline fragments or similarly spelled
field names when it does not.

The gqlcheck package is divided into several sub-packages:

  - :mod:`gqlcheck.pyutils`: Fuzzy matching and list formatting helpers.
  - :mod:`gqlcheck.error`: Creating and formatting GraphQL errors.
  - :mod:`gqlcheck.language`: Parsing and traversing the GraphQL language.
  - :mod:`gqlcheck.type`: Defining GraphQL types and schema.
  - :mod:`gqlcheck.utilities`: Building schemas and tracking types in documents.
  - :mod:`gqlcheck.validation`: The field selection validation pass.
"""

# The gqlcheck version info.
from .version import version, version_info

# Parse and traverse GraphQL language source.
from .language import (
    Source,
    SourceLocation,
    get_location,
    Lexer,
    parse,
    visit,
    Visitor,
    ParallelVisitor,
    BREAK,
    SKIP,
    IDLE,
    Node,
    DocumentNode,
    FieldNode,
)

# Create and operate on GraphQL type definitions and schema.
from .type import (
    GraphQLSchema,
    GraphQLScalarType,
    GraphQLObjectType,
    GraphQLInterfaceType,
    GraphQLUnionType,
    GraphQLEnumType,
    GraphQLList,
    GraphQLNonNull,
    GraphQLField,
    GraphQLArgument,
    GraphQLInt,
    GraphQLFloat,
    GraphQLString,
    GraphQLBoolean,
    GraphQLID,
    SchemaMetaFieldDef,
    TypeMetaFieldDef,
    TypeNameMetaFieldDef,
    is_object_type,
    is_interface_type,
    is_union_type,
    is_abstract_type,
    is_composite_type,
)

# Validate GraphQL documents.
from .validation import (
    validate,
    ValidationContext,
    ValidationRule,
    specified_rules,
    FieldsOnCorrectTypeRule,
)

# Create, format, and print GraphQL errors.
from .error import GraphQLError, GraphQLSyntaxError, format_error, print_error

# Utilities for operating on GraphQL type schema and parsed sources.
from .utilities import build_ast_schema, build_schema, TypeInfo, TypeInfoVisitor

# Fuzzy matching and list formatting.
from .pyutils import suggestion_list, or_list, quoted_or_list

__all__ = [
    "version",
    "version_info",
    "Source",
    "SourceLocation",
    "get_location",
    "Lexer",
    "parse",
    "visit",
    "Visitor",
    "ParallelVisitor",
    "BREAK",
    "SKIP",
    "IDLE",
    "Node",
    "DocumentNode",
    "FieldNode",
    "GraphQLSchema",
    "GraphQLScalarType",
    "GraphQLObjectType",
    "GraphQLInterfaceType",
    "GraphQLUnionType",
    "GraphQLEnumType",
    "GraphQLList",
    "GraphQLNonNull",
    "GraphQLField",
    "GraphQLArgument",
    "GraphQLInt",
    "GraphQLFloat",
    "GraphQLString",
    "GraphQLBoolean",
    "GraphQLID",
    "SchemaMetaFieldDef",
    "TypeMetaFieldDef",
    "TypeNameMetaFieldDef",
    "is_object_type",
    "is_interface_type",
    "is_union_type",
    "is_abstract_type",
    "is_composite_type",
    "validate",
    "ValidationContext",
    "ValidationRule",
    "specified_rules",
    "FieldsOnCorrectTypeRule",
    "GraphQLError",
    "GraphQLSyntaxError",
    "format_error",
    "print_error",
    "build_ast_schema",
    "build_schema",
    "TypeInfo",
    "TypeInfoVisitor",
    "suggestion_list",
    "or_list",
    "quoted_or_list",
]
