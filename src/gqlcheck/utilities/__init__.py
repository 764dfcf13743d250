"""GraphQL Utilities

The :mod:`gqlcheck.utilities` package contains common useful computations to use with
the GraphQL language and type objects.
"""

# Build a GraphQLSchema from GraphQL Schema language.
from .build_ast_schema import build_ast_schema, build_schema

# Get the target type from an AST node.
from .type_from_ast import type_from_ast

# Keep track of the current type while traversing a document.
from .type_info import TypeInfo, TypeInfoVisitor, get_field_def

__all__ = [
    "build_ast_schema",
    "build_schema",
    "type_from_ast",
    "TypeInfo",
    "TypeInfoVisitor",
    "get_field_def",
]
