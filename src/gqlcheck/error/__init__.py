"""GraphQL Errors

The :mod:`gqlcheck.error` package is responsible for creating and formatting GraphQL
errors.
"""

from .graphql_error import GraphQLError, format_error, print_error

from .syntax_error import GraphQLSyntaxError

__all__ = ["GraphQLError", "GraphQLSyntaxError", "format_error", "print_error"]
