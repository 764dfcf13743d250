from collections import Counter
from typing import Any, List

from ...error import GraphQLError
from ...language import FieldNode
from ...pyutils import quoted_or_list, suggestion_list
from ...type import (
    GraphQLOutputType,
    GraphQLSchema,
    is_abstract_type,
    is_interface_type,
    is_object_type,
)
from . import ValidationRule

__all__ = [
    "FieldsOnCorrectTypeRule",
    "undefined_field_message",
    "get_suggested_type_names",
    "get_suggested_field_names",
]


def undefined_field_message(
    field_name: str,
    type_: str,
    suggested_type_names: List[str],
    suggested_field_names: List[str],
) -> str:
    """Build the message for a field that is not defined on the given type.

    Type suggestions win over field suggestions, at most five of either are named.
    """
    message = f'Cannot query field "{field_name}" on type "{type_}".'
    if suggested_type_names:
        names = quoted_or_list(suggested_type_names)
        return f"{message} Did you mean to use an inline fragment on {names}?"
    if suggested_field_names:
        return f"{message} Did you mean {quoted_or_list(suggested_field_names)}?"
    return message


class FieldsOnCorrectTypeRule(ValidationRule):
    """Fields on correct type

    Every field that is selected must be defined on the type it is selected on, or
    be one of the meta fields available there, like ``__typename``.
    """

    def enter_field(self, node: FieldNode, *_args: Any) -> None:
        parent_type = self.context.get_parent_type()
        if not parent_type or self.context.get_field_def():
            return
        schema = self.context.schema
        field_name = node.name.value
        suggested_type_names = get_suggested_type_names(
            schema, parent_type, field_name
        )
        suggested_field_names = (
            []
            if suggested_type_names
            else get_suggested_field_names(schema, parent_type, field_name)
        )
        self.report_error(
            GraphQLError(
                undefined_field_message(
                    field_name,
                    parent_type.name,
                    suggested_type_names,
                    suggested_field_names,
                ),
                node,
            )
        )


def get_suggested_type_names(
    schema: GraphQLSchema, type_: GraphQLOutputType, field_name: str
) -> List[str]:
    """Name the types below an abstract type that define the field.

    These are the possible object types defining the field, preceded by the
    interfaces those objects implement that define the field as well. Interfaces
    come first, the ones implemented by more of these objects before the others.
    Object types are never suggested for an object type.
    """
    if not is_abstract_type(type_):
        return []

    object_names: List[str] = []
    interface_counts: Counter = Counter()
    for object_type in schema.get_possible_types(type_):  # type: ignore
        if field_name in object_type.fields:
            object_names.append(object_type.name)
            interface_counts.update(
                interface.name
                for interface in object_type.interfaces
                if field_name in interface.fields
            )

    # most_common keeps the first-seen order for equal counts
    interface_names = [name for name, _count in interface_counts.most_common()]
    return interface_names + object_names


def get_suggested_field_names(
    schema: GraphQLSchema, type_: GraphQLOutputType, field_name: str
) -> List[str]:
    """Name the fields of the type that look like a misspelling of the field.

    Unions have no fields, so nothing is suggested for them. The schema is not
    consulted, it is accepted so that both suggestion helpers share one signature.
    """
    if is_object_type(type_) or is_interface_type(type_):
        return suggestion_list(field_name, list(type_.fields))  # type: ignore
    return []
