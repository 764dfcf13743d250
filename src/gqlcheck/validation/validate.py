import logging
from typing import List, Optional, Sequence

from ..error import GraphQLError
from ..language import DocumentNode, ParallelVisitor, visit
from ..type import GraphQLSchema, assert_schema
from ..utilities import TypeInfo, TypeInfoVisitor
from .rules import RuleType
from .specified_rules import specified_rules
from .validation_context import ValidationContext

__all__ = ["validate"]

logger = logging.getLogger(__name__)


def validate(
    schema: GraphQLSchema,
    document_ast: DocumentNode,
    rules: Optional[Sequence[RuleType]] = None,
    type_info: Optional[TypeInfo] = None,
) -> List[GraphQLError]:
    """Check the document against the schema and return the errors found.

    All rules run side by side in a single walk through the document. Without
    explicit ``rules``, the field selections are checked against their parent types.
    A document without errors gives an empty list.

    A rule is a class that is instantiated with the :class:`ValidationContext` and
    visits the document, see :class:`~gqlcheck.validation.ValidationRule`. The
    ``type_info`` tracking the types during the walk can be passed in as well, for
    instance one with its own way of looking up field definitions.
    """
    if not isinstance(document_ast, DocumentNode):
        raise TypeError("You must provide a document node.")
    assert_schema(schema)
    if rules is None:
        rules = specified_rules
    elif not isinstance(rules, (list, tuple)):
        raise TypeError("Rules must be passed as a list/tuple.")
    if type_info is None:
        type_info = TypeInfo(schema)
    elif not isinstance(type_info, TypeInfo):
        raise TypeError(f"Not a TypeInfo object: {type_info!r}.")

    context = ValidationContext(schema, document_ast, type_info)
    visitors = [rule(context) for rule in rules]
    visit(document_ast, TypeInfoVisitor(type_info, ParallelVisitor(visitors)))
    logger.debug(
        "Validated document with %d rules, found %d errors.",
        len(visitors),
        len(context.errors),
    )
    return context.errors
