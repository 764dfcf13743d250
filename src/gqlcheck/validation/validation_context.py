from typing import List, Optional

from ..error import GraphQLError
from ..language import DocumentNode
from ..type import GraphQLCompositeType, GraphQLField, GraphQLOutputType, GraphQLSchema
from ..utilities import TypeInfo

__all__ = ["ValidationContext"]


class ValidationContext:
    """Utility class providing a context for validation.

    An instance of this class is passed as the context attribute to all Validators,
    allowing access to commonly useful contextual information from within a
    validation rule. The type information is read from the TypeInfo that is kept in
    sync with the traversal of the document.
    """

    schema: GraphQLSchema
    document: DocumentNode
    errors: List[GraphQLError]

    def __init__(
        self, schema: GraphQLSchema, document: DocumentNode, type_info: TypeInfo
    ) -> None:
        self.schema = schema
        self.document = document
        self._type_info = type_info
        self.errors = []

    def report_error(self, error: GraphQLError) -> None:
        self.errors.append(error)

    def get_type(self) -> Optional[GraphQLOutputType]:
        return self._type_info.get_type()

    def get_parent_type(self) -> Optional[GraphQLCompositeType]:
        return self._type_info.get_parent_type()

    def get_field_def(self) -> Optional[GraphQLField]:
        return self._type_info.get_field_def()
