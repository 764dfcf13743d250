from typing import Callable, List, Optional, TypeVar, Union

from ..error import GraphQLSyntaxError
from .ast import (
    ArgumentNode,
    DefinitionNode,
    DirectiveNode,
    DocumentNode,
    EnumTypeDefinitionNode,
    EnumValueDefinitionNode,
    FieldDefinitionNode,
    FieldNode,
    FragmentDefinitionNode,
    FragmentSpreadNode,
    InlineFragmentNode,
    InputValueDefinitionNode,
    InterfaceTypeDefinitionNode,
    ListTypeNode,
    Location,
    NamedTypeNode,
    NameNode,
    NonNullTypeNode,
    ObjectTypeDefinitionNode,
    OperationDefinitionNode,
    OperationType,
    OperationTypeDefinitionNode,
    ScalarTypeDefinitionNode,
    SchemaDefinitionNode,
    SelectionNode,
    SelectionSetNode,
    StringValueNode,
    TypeNode,
    UnionTypeDefinitionNode,
    ValueNode,
    VariableDefinitionNode,
)
from .lexer import Lexer, Token
from .source import Source
from .token_kind import TokenKind

__all__ = ["parse", "Parser"]

SourceType = Union[Source, str]

N = TypeVar("N")

# value tokens that stand on their own, names cover true, false, null and enums
_single_token_values = (
    TokenKind.INT,
    TokenKind.FLOAT,
    TokenKind.STRING,
    TokenKind.NAME,
)


def parse(source: SourceType, no_location: bool = False) -> DocumentNode:
    """Parse a GraphQL document.

    The document may mix operations and fragments with schema, scalar, type,
    interface, union and enum definitions. A GraphQLSyntaxError is raised for the
    first token that does not fit the grammar.

    Every node records the span of source it was parsed from, unless
    ``no_location`` is set.
    """
    return Parser(source, no_location=no_location).parse_document()


class Parser:
    """Recursive descent parser working on the tokens of a :class:`Lexer`.

    Each ``parse_`` method reads one production, starting at the current token, and
    leaves the lexer on the first token after it.
    """

    _keyword_methods = {
        "query": "parse_operation_definition",
        "mutation": "parse_operation_definition",
        "subscription": "parse_operation_definition",
        "fragment": "parse_fragment_definition",
        "schema": "parse_schema_definition",
        "scalar": "parse_scalar_type_definition",
        "type": "parse_object_type_definition",
        "interface": "parse_interface_type_definition",
        "union": "parse_union_type_definition",
        "enum": "parse_enum_type_definition",
    }

    # only type system definitions may start with a description
    _described_keywords = frozenset(
        ("schema", "scalar", "type", "interface", "union", "enum")
    )

    def __init__(self, source: SourceType, no_location: bool = False) -> None:
        if isinstance(source, str):
            source = Source(source)
        elif not isinstance(source, Source):
            raise TypeError(f"Must provide Source. Received: {source!r}")
        self.source = source
        self.no_location = no_location
        self._lexer = Lexer(source)

    # Documents and operations

    def parse_document(self) -> DocumentNode:
        start = self._lexer.token
        definitions = self.many(TokenKind.SOF, self.parse_definition, TokenKind.EOF)
        return DocumentNode(definitions=definitions, loc=self.loc(start))

    def parse_definition(self) -> DefinitionNode:
        token = self._lexer.token
        if token.kind is TokenKind.BRACE_L:
            return self.parse_operation_definition()
        if token.kind is TokenKind.STRING:
            keyword = self._lexer.lookahead()
            if (
                keyword.kind is not TokenKind.NAME
                or keyword.value not in self._described_keywords
            ):
                raise self.unexpected(keyword)
            return getattr(self, self._keyword_methods[keyword.value])()
        if token.kind is TokenKind.NAME and token.value in self._keyword_methods:
            return getattr(self, self._keyword_methods[token.value])()
        raise self.unexpected()

    def parse_operation_definition(self) -> OperationDefinitionNode:
        start = self._lexer.token
        if start.kind is TokenKind.BRACE_L:
            # the query shorthand has neither a name nor variables
            return OperationDefinitionNode(
                operation=OperationType.QUERY,
                name=None,
                variable_definitions=[],
                directives=[],
                selection_set=self.parse_selection_set(),
                loc=self.loc(start),
            )
        operation = self.parse_operation_type()
        name = self.parse_name() if self.peek(TokenKind.NAME) else None
        variable_definitions = self.optional_many(
            TokenKind.PAREN_L, self.parse_variable_definition, TokenKind.PAREN_R
        )
        directives = self.parse_directives(const=False)
        return OperationDefinitionNode(
            operation=operation,
            name=name,
            variable_definitions=variable_definitions,
            directives=directives,
            selection_set=self.parse_selection_set(),
            loc=self.loc(start),
        )

    def parse_operation_type(self) -> OperationType:
        token = self.expect(TokenKind.NAME)
        try:
            return OperationType(token.value)
        except ValueError:
            raise self.unexpected(token)

    def parse_variable_definition(self) -> VariableDefinitionNode:
        start = self.expect(TokenKind.DOLLAR)
        name = self.parse_name()
        self.expect(TokenKind.COLON)
        type_ = self.parse_type_reference()
        default_value = (
            self.parse_value(const=True) if self.skip(TokenKind.EQUALS) else None
        )
        return VariableDefinitionNode(
            name=name,
            type=type_,
            default_value=default_value,
            directives=self.parse_directives(const=True),
            loc=self.loc(start),
        )

    # Selections

    def parse_selection_set(self) -> SelectionSetNode:
        start = self._lexer.token
        selections = self.many(
            TokenKind.BRACE_L, self.parse_selection, TokenKind.BRACE_R
        )
        return SelectionSetNode(selections=selections, loc=self.loc(start))

    def parse_selection(self) -> SelectionNode:
        if self.peek(TokenKind.SPREAD):
            return self.parse_fragment()
        return self.parse_field()

    def parse_field(self) -> FieldNode:
        start = self._lexer.token
        name_or_alias = self.parse_name()
        if self.skip(TokenKind.COLON):
            alias: Optional[NameNode] = name_or_alias
            name = self.parse_name()
        else:
            alias, name = None, name_or_alias
        arguments = self.parse_arguments(const=False)
        directives = self.parse_directives(const=False)
        selection_set = (
            self.parse_selection_set() if self.peek(TokenKind.BRACE_L) else None
        )
        return FieldNode(
            alias=alias,
            name=name,
            arguments=arguments,
            directives=directives,
            selection_set=selection_set,
            loc=self.loc(start),
        )

    def parse_arguments(self, const: bool) -> List[ArgumentNode]:
        def parse_argument() -> ArgumentNode:
            start = self._lexer.token
            name = self.parse_name()
            self.expect(TokenKind.COLON)
            value = self.parse_value(const)
            return ArgumentNode(name=name, value=value, loc=self.loc(start))

        return self.optional_many(TokenKind.PAREN_L, parse_argument, TokenKind.PAREN_R)

    def parse_fragment(self) -> Union[FragmentSpreadNode, InlineFragmentNode]:
        """Read a fragment spread or an inline fragment, both start with ``...``."""
        start = self.expect(TokenKind.SPREAD)
        on_type = self.skip_keyword("on")
        if not on_type and self.peek(TokenKind.NAME):
            return FragmentSpreadNode(
                name=self.parse_fragment_name(),
                directives=self.parse_directives(const=False),
                loc=self.loc(start),
            )
        return InlineFragmentNode(
            type_condition=self.parse_named_type() if on_type else None,
            directives=self.parse_directives(const=False),
            selection_set=self.parse_selection_set(),
            loc=self.loc(start),
        )

    def parse_fragment_definition(self) -> FragmentDefinitionNode:
        start = self._lexer.token
        self.expect_keyword("fragment")
        name = self.parse_fragment_name()
        self.expect_keyword("on")
        return FragmentDefinitionNode(
            name=name,
            type_condition=self.parse_named_type(),
            directives=self.parse_directives(const=False),
            selection_set=self.parse_selection_set(),
            loc=self.loc(start),
        )

    def parse_fragment_name(self) -> NameNode:
        if self._lexer.token.value == "on":
            raise self.unexpected()
        return self.parse_name()

    # Values, directives and type references

    def parse_value(self, const: bool) -> ValueNode:
        """Read a value without interpreting it.

        Strings are decoded. Everything else, including lists, input objects and
        variables, is kept as the source text it spans. Variables are rejected in
        constant values such as defaults.
        """
        start = self._lexer.token
        if start.kind is TokenKind.STRING:
            self._lexer.advance()
            return StringValueNode(
                text=self.source.body[start.start : start.end],
                value=start.value,
                loc=self.loc(start),
            )
        self.skip_value(const)
        end = self._lexer.last_token.end
        return ValueNode(text=self.source.body[start.start : end], loc=self.loc(start))

    def skip_value(self, const: bool) -> None:
        token = self._lexer.token
        if token.kind in _single_token_values:
            self._lexer.advance()
        elif token.kind is TokenKind.BRACKET_L:
            self._lexer.advance()
            while not self.skip(TokenKind.BRACKET_R):
                self.skip_value(const)
        elif token.kind is TokenKind.BRACE_L:
            self._lexer.advance()
            while not self.skip(TokenKind.BRACE_R):
                self.expect(TokenKind.NAME)
                self.expect(TokenKind.COLON)
                self.skip_value(const)
        elif token.kind is TokenKind.DOLLAR and not const:
            self._lexer.advance()
            self.expect(TokenKind.NAME)
        else:
            raise self.unexpected(token)

    def parse_directives(self, const: bool) -> List[DirectiveNode]:
        directives: List[DirectiveNode] = []
        while self.peek(TokenKind.AT):
            start = self.expect(TokenKind.AT)
            name = self.parse_name()
            arguments = self.parse_arguments(const)
            directives.append(
                DirectiveNode(name=name, arguments=arguments, loc=self.loc(start))
            )
        return directives

    def parse_type_reference(self) -> TypeNode:
        start = self._lexer.token
        type_: TypeNode
        if self.skip(TokenKind.BRACKET_L):
            of_type = self.parse_type_reference()
            self.expect(TokenKind.BRACKET_R)
            type_ = ListTypeNode(type=of_type, loc=self.loc(start))
        else:
            type_ = self.parse_named_type()
        if self.skip(TokenKind.BANG):
            type_ = NonNullTypeNode(type=type_, loc=self.loc(start))
        return type_

    def parse_named_type(self) -> NamedTypeNode:
        start = self._lexer.token
        return NamedTypeNode(name=self.parse_name(), loc=self.loc(start))

    def parse_name(self) -> NameNode:
        token = self.expect(TokenKind.NAME)
        return NameNode(value=token.value, loc=self.loc(token))

    # Type system definitions

    def parse_description(self) -> Optional[StringValueNode]:
        if self.peek(TokenKind.STRING):
            return self.parse_value(const=True)  # type: ignore
        return None

    def parse_schema_definition(self) -> SchemaDefinitionNode:
        start = self._lexer.token
        self.parse_description()
        self.expect_keyword("schema")
        directives = self.parse_directives(const=True)
        operation_types = self.many(
            TokenKind.BRACE_L, self.parse_operation_type_definition, TokenKind.BRACE_R
        )
        return SchemaDefinitionNode(
            directives=directives,
            operation_types=operation_types,
            loc=self.loc(start),
        )

    def parse_operation_type_definition(self) -> OperationTypeDefinitionNode:
        start = self._lexer.token
        operation = self.parse_operation_type()
        self.expect(TokenKind.COLON)
        return OperationTypeDefinitionNode(
            operation=operation, type=self.parse_named_type(), loc=self.loc(start)
        )

    def parse_scalar_type_definition(self) -> ScalarTypeDefinitionNode:
        start = self._lexer.token
        description = self.parse_description()
        self.expect_keyword("scalar")
        return ScalarTypeDefinitionNode(
            description=description,
            name=self.parse_name(),
            directives=self.parse_directives(const=True),
            loc=self.loc(start),
        )

    def parse_object_type_definition(self) -> ObjectTypeDefinitionNode:
        start = self._lexer.token
        description = self.parse_description()
        self.expect_keyword("type")
        name = self.parse_name()
        interfaces: List[NamedTypeNode] = []
        if self.skip_keyword("implements"):
            interfaces = self.delimited(TokenKind.AMP, self.parse_named_type)
        return ObjectTypeDefinitionNode(
            description=description,
            name=name,
            interfaces=interfaces,
            directives=self.parse_directives(const=True),
            fields=self.parse_fields_definition(),
            loc=self.loc(start),
        )

    def parse_interface_type_definition(self) -> InterfaceTypeDefinitionNode:
        start = self._lexer.token
        description = self.parse_description()
        self.expect_keyword("interface")
        return InterfaceTypeDefinitionNode(
            description=description,
            name=self.parse_name(),
            directives=self.parse_directives(const=True),
            fields=self.parse_fields_definition(),
            loc=self.loc(start),
        )

    def parse_fields_definition(self) -> List[FieldDefinitionNode]:
        return self.optional_many(
            TokenKind.BRACE_L, self.parse_field_definition, TokenKind.BRACE_R
        )

    def parse_field_definition(self) -> FieldDefinitionNode:
        start = self._lexer.token
        description = self.parse_description()
        name = self.parse_name()
        arguments = self.optional_many(
            TokenKind.PAREN_L, self.parse_input_value_definition, TokenKind.PAREN_R
        )
        self.expect(TokenKind.COLON)
        return FieldDefinitionNode(
            description=description,
            name=name,
            arguments=arguments,
            type=self.parse_type_reference(),
            directives=self.parse_directives(const=True),
            loc=self.loc(start),
        )

    def parse_input_value_definition(self) -> InputValueDefinitionNode:
        start = self._lexer.token
        description = self.parse_description()
        name = self.parse_name()
        self.expect(TokenKind.COLON)
        type_ = self.parse_type_reference()
        default_value = (
            self.parse_value(const=True) if self.skip(TokenKind.EQUALS) else None
        )
        return InputValueDefinitionNode(
            description=description,
            name=name,
            type=type_,
            default_value=default_value,
            directives=self.parse_directives(const=True),
            loc=self.loc(start),
        )

    def parse_union_type_definition(self) -> UnionTypeDefinitionNode:
        start = self._lexer.token
        description = self.parse_description()
        self.expect_keyword("union")
        name = self.parse_name()
        directives = self.parse_directives(const=True)
        types: List[NamedTypeNode] = []
        if self.skip(TokenKind.EQUALS):
            types = self.delimited(TokenKind.PIPE, self.parse_named_type)
        return UnionTypeDefinitionNode(
            description=description,
            name=name,
            directives=directives,
            types=types,
            loc=self.loc(start),
        )

    def parse_enum_type_definition(self) -> EnumTypeDefinitionNode:
        start = self._lexer.token
        description = self.parse_description()
        self.expect_keyword("enum")
        return EnumTypeDefinitionNode(
            description=description,
            name=self.parse_name(),
            directives=self.parse_directives(const=True),
            values=self.optional_many(
                TokenKind.BRACE_L, self.parse_enum_value_definition, TokenKind.BRACE_R
            ),
            loc=self.loc(start),
        )

    def parse_enum_value_definition(self) -> EnumValueDefinitionNode:
        start = self._lexer.token
        return EnumValueDefinitionNode(
            description=self.parse_description(),
            name=self.parse_name(),
            directives=self.parse_directives(const=True),
            loc=self.loc(start),
        )

    # Token helpers

    def loc(self, start: Token) -> Optional[Location]:
        """Get the location from the given token to the last consumed one."""
        if self.no_location:
            return None
        return Location(start.start, self._lexer.last_token.end, self.source)

    def peek(self, kind: TokenKind) -> bool:
        return self._lexer.token.kind is kind

    def skip(self, kind: TokenKind) -> bool:
        """Consume the current token if it has the given kind."""
        if self._lexer.token.kind is kind:
            self._lexer.advance()
            return True
        return False

    def expect(self, kind: TokenKind) -> Token:
        """Consume and return the current token, which must have the given kind."""
        token = self._lexer.token
        if token.kind is not kind:
            raise GraphQLSyntaxError(
                self.source, token.start, f"Expected {kind.value}, found {token.desc}."
            )
        self._lexer.advance()
        return token

    def skip_keyword(self, keyword: str) -> bool:
        token = self._lexer.token
        if token.kind is TokenKind.NAME and token.value == keyword:
            self._lexer.advance()
            return True
        return False

    def expect_keyword(self, keyword: str) -> None:
        if not self.skip_keyword(keyword):
            token = self._lexer.token
            raise GraphQLSyntaxError(
                self.source, token.start, f"Expected {keyword!r}, found {token.desc}."
            )

    def unexpected(self, token: Optional[Token] = None) -> GraphQLSyntaxError:
        token = token or self._lexer.token
        return GraphQLSyntaxError(self.source, token.start, f"Unexpected {token.desc}.")

    def many(
        self, open_kind: TokenKind, parse_item: Callable[[], N], close_kind: TokenKind
    ) -> List[N]:
        """Read one or more items between the given opening and closing tokens."""
        self.expect(open_kind)
        items = [parse_item()]
        while not self.skip(close_kind):
            items.append(parse_item())
        return items

    def optional_many(
        self, open_kind: TokenKind, parse_item: Callable[[], N], close_kind: TokenKind
    ) -> List[N]:
        if self.peek(open_kind):
            return self.many(open_kind, parse_item, close_kind)
        return []

    def delimited(
        self, delimiter: TokenKind, parse_item: Callable[[], N]
    ) -> List[N]:
        """Read items separated by a delimiter, which may also lead the list."""
        self.skip(delimiter)
        items = [parse_item()]
        while self.skip(delimiter):
            items.append(parse_item())
        return items
