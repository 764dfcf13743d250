import re
from typing import NamedTuple, NoReturn, Optional

from ..error import GraphQLSyntaxError
from .source import Source
from .token_kind import TokenKind

__all__ = ["Lexer", "Token"]


class Token(NamedTuple):
    """A significant token of the source with its span, line and column."""

    kind: TokenKind
    start: int
    end: int
    line: int
    column: int
    value: Optional[str] = None  # names, numbers and decoded strings

    def __str__(self) -> str:
        return self.desc

    def __repr__(self) -> str:
        return f"<Token {self.desc} {self.line}:{self.column}>"

    @property
    def desc(self) -> str:
        """Describe the token the way syntax errors mention it."""
        if self.value:
            return f"{self.kind.value} {self.value!r}"
        return self.kind.value


_punctuators = {
    kind.value: kind
    for kind in TokenKind
    if len(kind.value) == 1 and not kind.value.isalnum()
}

# whitespace, commas, line breaks and comments carry no meaning
_ignored = re.compile(r"(?:[\ufeff\t ,]|#[^\n\r]*|\r\n|[\n\r])*")
_line_break = re.compile(r"\r\n|[\n\r]")
_name = re.compile(r"[_A-Za-z][_0-9A-Za-z]*")
_number = re.compile(r"-?(?:0|[1-9][0-9]*)(\.[0-9]+)?([eE][+-]?[0-9]+)?")
_string_chars = re.compile(
    r'(?:[^"\\\x00-\x08\x0a-\x1f]|\\(?:["\\/bfnrt]|u[0-9A-Fa-f]{4}))*'
)
_escape = re.compile(r"\\(?:u([0-9A-Fa-f]{4})|(.))")
_escaped_chars = {
    '"': '"',
    "/": "/",
    "\\": "\\",
    "b": "\b",
    "f": "\f",
    "n": "\n",
    "r": "\r",
    "t": "\t",
}


def _unescape(match: "re.Match") -> str:
    code, char = match.groups()
    return chr(int(code, 16)) if code else _escaped_chars[char]


def describe_char(char: str) -> str:
    return repr(char) if char else TokenKind.EOF.value


class Lexer:
    """Splits a Source into significant tokens.

    The lexer starts on a ``<SOF>`` token and moves one token ahead with every call
    of :meth:`advance`. After the end of the source it keeps returning the same
    ``<EOF>`` token. Lexing errors are raised as GraphQLSyntaxError when the
    offending token is reached.
    """

    def __init__(self, source: Source) -> None:
        self.source = source
        self.token = self.last_token = Token(TokenKind.SOF, 0, 0, 0, 0)
        self._position = 0
        self._line = 1
        self._line_start = 0
        self._peeked: Optional[Token] = None

    def advance(self) -> Token:
        """Move on to the next token and return it."""
        self.last_token = self.token
        self.token = self.lookahead()
        self._peeked = None
        return self.token

    def lookahead(self) -> Token:
        """Return the token after the current one without moving."""
        if self.token.kind is TokenKind.EOF:
            return self.token
        if self._peeked is None:
            self._peeked = self._read_token()
        return self._peeked

    def _read_token(self) -> Token:
        body = self.source.body
        start = self._skip_ignored(self._position)
        if start >= len(body):
            token = self._token(TokenKind.EOF, start, start)
        else:
            token = self._read_significant(body, start)
        self._position = token.end
        return token

    def _skip_ignored(self, position: int) -> int:
        match = _ignored.match(self.source.body, position)
        breaks = list(_line_break.finditer(match.group()))
        if breaks:
            self._line += len(breaks)
            self._line_start = position + breaks[-1].end()
        return match.end()

    def _token(
        self, kind: TokenKind, start: int, end: int, value: Optional[str] = None
    ) -> Token:
        return Token(kind, start, end, self._line, start - self._line_start + 1, value)

    def _read_significant(self, body: str, start: int) -> Token:
        char = body[start]
        kind = _punctuators.get(char)
        if kind:
            return self._token(kind, start, start + 1)
        if body.startswith("...", start):
            return self._token(TokenKind.SPREAD, start, start + 3)
        if char == '"':
            return self._read_string(body, start)
        match = _name.match(body, start)
        if match:
            return self._token(TokenKind.NAME, start, match.end(), match.group())
        if char == "-" or "0" <= char <= "9":
            return self._read_number(body, start)
        self._fail(start, unexpected_character_message(char))

    def _read_number(self, body: str, start: int) -> Token:
        match = _number.match(body, start)
        if not match:  # a minus sign that is not followed by a digit
            self._expected_digit(start + 1)
        fraction, exponent = match.groups()
        end = match.end()
        char = body[end : end + 1]
        if "0" <= char <= "9":  # only a lone leading zero stops before a digit
            self._fail(
                end, f"Invalid number, unexpected digit after 0: {describe_char(char)}."
            )
        if char == "." and not (fraction or exponent):
            self._expected_digit(end + 1)
        if char in ("e", "E") and not exponent:
            position = end + 1
            if body[position : position + 1] in ("+", "-"):
                position += 1
            self._expected_digit(position)
        if char == "." or _name.match(char):
            self._expected_digit(end)
        kind = TokenKind.FLOAT if fraction or exponent else TokenKind.INT
        return self._token(kind, start, end, match.group())

    def _read_string(self, body: str, start: int) -> Token:
        end = _string_chars.match(body, start + 1).end()
        char = body[end : end + 1]
        if char == '"':
            value = _escape.sub(_unescape, body[start + 1 : end])
            return self._token(TokenKind.STRING, start, end + 1, value)
        if char == "\\":
            sequence = body[end + 1 : end + 2]
            if sequence == "u":
                sequence += body[end + 2 : end + 6]
            self._fail(end + 1, f"Invalid character escape sequence: \\{sequence}.")
        if not char or char in "\n\r":
            self._fail(end, "Unterminated string.")
        self._fail(end, f"Invalid character within String: {describe_char(char)}.")

    def _expected_digit(self, position: int) -> NoReturn:
        char = self.source.body[position : position + 1]
        self._fail(
            position, f"Invalid number, expected digit but got: {describe_char(char)}."
        )

    def _fail(self, position: int, description: str) -> NoReturn:
        raise GraphQLSyntaxError(self.source, position, description)


def unexpected_character_message(char: str) -> str:
    """Describe a character that cannot start any token."""
    if char < " " and char not in "\t\n\r":
        return f"Cannot contain the invalid character {describe_char(char)}."
    if char == "'":
        return (
            "Unexpected single quote character ('),"
            ' did you mean to use a double quote (")?'
        )
    return f"Cannot parse the unexpected character {describe_char(char)}."
