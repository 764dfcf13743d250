import re
from typing import Any

from .location import SourceLocation

__all__ = ["Source"]

_line_break = re.compile(r"\r\n|[\n\r]")


class Source:
    """The text of a GraphQL document together with a name for error reports.

    The name defaults to "GraphQL request". Documents loaded from files can pass the
    file name instead, so that errors read like ``schema.graphql:3:7``.
    """

    __slots__ = "body", "name"

    def __init__(self, body: str, name: str = "GraphQL request") -> None:
        if not isinstance(body, str):
            raise TypeError("body must be a string.")
        if not isinstance(name, str):
            raise TypeError("name must be a string.")
        self.body = body
        self.name = name

    def get_location(self, position: int) -> SourceLocation:
        """Get the line and column of a character offset.

        Line breaks are counted the way the lexer counts them, so a carriage return
        followed by a newline ends a single line.
        """
        lines = _line_break.split(self.body[:position])
        return SourceLocation(len(lines), len(lines[-1]) + 1)

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} name={self.name!r}>"

    def __eq__(self, other: Any) -> bool:
        if isinstance(other, Source):
            return self.body == other.body
        return isinstance(other, str) and self.body == other

    def __ne__(self, other: Any) -> bool:
        return not self == other
