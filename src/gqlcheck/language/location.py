"""Line and column positions inside a source document"""

from typing import TYPE_CHECKING, Any, Dict, NamedTuple

if TYPE_CHECKING:
    from .source import Source  # noqa: F401

__all__ = ["SourceLocation", "get_location"]


class SourceLocation(NamedTuple):
    """A 1-based line and column pair.

    Compares equal to plain ``(line, column)`` tuples and to the dictionaries that
    :attr:`formatted` produces.
    """

    line: int
    column: int

    @property
    def formatted(self) -> Dict[str, int]:
        return {"line": self.line, "column": self.column}

    def __eq__(self, other: Any) -> bool:
        if isinstance(other, dict):
            return other == self.formatted
        return (self.line, self.column) == other

    def __ne__(self, other: Any) -> bool:
        return not self == other

    def __hash__(self) -> int:
        return hash((self.line, self.column))


def get_location(source: "Source", position: int) -> SourceLocation:
    """Translate a character offset in the source into a SourceLocation."""
    return source.get_location(position)
