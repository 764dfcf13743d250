from typing import Any, Collection, Dict, List, Optional, Union, TYPE_CHECKING

if TYPE_CHECKING:
    from ..language.ast import Node  # noqa: F401
    from ..language.location import SourceLocation  # noqa: F401
    from ..language.source import Source  # noqa: F401

__all__ = ["GraphQLError", "format_error", "print_error"]


class GraphQLError(Exception):
    """A problem found while parsing or validating a GraphQL document.

    Errors refer to the syntax tree nodes they are about. The nodes, or else an
    explicit source with character positions, give the line and column locations
    that are reported together with the message.

    An error compares equal to another error with the same attributes, and to a
    dictionary holding a "message" and any other attributes to be checked, which
    keeps assertions about reported errors short.
    """

    message: str
    nodes: Optional[List["Node"]]  # the nodes the error is about
    source: Optional["Source"]  # the document of the first location
    positions: Optional[List[int]]  # character offsets in the source
    locations: Optional[List["SourceLocation"]]  # the positions as line and column
    extensions: Dict[str, Any]  # additional entries for the formatted error

    __slots__ = "message", "nodes", "source", "positions", "locations", "extensions"

    __hash__ = Exception.__hash__

    def __init__(
        self,
        message: str,
        nodes: Union[Collection["Node"], "Node", None] = None,
        source: Optional["Source"] = None,
        positions: Optional[Collection[int]] = None,
        extensions: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        if nodes is None:
            nodes = []
        elif not isinstance(nodes, (list, tuple)):
            nodes = [nodes]  # type: ignore
        self.nodes = list(nodes) or None  # type: ignore
        node_locs = [node.loc for node in self.nodes or () if node.loc]
        if source is None and node_locs:
            source = node_locs[0].source
        self.source = source
        if not positions:
            positions = [loc.start for loc in node_locs]
        self.positions = list(positions) or None
        self.locations = (
            [source.get_location(position) for position in self.positions]
            if source and self.positions
            else None
        )
        self.extensions = dict(extensions) if extensions else {}

    def __str__(self) -> str:
        return print_error(self)

    def __repr__(self) -> str:
        args = [repr(self.message)]
        if self.locations:
            args.append(f"locations={self.locations!r}")
        if self.extensions:
            args.append(f"extensions={self.extensions!r}")
        return f"{self.__class__.__name__}({', '.join(args)})"

    def __eq__(self, other: Any) -> bool:
        if isinstance(other, GraphQLError):
            return type(other) is type(self) and all(
                getattr(self, attr) == getattr(other, attr) for attr in self.__slots__
            )
        if isinstance(other, dict) and "message" in other:
            return all(
                key in self.__slots__ and getattr(self, key) == value
                for key, value in other.items()
            )
        return False

    def __ne__(self, other: Any) -> bool:
        return not self == other

    @property
    def formatted(self) -> Dict[str, Any]:
        """The error as a dictionary, see :func:`format_error`."""
        return format_error(self)


def print_error(error: GraphQLError) -> str:
    """Print the message followed by a "name:line:column" line per location."""
    parts = [error.message]
    if error.source and error.locations:
        parts.extend(
            f"{error.source.name}:{line}:{column}" for line, column in error.locations
        )
    return "\n\n".join(parts)


def format_error(error: GraphQLError) -> Dict[str, Any]:
    """Turn the error into a dictionary that can be serialized as JSON.

    The dictionary holds the "message" and the "locations" as a list of line and
    column dictionaries, or None. The "extensions" are only added if there are any.
    """
    if not isinstance(error, GraphQLError):
        raise TypeError("Expected a GraphQLError.")
    formatted: Dict[str, Any] = {
        "message": error.message or "An unknown error occurred.",
        "locations": None
        if error.locations is None
        else [location.formatted for location in error.locations],
    }
    if error.extensions:
        formatted["extensions"] = error.extensions
    return formatted
