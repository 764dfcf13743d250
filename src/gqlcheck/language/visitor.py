from enum import Enum
from typing import Any, Callable, List, Optional, Sequence, Tuple, Union

from .ast import Node, node_kinds

__all__ = [
    "Visitor",
    "ParallelVisitor",
    "VisitorAction",
    "visit",
    "BREAK",
    "SKIP",
    "IDLE",
]


class VisitorActionEnum(Enum):
    """Values a visitor method can return to steer the traversal.

    ``True`` and ``False`` are understood as BREAK and SKIP as well.
    """

    BREAK = True
    SKIP = False


VisitorAction = Optional[VisitorActionEnum]

BREAK = VisitorActionEnum.BREAK
SKIP = VisitorActionEnum.SKIP
IDLE = None

Path = List[Union[int, str]]


class Visitor:
    """Base class for visitors of the syntax tree.

    A visitor is called when a node is entered and again when it is left, after all
    of its children have been visited. Methods named ``enter_<kind>`` and
    ``leave_<kind>``, such as ``enter_field``, handle nodes of a single kind. The
    generic ``enter`` and ``leave`` methods handle all other nodes. All of them get
    the same arguments::

        def enter_field(self, node, key, parent, path, ancestors):
            ...

    where ``key`` is the attribute name or index of the node in its ``parent``,
    which is either a node or a tuple of nodes, ``path`` is the list of keys leading
    from the root to the node, and ``ancestors`` holds the nodes and tuples above
    the parent.

    Returning SKIP on enter leaves out the children of the node, and BREAK stops
    the traversal. Any other return value lets the traversal go on.
    """

    BREAK, SKIP, IDLE = BREAK, SKIP, IDLE

    def __init_subclass__(cls) -> None:
        super().__init_subclass__()
        for attr in cls.__dict__:
            method, _, kind = attr.partition("_")
            if method in ("enter", "leave") and kind and kind not in node_kinds:
                raise TypeError(f"Invalid AST node kind: {kind}.")

    def get_visit_fn(
        self, kind: str, is_leaving: bool = False
    ) -> Optional[Callable[..., Any]]:
        """Get the method handling nodes of the given kind in the given direction."""
        method = "leave" if is_leaving else "enter"
        return getattr(self, f"{method}_{kind}", None) or getattr(self, method, None)


def visit(root: Node, visitor: Visitor) -> None:
    """Walk the tree below the root depth first, calling the visitor on the way.

    See :class:`Visitor` for the methods that are called and how their return
    values change the traversal.
    """
    if not isinstance(root, Node):
        raise TypeError(f"Not an AST Node: {root!r}.")
    if not isinstance(visitor, Visitor):
        raise TypeError(f"Not an AST Visitor: {visitor!r}.")
    _Traversal(visitor).visit_node(root, None, None)


def _action(result: Any) -> VisitorAction:
    if result is BREAK or result is True:
        return BREAK
    if result is SKIP or result is False:
        return SKIP
    return IDLE


class _Traversal:
    """The state of one walk through a tree."""

    def __init__(self, visitor: Visitor) -> None:
        self.visitor = visitor
        self.path: Path = []
        self.ancestors: List[Any] = []

    def call(self, node: Node, key: Any, parent: Any, leaving: bool) -> VisitorAction:
        fn = self.visitor.get_visit_fn(node.kind, is_leaving=leaving)
        if not fn:
            return IDLE
        return _action(fn(node, key, parent, self.path, self.ancestors))

    def visit_node(self, node: Node, key: Any, parent: Any) -> bool:
        """Visit a node with its subtree, return whether the walk goes on."""
        if not isinstance(node, Node):
            raise TypeError(f"Invalid AST Node: {node!r}.")
        action = self.call(node, key, parent, leaving=False)
        if action is BREAK:
            return False
        if action is not SKIP:
            if parent is not None:
                self.ancestors.append(parent)
            go_on = all(self.visit_child(node, name) for name in node.children)
            if parent is not None:
                self.ancestors.pop()
            if not go_on:
                return False
            return self.call(node, key, parent, leaving=True) is not BREAK
        return True

    def visit_child(self, node: Node, name: str) -> bool:
        child = getattr(node, name)
        if child is None:
            return True
        self.path.append(name)
        if isinstance(child, tuple):
            go_on = self.visit_items(child, node)
        else:
            go_on = self.visit_node(child, name, node)
        self.path.pop()
        return go_on

    def visit_items(self, items: Tuple[Node, ...], node: Node) -> bool:
        self.ancestors.append(node)
        go_on = True
        for index, item in enumerate(items):
            self.path.append(index)
            go_on = self.visit_node(item, index, items)
            self.path.pop()
            if not go_on:
                break
        self.ancestors.pop()
        return go_on


class ParallelVisitor(Visitor):
    """Runs several visitors side by side in a single traversal.

    Every node is passed to all visitors in turn. When one of them skips a subtree
    or breaks off, only that visitor stops getting calls while the others go on.
    """

    def __init__(self, visitors: Sequence[Visitor]):
        self.visitors = visitors
        # per visitor: None, the node whose subtree is skipped, or BREAK
        self.skipping: List[Any] = [None] * len(visitors)

    def enter(self, node: Node, *args: Any) -> VisitorAction:
        for index, visitor in enumerate(self.visitors):
            if self.skipping[index] is not None:
                continue
            fn = visitor.get_visit_fn(node.kind)
            action = _action(fn(node, *args)) if fn else IDLE
            if action is SKIP:
                self.skipping[index] = node
            elif action is BREAK:
                self.skipping[index] = BREAK
        return IDLE

    def leave(self, node: Node, *args: Any) -> VisitorAction:
        for index, visitor in enumerate(self.visitors):
            skipped = self.skipping[index]
            if skipped is None:
                fn = visitor.get_visit_fn(node.kind, is_leaving=True)
                if fn and _action(fn(node, *args)) is BREAK:
                    self.skipping[index] = BREAK
            elif skipped is node:
                self.skipping[index] = None
        return IDLE
