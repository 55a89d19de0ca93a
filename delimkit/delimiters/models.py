from __future__ import annotations

from dataclasses import dataclass, field


class Node:
    """Minimal inline node tree: ordered children with parent links."""

    def __init__(self) -> None:
        self.parent: Node | None = None
        self.children: list[Node] = []

    @property
    def next_sibling(self) -> Node | None:
        if self.parent is None:
            return None
        siblings = self.parent.children
        idx = self._index_in_parent()
        return siblings[idx + 1] if idx + 1 < len(siblings) else None

    def _index_in_parent(self) -> int:
        assert self.parent is not None
        for i, child in enumerate(self.parent.children):
            if child is self:
                return i
        raise LookupError("node not found in its parent")

    def detach(self) -> None:
        if self.parent is not None:
            del self.parent.children[self._index_in_parent()]
            self.parent = None

    def append_child(self, child: Node) -> None:
        child.detach()
        child.parent = self
        self.children.append(child)

    def insert_after(self, sibling: Node) -> None:
        if self.parent is None:
            raise ValueError("cannot insert after a detached node")
        sibling.detach()
        idx = self._index_in_parent()
        sibling.parent = self.parent
        self.parent.children.insert(idx + 1, sibling)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.children!r})"


class Text(Node):
    """String container; delimiter runs live in Text nodes."""

    def __init__(self, content: str = "") -> None:
        super().__init__()
        self.content = content

    def __repr__(self) -> str:
        return f"Text({self.content!r})"


class Container(Node):
    def __init__(self, delimiter: str = "") -> None:
        super().__init__()
        self.delimiter = delimiter

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.delimiter!r}, {self.children!r})"


class Emphasis(Container):
    pass


class Strong(Container):
    pass


class Strikethrough(Container):
    pass


NODE_TYPES: dict[str, type[Container]] = {
    "emphasis": Emphasis,
    "strong": Strong,
    "strikethrough": Strikethrough,
}


@dataclass(eq=False)
class DelimiterRun:
    """One opener or closer occurrence as tracked by the delimiter stack.

    `length` is the number of marker characters still available; it shrinks
    as pairings consume characters. `original_length` never changes.
    """

    char: str
    length: int
    can_open: bool = True
    can_close: bool = True
    node: Text | None = None
    original_length: int = field(default=-1)

    def __post_init__(self) -> None:
        if self.original_length < 0:
            self.original_length = self.length
