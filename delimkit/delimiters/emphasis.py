from __future__ import annotations

from typing import Callable

from .base import BaseMatchStrategy
from .models import Container, DelimiterRun, Emphasis, Strong, Text


def wrap_between(opener: Text, closer: Text, container: Container) -> Container:
    """Move the siblings strictly between `opener` and `closer` into `container`.

    The container is inserted right after the opener.
    """
    tmp = opener.next_sibling
    while tmp is not None and tmp is not closer:
        nxt = tmp.next_sibling
        container.append_child(tmp)
        tmp = nxt
    opener.insert_after(container)
    return container


class EmphasisStrategy(BaseMatchStrategy):
    """CommonMark emphasis (`*a*`) and strong emphasis (`**a**`).

    Consumes two characters when both runs still have at least two, one
    otherwise. Runs that can both open and close obey the rule of three:
    when the original lengths sum to a multiple of 3 the pair does not
    match unless both lengths are multiples of 3.
    """

    def __init__(self, char: str, *, enable_em: bool = True, enable_strong: bool = True) -> None:
        if len(char) != 1:
            raise ValueError(f"Delimiter character must be a single character, got {char!r}")
        self.char = char
        self.enable_em = enable_em
        self.enable_strong = enable_strong

    @property
    def opening_char(self) -> str:
        return self.char

    @property
    def closing_char(self) -> str:
        return self.char

    @property
    def min_length(self) -> int:
        return 1

    def get_delimiter_use(self, opener: DelimiterRun, closer: DelimiterRun) -> int:
        if (opener.can_close or closer.can_open) and closer.original_length % 3 != 0:
            if (opener.original_length + closer.original_length) % 3 == 0:
                return 0

        if self.enable_strong and opener.length >= 2 and closer.length >= 2:
            return 2
        if self.enable_em:
            return 1
        return 0

    def process(self, opener: Text, closer: Text, delimiter_use: int) -> Container | None:
        if delimiter_use == 1:
            container: Container = Emphasis(self.char)
        elif delimiter_use == 2:
            container = Strong(self.char * 2)
        else:
            return None
        return wrap_between(opener, closer, container)


class FixedLengthStrategy(BaseMatchStrategy):
    """Match only when both runs carry at least `length` characters.

    Always consumes exactly `length` characters and wraps the enclosed
    content in `node_factory(delimiter)`.
    """

    def __init__(self, char: str, length: int, node_factory: Callable[[str], Container]) -> None:
        if len(char) != 1:
            raise ValueError(f"Delimiter character must be a single character, got {char!r}")
        if length < 1:
            raise ValueError(f"Minimum length must be positive, got {length}")
        self.char = char
        self.length = length
        self.node_factory = node_factory

    @property
    def opening_char(self) -> str:
        return self.char

    @property
    def closing_char(self) -> str:
        return self.char

    @property
    def min_length(self) -> int:
        return self.length

    def get_delimiter_use(self, opener: DelimiterRun, closer: DelimiterRun) -> int:
        if opener.length >= self.length and closer.length >= self.length:
            return self.length
        return 0

    def process(self, opener: Text, closer: Text, delimiter_use: int) -> Container:
        return wrap_between(opener, closer, self.node_factory(self.char * delimiter_use))
