"""Length-staggered dispatch between several strategies for one character."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Iterator

from .base import BaseMatchStrategy
from .errors import DuplicateThresholdError, RegistryFrozenError
from .logging_utils import get_context_logger

if TYPE_CHECKING:
    from .models import DelimiterRun, Text


class StaggeredDispatcher(BaseMatchStrategy):
    """Dispatch every call to one of two or more strategies by run length.

    All registered strategies share one marker character and must have
    distinct minimum lengths. A run is handled by the strategy with the
    largest minimum length not exceeding it; when none qualifies the
    strategy with the largest minimum length is used.
    """

    def __init__(self, char: str, strategy: BaseMatchStrategy) -> None:
        self._char = char
        # (threshold, strategy) pairs, thresholds strictly descending
        self._entries: list[tuple[int, BaseMatchStrategy]] = []
        self._min_length = strategy.min_length
        self._frozen = False
        self.logger = get_context_logger("delimiters.staggered", {"char": char})
        self.add(strategy)

    @property
    def opening_char(self) -> str:
        return self._char

    @property
    def closing_char(self) -> str:
        return self._char

    @property
    def min_length(self) -> int:
        return self._min_length

    @property
    def thresholds(self) -> tuple[int, ...]:
        return tuple(threshold for threshold, _ in self._entries)

    @property
    def strategies(self) -> tuple[BaseMatchStrategy, ...]:
        return tuple(strategy for _, strategy in self._entries)

    def add(self, strategy: BaseMatchStrategy) -> None:
        """Register `strategy` under its own minimum length.

        Raises DuplicateThresholdError if that length is already taken and
        RegistryFrozenError after `freeze()`; the dispatcher is left
        unchanged in both cases.
        """
        length = strategy.min_length
        if self._frozen:
            self.logger.error("registry_frozen", extra={"min_length": length})
            raise RegistryFrozenError(self._char)

        pos = 0
        for threshold, _ in self._entries:
            if threshold == length:
                self.logger.error(
                    "duplicate_threshold",
                    extra={"min_length": length, "strategy": type(strategy).__name__},
                )
                raise DuplicateThresholdError(self._char, length)
            if threshold < length:
                break
            pos += 1

        # replaced, never mutated in place: lookups may still iterate the old list
        entries = list(self._entries)
        entries.insert(pos, (length, strategy))
        self._entries = entries
        self._min_length = min(self._min_length, length)
        self.logger.debug(
            "strategy_registered",
            extra={"min_length": length, "strategy": type(strategy).__name__},
        )

    @property
    def frozen(self) -> bool:
        return self._frozen

    def freeze(self) -> None:
        """Reject further `add` calls, here and in nested dispatchers."""
        self._frozen = True
        for _, strategy in self._entries:
            if isinstance(strategy, StaggeredDispatcher):
                strategy.freeze()

    def find_strategy(self, length: int) -> BaseMatchStrategy:
        """Return the strategy responsible for a run of `length` characters."""
        for threshold, strategy in self._entries:
            if threshold <= length:
                return strategy
        return self._entries[0][1]

    def get_delimiter_use(self, opener: DelimiterRun, closer: DelimiterRun) -> int:
        return self.find_strategy(opener.length).get_delimiter_use(opener, closer)

    def process(self, opener: Text, closer: Text, delimiter_use: int) -> Any:
        return self.find_strategy(delimiter_use).process(opener, closer, delimiter_use)

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[tuple[int, BaseMatchStrategy]]:
        return iter(list(self._entries))

    def __repr__(self) -> str:
        return f"StaggeredDispatcher(char={self._char!r}, thresholds={list(self.thresholds)})"
