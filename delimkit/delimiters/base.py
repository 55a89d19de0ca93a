# pragma pylint: disable=missing-docstring

from __future__ import annotations

import abc
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from .models import DelimiterRun, Text


class BaseMatchStrategy(abc.ABC):
    """Abstract base class for all delimiter matching strategies.

    The delimiter-stack algorithm calls `get_delimiter_use` for a candidate
    opener/closer pair and, when the result is positive, `process` with the
    text nodes holding the two runs.
    """

    @property
    @abc.abstractmethod
    def opening_char(self) -> str:
        raise NotImplementedError

    @property
    @abc.abstractmethod
    def closing_char(self) -> str:
        raise NotImplementedError

    @property
    @abc.abstractmethod
    def min_length(self) -> int:
        """Minimum run length this strategy is willing to handle."""
        raise NotImplementedError

    @abc.abstractmethod
    def get_delimiter_use(self, opener: DelimiterRun, closer: DelimiterRun) -> int:
        """
        Decide how many marker characters the pairing consumes.

        Must not mutate either run. A result of 0 means the pair does not match.

        :param opener: The opening delimiter run.
        :param closer: The closing delimiter run.
        :return: Number of characters consumed from each run.
        """
        raise NotImplementedError

    @abc.abstractmethod
    def process(self, opener: Text, closer: Text, delimiter_use: int) -> Any:
        """
        Mutate the inline nodes once the consumption count is known.

        :param opener: Text node holding the opening run.
        :param closer: Text node holding the closing run.
        :param delimiter_use: Value previously returned by `get_delimiter_use`.
        """
        raise NotImplementedError

    @property
    def is_symmetric(self) -> bool:
        return self.opening_char == self.closing_char

    def __repr__(self) -> str:
        return f"{type(self).__name__}(char={self.opening_char!r}, min_length={self.min_length})"
