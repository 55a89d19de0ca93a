from __future__ import annotations

from typing import Any

import pytest

from delimkit.delimiters.base import BaseMatchStrategy
from delimkit.delimiters.models import DelimiterRun, Text


class RecordingStrategy(BaseMatchStrategy):
    """Strategy stub that returns a fixed use and records every call."""

    def __init__(self, char: str, min_length: int, use: int = 1) -> None:
        self.char = char
        self._min_length = min_length
        self.use = use
        self.calls: list[tuple[str, Any]] = []

    @property
    def opening_char(self) -> str:
        return self.char

    @property
    def closing_char(self) -> str:
        return self.char

    @property
    def min_length(self) -> int:
        return self._min_length

    def get_delimiter_use(self, opener: DelimiterRun, closer: DelimiterRun) -> int:
        self.calls.append(("use", (opener.length, closer.length)))
        return self.use

    def process(self, opener: Text, closer: Text, delimiter_use: int) -> Any:
        self.calls.append(("process", delimiter_use))
        return self


@pytest.fixture
def make_strategy():
    def _make(min_length: int, char: str = "*", use: int = 1) -> RecordingStrategy:
        return RecordingStrategy(char, min_length, use)

    return _make

