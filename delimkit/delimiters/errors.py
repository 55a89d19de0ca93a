from __future__ import annotations


class DelimiterConfigError(ValueError):
    """Setup-time misconfiguration of delimiter strategies."""


class DuplicateThresholdError(DelimiterConfigError):
    """Two strategies for the same character share a minimum length."""

    def __init__(self, char: str, length: int) -> None:
        self.char = char
        self.length = length
        super().__init__(
            f'Cannot add two delimiter processors for char "{char}" and minimum length {length}'
        )


class DuplicateCharacterError(DelimiterConfigError):
    """An asymmetric strategy collides with an already registered character."""

    def __init__(self, char: str) -> None:
        self.char = char
        super().__init__(f'Delimiter processor for character "{char}" already exists')


class RegistryFrozenError(DelimiterConfigError):
    def __init__(self, char: str) -> None:
        self.char = char
        super().__init__(f'Cannot register delimiter processor for "{char}": registry is frozen')


class UnknownStrategyError(DelimiterConfigError):
    def __init__(self, kind: str, known: list[str]) -> None:
        self.kind = kind
        super().__init__(f"Unknown strategy kind {kind!r}; expected one of {', '.join(known)}")
