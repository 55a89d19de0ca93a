from __future__ import annotations

import json
import uuid
from pathlib import Path
from typing import Callable, Iterator

from .base import BaseMatchStrategy
from .emphasis import EmphasisStrategy, FixedLengthStrategy
from .errors import DuplicateCharacterError, RegistryFrozenError, UnknownStrategyError
from .logging_utils import get_json_logger
from .models import NODE_TYPES, Strikethrough
from .registry_models import DelimiterConfigSchema, StrategyConfig
from .staggered import StaggeredDispatcher


class DelimiterRegistry:
    """Map marker characters to the strategy handling them.

    A symmetric strategy added for a character that already has one is merged
    with it into a StaggeredDispatcher. Registration is only allowed until
    `freeze()` is called; afterwards the registry is read-only and can be
    shared between parses of independent documents.
    """

    def __init__(self) -> None:
        self._by_char: dict[str, BaseMatchStrategy] = {}
        self._frozen = False
        self.logger = get_json_logger("delimiters.registry")

    @property
    def frozen(self) -> bool:
        return self._frozen

    @property
    def characters(self) -> list[str]:
        return sorted(self._by_char)

    def freeze(self) -> None:
        self._frozen = True
        for strategy in self._by_char.values():
            if isinstance(strategy, StaggeredDispatcher):
                strategy.freeze()

    def get(self, char: str) -> BaseMatchStrategy | None:
        return self._by_char.get(char)

    def add(self, strategy: BaseMatchStrategy) -> None:
        opening = strategy.opening_char
        closing = strategy.closing_char
        if self._frozen:
            self.logger.error("registry_frozen", extra={"char": opening})
            raise RegistryFrozenError(opening)

        if opening == closing:
            old = self._by_char.get(opening)
            if old is not None and old.is_symmetric:
                self._add_staggered(opening, old, strategy)
            else:
                self._check_free(opening)
                self._by_char[opening] = strategy
            return

        self._check_free(opening)
        self._check_free(closing)
        self._by_char[opening] = strategy
        self._by_char[closing] = strategy

    def _check_free(self, char: str) -> None:
        if char in self._by_char:
            self.logger.error("duplicate_character", extra={"char": char})
            raise DuplicateCharacterError(char)

    def _add_staggered(self, char: str, old: BaseMatchStrategy, strategy: BaseMatchStrategy) -> None:
        if isinstance(old, StaggeredDispatcher):
            old.add(strategy)
            return
        dispatcher = StaggeredDispatcher(char, old)
        dispatcher.add(strategy)
        self._by_char[char] = dispatcher

    def __contains__(self, char: object) -> bool:
        return char in self._by_char

    def __len__(self) -> int:
        return len(self._by_char)

    def __iter__(self) -> Iterator[tuple[str, BaseMatchStrategy]]:
        return iter(sorted(self._by_char.items()))


def _emphasis(cfg: StrategyConfig) -> BaseMatchStrategy:
    return EmphasisStrategy(cfg.char, enable_em=cfg.enable_em, enable_strong=cfg.enable_strong)


def _fixed(cfg: StrategyConfig) -> BaseMatchStrategy:
    assert cfg.min_length is not None
    return FixedLengthStrategy(cfg.char, cfg.min_length, NODE_TYPES[cfg.node])


STRATEGY_FACTORIES: dict[str, Callable[[StrategyConfig], BaseMatchStrategy]] = {
    "emphasis": _emphasis,
    "fixed": _fixed,
}


def create_strategy(cfg: StrategyConfig) -> BaseMatchStrategy:
    factory = STRATEGY_FACTORIES.get(cfg.kind)
    if factory is None:
        logger = get_json_logger("delimiters.registry", static_fields={"op": "create_strategy"})
        logger.error("unknown_strategy", extra={"kind": cfg.kind, "char": cfg.char})
        raise UnknownStrategyError(cfg.kind, sorted(STRATEGY_FACTORIES))
    return factory(cfg)


def load_config(path: Path) -> DelimiterConfigSchema:
    """Load delimiter config JSON from path with Pydantic validation.

    Raises FileNotFoundError if missing, JSONDecodeError on invalid JSON.
    Raises ValidationError if the config structure is invalid.
    """
    cid = uuid.uuid4().hex
    logger = get_json_logger(
        "delimiters.registry", static_fields={"correlation_id": cid, "op": "load_config"}
    )
    logger.info("start", extra={"path": str(path)})

    data = json.loads(path.read_text(encoding="utf-8"))
    config = DelimiterConfigSchema(**data)

    logger.info("done", extra={"strategies": len(config.strategies)})
    return config


def build_registry(config: DelimiterConfigSchema, *, freeze: bool = True) -> DelimiterRegistry:
    """Instantiate and register every configured strategy in order.

    Configuration errors (unknown kinds, duplicate thresholds, character
    clashes) propagate to the caller.
    """
    registry = DelimiterRegistry()
    for cfg in config.strategies:
        registry.add(create_strategy(cfg))
    if freeze:
        registry.freeze()
    return registry


def load_registry(path: Path) -> DelimiterRegistry:
    return build_registry(load_config(path))


def default_registry() -> DelimiterRegistry:
    """`*` and `_` emphasis plus `~~` strikethrough, frozen."""
    registry = DelimiterRegistry()
    registry.add(EmphasisStrategy("*"))
    registry.add(EmphasisStrategy("_"))
    registry.add(FixedLengthStrategy("~", 2, Strikethrough))
    registry.freeze()
    return registry
