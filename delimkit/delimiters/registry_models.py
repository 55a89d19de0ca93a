from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field, model_validator


class StrategyConfig(BaseModel):
    kind: str
    char: str = Field(min_length=1, max_length=1)
    min_length: int | None = Field(default=None, ge=1)
    node: Literal["emphasis", "strong", "strikethrough"] = "emphasis"
    enable_em: bool = True
    enable_strong: bool = True

    @model_validator(mode="after")
    def _check_kind_fields(self) -> "StrategyConfig":
        given = self.model_fields_set
        if self.kind == "fixed":
            if self.min_length is None:
                raise ValueError("fixed strategies require min_length")
            stray = sorted(given & {"enable_em", "enable_strong"})
        elif self.kind == "emphasis":
            stray = sorted(given & {"min_length", "node"})
        else:
            stray = []
        if stray:
            raise ValueError(f"{self.kind} strategies do not accept {', '.join(stray)}")
        return self


class DelimiterConfigSchema(BaseModel):
    version: int
    strategies: list[StrategyConfig] = Field(default_factory=list)
