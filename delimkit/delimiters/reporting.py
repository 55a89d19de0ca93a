from __future__ import annotations

import uuid
from datetime import datetime, timezone
from pathlib import Path

from .base import BaseMatchStrategy
from .logging_utils import get_json_logger
from .registry import DelimiterRegistry
from .staggered import StaggeredDispatcher


def _rows(char: str, strategy: BaseMatchStrategy) -> list[str]:
    if isinstance(strategy, StaggeredDispatcher):
        entries = list(strategy)
    else:
        entries = [(strategy.min_length, strategy)]
    return [
        f"| `{char}` | {threshold} | {type(s).__name__} | {'yes' if i == 0 else '-'} |"
        for i, (threshold, s) in enumerate(entries)
    ]


def generate_markdown(registry: DelimiterRegistry, updated: str | None = None) -> str:
    """Build a Markdown dispatch table from a delimiter registry.

    Thresholds are listed largest first, the order in which lookups scan
    them; the first row per character is also the fallback strategy.
    """
    cid = uuid.uuid4().hex
    logger = get_json_logger(
        "delimiters.reporting", static_fields={"correlation_id": cid, "op": "generate_markdown"}
    )
    logger.info("start", extra={"char_count": len(registry)})
    updated = updated or datetime.now(tz=timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")

    lines: list[str] = []
    lines.append("# Delimiter dispatch table")
    lines.append("")
    lines.append(f"Generated (UTC): {updated}")
    lines.append("")

    lines.append("## Characters")
    lines.append("")
    lines.append("| Char | Strategy | Min length |")
    lines.append("|---|---|---|")
    for char, strategy in registry:
        lines.append(f"| `{char}` | {type(strategy).__name__} | {strategy.min_length} |")
    lines.append("")

    lines.append("## Thresholds")
    lines.append("")
    lines.append("| Char | Threshold | Strategy | Fallback |")
    lines.append("|---|---|---|---|")
    for char, strategy in registry:
        lines.extend(_rows(char, strategy))
    lines.append("")

    logger.info("done", extra={"lines": len(lines)})
    return "\n".join(lines)


def write_markdown(registry: DelimiterRegistry, out_path: Path) -> None:
    md = generate_markdown(registry)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    out_path.write_text(md, encoding="utf-8")
