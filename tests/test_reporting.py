from __future__ import annotations

from pathlib import Path

from delimkit.delimiters.emphasis import EmphasisStrategy, FixedLengthStrategy
from delimkit.delimiters.models import Emphasis, Strikethrough, Strong
from delimkit.delimiters.registry import DelimiterRegistry
from delimkit.delimiters.reporting import generate_markdown, write_markdown


def _registry() -> DelimiterRegistry:
    registry = DelimiterRegistry()
    registry.add(FixedLengthStrategy("*", 1, Emphasis))
    registry.add(FixedLengthStrategy("*", 2, Strong))
    registry.add(EmphasisStrategy("_"))
    registry.add(FixedLengthStrategy("~", 2, Strikethrough))
    return registry


def test_generate_markdown_lists_thresholds_descending() -> None:
    md = generate_markdown(_registry(), updated="2025-01-01T00:00:00Z")

    assert "Generated (UTC): 2025-01-01T00:00:00Z" in md
    assert "| `*` | StaggeredDispatcher | 1 |" in md
    assert "| `_` | EmphasisStrategy | 1 |" in md
    star_rows = [l for l in md.splitlines() if l.startswith("| `*` |") and "Fixed" in l]
    assert star_rows == [
        "| `*` | 2 | FixedLengthStrategy | yes |",
        "| `*` | 1 | FixedLengthStrategy | - |",
    ]
    assert "| `~` | 2 | FixedLengthStrategy | yes |" in md


def test_write_markdown(tmp_path: Path) -> None:
    out = tmp_path / "docs" / "DELIMITERS.md"
    write_markdown(_registry(), out)
    assert out.read_text(encoding="utf-8").startswith("# Delimiter dispatch table")
