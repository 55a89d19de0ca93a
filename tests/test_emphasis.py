from __future__ import annotations

import pytest

from delimkit.delimiters.emphasis import EmphasisStrategy, FixedLengthStrategy
from delimkit.delimiters.models import (
    Container,
    DelimiterRun,
    Emphasis,
    Strikethrough,
    Strong,
    Text,
)
from delimkit.delimiters.staggered import StaggeredDispatcher


def _paragraph(*parts: str) -> tuple[Container, list[Text]]:
    root = Container()
    nodes = [Text(p) for p in parts]
    for n in nodes:
        root.append_child(n)
    return root, nodes


@pytest.mark.parametrize(
    "opener_len,closer_len,expected",
    [
        (1, 1, 1),
        (2, 2, 2),
        (3, 3, 2),
        (2, 1, 1),
        (1, 3, 1),
    ],
)
def test_emphasis_use(opener_len: int, closer_len: int, expected: int) -> None:
    s = EmphasisStrategy("*")
    opener = DelimiterRun("*", opener_len, can_open=True, can_close=False)
    closer = DelimiterRun("*", closer_len, can_open=False, can_close=True)
    assert s.get_delimiter_use(opener, closer) == expected


def test_emphasis_rule_of_three() -> None:
    s = EmphasisStrategy("*")
    # *foo**bar*: the inner run can open and close, 1 + 2 is a multiple of 3
    opener = DelimiterRun("*", 1, can_open=True, can_close=False)
    closer = DelimiterRun("*", 2, can_open=True, can_close=True)
    assert s.get_delimiter_use(opener, closer) == 0

    both_multiple = DelimiterRun("*", 3, can_open=True, can_close=True)
    opener3 = DelimiterRun("*", 3, can_open=True, can_close=False)
    assert s.get_delimiter_use(opener3, both_multiple) == 2


def test_emphasis_flags_disable_kinds() -> None:
    opener = DelimiterRun("*", 2, can_close=False)
    closer = DelimiterRun("*", 2, can_open=False)
    assert EmphasisStrategy("*", enable_strong=False).get_delimiter_use(opener, closer) == 1
    single = DelimiterRun("*", 1, can_close=False)
    assert EmphasisStrategy("*", enable_em=False).get_delimiter_use(single, closer) == 0


def test_emphasis_process_wraps_content() -> None:
    root, (opener, word, closer) = _paragraph("", "foo", "")
    s = EmphasisStrategy("_")

    node = s.process(opener, closer, 2)

    assert isinstance(node, Strong)
    assert node.delimiter == "__"
    assert root.children == [opener, node, closer]
    assert node.children == [word]
    assert word.parent is node


def test_emphasis_process_ignores_other_uses() -> None:
    root, (opener, word, closer) = _paragraph("", "foo", "")
    assert EmphasisStrategy("*").process(opener, closer, 3) is None
    assert root.children == [opener, word, closer]


def test_emphasis_rejects_multichar() -> None:
    with pytest.raises(ValueError):
        EmphasisStrategy("**")


def test_fixed_length_requires_both_runs() -> None:
    s = FixedLengthStrategy("~", 2, Strikethrough)
    assert s.min_length == 2
    assert s.get_delimiter_use(DelimiterRun("~", 2), DelimiterRun("~", 3)) == 2
    assert s.get_delimiter_use(DelimiterRun("~", 1), DelimiterRun("~", 2)) == 0

    with pytest.raises(ValueError):
        FixedLengthStrategy("~", 0, Strikethrough)


def test_staggered_fixed_strategies_build_nested_nodes() -> None:
    """`***a***` style: the strong strategy runs first, then emphasis."""
    d = StaggeredDispatcher("*", FixedLengthStrategy("*", 1, Emphasis))
    d.add(FixedLengthStrategy("*", 2, Strong))
    root, (opener, word, closer) = _paragraph("*", "a", "*")

    opener_run = DelimiterRun("*", 3, node=opener)
    closer_run = DelimiterRun("*", 3, node=closer)
    use = d.get_delimiter_use(opener_run, closer_run)
    assert use == 2
    strong = d.process(opener, closer, use)
    opener_run.length -= use
    closer_run.length -= use

    use = d.get_delimiter_use(opener_run, closer_run)
    assert use == 1
    em = d.process(opener, closer, use)

    assert isinstance(strong, Strong) and isinstance(em, Emphasis)
    assert root.children == [opener, em, closer]
    assert em.children == [strong]
    assert strong.children == [word]
