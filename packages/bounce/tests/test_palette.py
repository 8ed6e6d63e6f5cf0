"""Tests for ColorSelector."""
from __future__ import annotations

import random
from collections import Counter

import pytest
from bounce import DEFAULT_PALETTE, ColorSelector, PaletteError


def test_never_returns_current():
    selector = ColorSelector(DEFAULT_PALETTE, random.Random(0), "#0000ee")
    current = selector.current
    for _ in range(500):
        color = selector.next(current)
        assert color != current
        current = color


def test_commits_pick_as_current():
    selector = ColorSelector(DEFAULT_PALETTE, random.Random(0))
    color = selector.next()
    assert selector.current == color


def test_default_current_is_first_palette_entry():
    selector = ColorSelector(("#111111", "#222222"), random.Random(0))
    assert selector.current == "#111111"


def test_two_color_palette_alternates():
    selector = ColorSelector(("#111111", "#222222"), random.Random(5), "#111111")
    assert [selector.next() for _ in range(4)] == [
        "#222222",
        "#111111",
        "#222222",
        "#111111",
    ]


def test_explicit_current_overrides_committed():
    selector = ColorSelector(("#111111", "#222222", "#333333"), random.Random(0), "#111111")
    for _ in range(50):
        assert selector.next("#333333") != "#333333"


def test_current_outside_palette_draws_from_full_palette():
    selector = ColorSelector(("#111111", "#222222"), random.Random(2), "#abcdef")
    seen = {ColorSelector(("#111111", "#222222"), random.Random(s), "#abcdef").next() for s in range(40)}
    assert seen == {"#111111", "#222222"}
    assert selector.next() in ("#111111", "#222222")


def test_deterministic_with_seed():
    a = ColorSelector(DEFAULT_PALETTE, random.Random(99))
    b = ColorSelector(DEFAULT_PALETTE, random.Random(99))
    assert [a.next() for _ in range(20)] == [b.next() for _ in range(20)]


def test_roughly_uniform_over_candidates():
    rng = random.Random(1234)
    selector = ColorSelector(DEFAULT_PALETTE, rng, "#0000ee")
    counts = Counter(selector.next("#0000ee") for _ in range(7000))
    assert "#0000ee" not in counts
    assert len(counts) == len(DEFAULT_PALETTE) - 1
    for n in counts.values():
        assert 800 < n < 1200


def test_duplicates_collapsed():
    selector = ColorSelector(("#111111", "#111111", "#222222"), random.Random(0))
    assert selector.palette == ("#111111", "#222222")


@pytest.mark.parametrize(
    "palette",
    [(), ("#111111",), ("#111111", "#111111")],
)
def test_rejects_palette_without_two_distinct_colors(palette):
    with pytest.raises(PaletteError):
        ColorSelector(palette, random.Random(0))


def test_palette_error_is_value_error():
    assert issubclass(PaletteError, ValueError)
