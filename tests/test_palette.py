import numpy as np
import pytest

from games.color_shooter.const import COLORS
from games.color_shooter.palette import Palette

from conftest import ScriptedRng


def test_labels_follow_color_table():
    pal = Palette.seeded(0)
    assert list(pal.labels) == ["red", "blue", "green", "yellow", "purple"]
    assert pal.rgb_of("red") == COLORS["red"]


def test_same_seed_same_sequence():
    a = Palette.seeded(42)
    b = Palette.seeded(42)
    assert [a.sample() for _ in range(50)] == [b.sample() for _ in range(50)]


def test_samples_cover_palette_and_repeat():
    pal = Palette(np.random.default_rng(3))
    seen = [pal.sample() for _ in range(500)]
    assert set(seen) == set(pal.labels)
    assert any(x == y for x, y in zip(seen, seen[1:]))


def test_scripted_rng_picks_by_index():
    pal = Palette(ScriptedRng(4, 0, 2))
    assert [pal.sample() for _ in range(3)] == ["purple", "red", "green"]


def test_empty_palette_rejected():
    with pytest.raises(ValueError):
        Palette(ScriptedRng(0), colors={})
