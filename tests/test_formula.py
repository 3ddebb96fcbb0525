import pytest

from spellcount.engine.formula import LEVEL_PENALTY, base_count, compute_maximum, formula_table
from spellcount.models.settings import MagicCountSettings


def S(**kw):
    base = dict(coefficient=5, bias=0, minimum_count=3, max_count=9)
    base.update(kw)
    return MagicCountSettings(**base)


def test_level_one_at_stat_twenty():
    assert compute_maximum(S(), 20, 1, 1.0) == 7


def test_documented_tables():
    assert formula_table(S(), 20) == [7, 5, 3, 1, 0, 0, 0]
    assert formula_table(S(), 40, clamp=True) == [9, 9, 8, 6, 4, 2, 0]


def test_high_level_is_zero_before_minimum_floor():
    s = S()
    assert base_count(s, 20, 7) == 0
    assert compute_maximum(s, 20, 7, learned=True) == 3
    assert compute_maximum(s, 20, 7, learned=False) == 0


def test_unlearned_level_is_zero_even_with_huge_stat():
    assert compute_maximum(S(), 999, 1, 2.0, learned=False) == 0


def test_cap_at_max_count():
    assert compute_maximum(S(), 200, 1) == 9
    assert compute_maximum(S(max_count=99), 200, 1) == 57


def test_aptitude_scales_before_floor():
    # 7.2 * 1.4 = 10.08 -> 10, capped
    assert base_count(S(), 20, 1, 1.4) == 10
    assert compute_maximum(S(), 20, 1, 1.4) == 9
    # 5.4 * 1.2 = 6.48 -> 6
    assert compute_maximum(S(), 20, 2, 1.2) == 6


def test_bias_shifts_every_level():
    assert formula_table(S(bias=2), 20)[:4] == [9, 7, 5, 3]


def test_level_penalty_constant_is_pinned():
    assert LEVEL_PENALTY == pytest.approx(1.6)
    # a 1.9 penalty would give 1 here
    assert base_count(S(), 40, 6) == 2
