import itertools

import pytest

from resolver import beats, resolve
from state import NaturalVerdict, Weapon


ALL_PAIRS = list(itertools.product(Weapon, Weapon))


@pytest.mark.parametrize("winner, loser", [
    (Weapon.SCISSORS, Weapon.PAPER),
    (Weapon.PAPER, Weapon.STONE),
    (Weapon.STONE, Weapon.SCISSORS),
])
def test_dominance(winner, loser):
    assert resolve(winner, loser) is NaturalVerdict.PLAYER
    assert resolve(loser, winner) is NaturalVerdict.COMPUTER


@pytest.mark.parametrize("player, computer", ALL_PAIRS)
def test_draw_iff_equal(player, computer):
    assert (resolve(player, computer) is NaturalVerdict.DRAW) == (player == computer)


@pytest.mark.parametrize("a, b", ALL_PAIRS)
def test_antisymmetric(a, b):
    assert not (beats(a, b) and beats(b, a))
    if a != b:
        assert beats(a, b) or beats(b, a)


def test_swapping_sides_swaps_verdict():
    swapped = {
        NaturalVerdict.PLAYER: NaturalVerdict.COMPUTER,
        NaturalVerdict.COMPUTER: NaturalVerdict.PLAYER,
        NaturalVerdict.DRAW: NaturalVerdict.DRAW,
    }
    for a, b in ALL_PAIRS:
        assert resolve(b, a) is swapped[resolve(a, b)]


def test_each_weapon_wins_exactly_once():
    for weapon in Weapon:
        assert sum(beats(weapon, other) for other in Weapon) == 1
