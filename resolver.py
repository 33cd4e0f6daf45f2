"""
Weapon rules for Scissors Paper Stone.

Pure functions only; the instruction twist is applied by the controller.
"""

from state import NaturalVerdict, Weapon


# (winner, loser)
WINNING_COMBINATIONS = frozenset({
    (Weapon.SCISSORS, Weapon.PAPER),
    (Weapon.PAPER, Weapon.STONE),
    (Weapon.STONE, Weapon.SCISSORS),
})


def beats(weapon: Weapon, other: Weapon) -> bool:
    return (weapon, other) in WINNING_COMBINATIONS


def resolve(player_weapon: Weapon, computer_weapon: Weapon) -> NaturalVerdict:
    """
    Determine the natural winner of a round, ignoring the instruction.

    Args:
        player_weapon: Weapon chosen by the player
        computer_weapon: Weapon chosen by the computer

    Returns:
        NaturalVerdict for the pair
    """
    if player_weapon == computer_weapon:
        return NaturalVerdict.DRAW
    if beats(player_weapon, computer_weapon):
        return NaturalVerdict.PLAYER
    return NaturalVerdict.COMPUTER
