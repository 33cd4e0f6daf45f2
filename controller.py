"""
Match controller for Complex Scissors Paper Stone.

Owns the MatchState and moves it through the round lifecycle:
AwaitingChoice -> play_round -> Revealed -> advance_round -> AwaitingChoice
(next round) or MatchComplete after round 10.
"""

import logging
import random
from typing import Optional, Protocol, Sequence, TypeVar

from resolver import resolve
from state import (
    TOTAL_ROUNDS,
    Hidden,
    Instruction,
    MatchComplete,
    MatchContinues,
    MatchSnapshot,
    MatchState,
    MatchStatus,
    MatchSummary,
    NaturalVerdict,
    Revealed,
    RoundOutcome,
    RoundRecord,
    Weapon,
)


logger = logging.getLogger(__name__)

T = TypeVar("T")

WEAPONS = (Weapon.SCISSORS, Weapon.PAPER, Weapon.STONE)
INSTRUCTIONS = (Instruction.MUST_WIN, Instruction.MUST_LOSE)


class RandomSource(Protocol):
    def choice(self, seq: Sequence[T]) -> T:
        ...


class MatchError(RuntimeError):
    pass


class RoundOrderError(MatchError):
    """An operation was called in the wrong phase of the round."""


def apply_instruction(verdict: NaturalVerdict, instruction: Instruction) -> RoundOutcome:
    """
    Turn a natural verdict into the scored outcome.

    The player scores when the natural result matches what they were told to
    do; doing the opposite scores for the computer. Draws stay draws.
    """
    if verdict is NaturalVerdict.DRAW:
        return RoundOutcome.DRAW
    if instruction is Instruction.MUST_WIN and verdict is NaturalVerdict.PLAYER:
        return RoundOutcome.PLAYER
    if instruction is Instruction.MUST_LOSE and verdict is NaturalVerdict.COMPUTER:
        return RoundOutcome.PLAYER
    return RoundOutcome.COMPUTER


class MatchController:
    def __init__(self, rng: Optional[RandomSource] = None, seed: Optional[int] = None):
        self.rng = rng if rng is not None else random.Random(seed)
        self._state: Optional[MatchState] = None
        self._complete = False
        self.start_match()

    def snapshot(self) -> MatchSnapshot:
        assert self._state is not None
        return MatchSnapshot.of(self._state)

    @property
    def is_complete(self) -> bool:
        return self._complete

    def start_match(self) -> MatchSnapshot:
        self._state = MatchState(instruction=self.rng.choice(INSTRUCTIONS))
        self._complete = False
        logger.info("New match started, round 1: %s", self._state.instruction.name)
        return self.snapshot()

    def play_round(self, player_weapon: Weapon) -> RoundOutcome:
        """
        Resolve the current round with the player's weapon.

        Args:
            player_weapon: Weapon chosen by the player

        Returns:
            The adjusted RoundOutcome

        Raises:
            RoundOrderError: if this round has already been revealed
        """
        state = self._state
        assert state is not None
        if isinstance(state.reveal, Revealed):
            raise RoundOrderError(
                f"Round {state.round_number} has already been played; call advance_round first"
            )

        computer_weapon = self.rng.choice(WEAPONS)
        verdict = resolve(player_weapon, computer_weapon)
        outcome = apply_instruction(verdict, state.instruction)

        if outcome is RoundOutcome.PLAYER:
            state.player_score += 1
        elif outcome is RoundOutcome.COMPUTER:
            state.computer_score += 1

        state.reveal = Revealed(
            player_choice=player_weapon,
            computer_choice=computer_weapon,
            verdict=verdict,
            outcome=outcome,
        )
        state.history.append(RoundRecord(
            round=state.round_number,
            instruction=state.instruction,
            player_choice=player_weapon,
            computer_choice=computer_weapon,
            verdict=verdict,
            outcome=outcome,
        ))

        logger.debug(
            "Round %d: %s vs %s, natural %s, %s -> %s (%d-%d)",
            state.round_number, player_weapon.value, computer_weapon.value,
            verdict.value, state.instruction.name, outcome.value,
            state.player_score, state.computer_score,
        )
        return outcome

    def advance_round(self) -> MatchStatus:
        """
        Move past a revealed round.

        Leaving the final round reports MatchComplete and leaves the state
        untouched; otherwise the next round starts with a fresh instruction.

        Raises:
            RoundOrderError: if the current round has not been played yet
        """
        state = self._state
        assert state is not None
        if not isinstance(state.reveal, Revealed):
            raise RoundOrderError(
                f"Round {state.round_number} has not been played yet"
            )

        if state.round_number == TOTAL_ROUNDS:
            summary = MatchSummary(state.player_score, state.computer_score)
            if not self._complete:
                logger.info(
                    "Match finished %d-%d (%s)",
                    summary.player_score, summary.computer_score, summary.leader.value,
                )
            self._complete = True
            return MatchComplete(summary)

        state.round_number += 1
        state.instruction = self.rng.choice(INSTRUCTIONS)
        state.reveal = Hidden()
        return MatchContinues(state.round_number)
