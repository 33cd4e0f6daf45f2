"""
Match state for Complex Scissors Paper Stone.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Tuple, Union


TOTAL_ROUNDS = 10


class Weapon(Enum):
    SCISSORS = "scissors"
    PAPER = "paper"
    STONE = "stone"


class Instruction(Enum):
    """What the player has been told to do this round."""
    MUST_WIN = True
    MUST_LOSE = False

    @property
    def intent(self) -> str:
        if self is Instruction.MUST_WIN:
            return "You have to WIN this round. Choose your weapon accordingly."
        return "You have to LOSE this round. Choose your weapon accordingly."


class NaturalVerdict(Enum):
    """Winner by weapon rules alone."""
    PLAYER = "player"
    COMPUTER = "computer"
    DRAW = "draw"


class RoundOutcome(Enum):
    """Scored result once the instruction has been applied."""
    PLAYER = "player"
    COMPUTER = "computer"
    DRAW = "draw"


class Leader(Enum):
    PLAYER = "player"
    COMPUTER = "computer"
    TIED = "tied"


@dataclass(frozen=True)
class Hidden:
    """Nothing has been revealed in the current round yet."""


@dataclass(frozen=True)
class Revealed:
    player_choice: Weapon
    computer_choice: Weapon
    verdict: NaturalVerdict
    outcome: RoundOutcome


Reveal = Union[Hidden, Revealed]


@dataclass(frozen=True)
class RoundRecord:
    """History entry for a single resolved round."""
    round: int
    instruction: Instruction
    player_choice: Weapon
    computer_choice: Weapon
    verdict: NaturalVerdict
    outcome: RoundOutcome

    def to_dict(self) -> dict:
        return {
            "round": self.round,
            "instruction": "win" if self.instruction.value else "lose",
            "player_move": self.player_choice.value,
            "computer_move": self.computer_choice.value,
            "natural_winner": self.verdict.value,
            "outcome": self.outcome.value,
        }


@dataclass
class MatchState:
    """
    Mutable state of one ten-round match.

    Owned by MatchController; everything else reads a MatchSnapshot.
    """
    instruction: Instruction
    round_number: int = 1
    player_score: int = 0
    computer_score: int = 0
    reveal: Reveal = field(default_factory=Hidden)
    history: List[RoundRecord] = field(default_factory=list)


@dataclass(frozen=True)
class MatchSnapshot:
    """Read-only view of a MatchState for rendering."""
    round_number: int
    player_score: int
    computer_score: int
    instruction: Instruction
    reveal: Reveal
    history: Tuple[RoundRecord, ...]

    @classmethod
    def of(cls, state: MatchState) -> "MatchSnapshot":
        return cls(
            round_number=state.round_number,
            player_score=state.player_score,
            computer_score=state.computer_score,
            instruction=state.instruction,
            reveal=state.reveal,
            history=tuple(state.history),
        )

    @property
    def is_revealed(self) -> bool:
        return isinstance(self.reveal, Revealed)

    @property
    def is_final_round(self) -> bool:
        return self.round_number == TOTAL_ROUNDS

    @property
    def draws(self) -> int:
        return sum(1 for r in self.history if r.outcome is RoundOutcome.DRAW)

    def to_dict(self) -> dict:
        """Convert snapshot to dictionary for serialization."""
        data = {
            "round": self.round_number,
            "total_rounds": TOTAL_ROUNDS,
            "player_score": self.player_score,
            "computer_score": self.computer_score,
            "instruction": self.instruction.intent,
            "revealed": self.is_revealed,
            "history": [r.to_dict() for r in self.history],
        }
        if isinstance(self.reveal, Revealed):
            data["player_move"] = self.reveal.player_choice.value
            data["computer_move"] = self.reveal.computer_choice.value
            data["outcome"] = self.reveal.outcome.value
        return data


@dataclass(frozen=True)
class MatchSummary:
    """Final result of a completed match."""
    player_score: int
    computer_score: int

    @property
    def leader(self) -> Leader:
        if self.player_score > self.computer_score:
            return Leader.PLAYER
        if self.computer_score > self.player_score:
            return Leader.COMPUTER
        return Leader.TIED

    @property
    def margin(self) -> int:
        return abs(self.player_score - self.computer_score)

    @property
    def title(self) -> str:
        if self.leader is Leader.PLAYER:
            return "You won!!!"
        if self.leader is Leader.COMPUTER:
            return "You lost! :("
        return "You drew with the computer!"

    @property
    def message(self) -> str:
        if self.leader is Leader.PLAYER:
            return f"You beat the computer by {self.margin} point(s)!"
        if self.leader is Leader.COMPUTER:
            return f"You lost to the computer by {self.margin} point(s)!"
        return ("Looks like you are just as smart as your phone, "
                "not that I was doubting you of course!")

    def to_dict(self) -> dict:
        return {
            "player_score": self.player_score,
            "computer_score": self.computer_score,
            "leader": self.leader.value,
            "margin": self.margin,
            "title": self.title,
            "message": self.message,
        }


@dataclass(frozen=True)
class MatchContinues:
    round_number: int


@dataclass(frozen=True)
class MatchComplete:
    summary: MatchSummary


MatchStatus = Union[MatchContinues, MatchComplete]
