"""
Referee tools for Complex Scissors Paper Stone.

These wrap the MatchController for the console referee. The model calls
them but never decides winners or keeps score itself; every result is
computed by the controller and returned as a plain dict.
"""

from typing import Dict

from controller import MatchController, MatchError
from state import MatchComplete, MatchSnapshot, MatchSummary, RoundOutcome, Weapon


RULES_TEXT = (
    "In this game, the app will tell you what you have to do; if the app tells "
    "you to win, you have to try and select a weapon that will get you to win. "
    "If the app tells you to lose, you have to select a weapon that will get you "
    "to lose, and because you did what was expected of you, you *actually* win! "
    "This is a brain teasing game that adds an additional level of fun to "
    "Scissors, Paper, Stone!"
)

MOVE_ALIASES = {
    "scissors": Weapon.SCISSORS,
    "s": Weapon.SCISSORS,
    "paper": Weapon.PAPER,
    "p": Weapon.PAPER,
    "stone": Weapon.STONE,
    "rock": Weapon.STONE,
    "granite": Weapon.STONE,
    "r": Weapon.STONE,
}

VALID_MOVES = [w.value for w in Weapon]


def validate_move(user_input: str) -> Dict:
    """
    Validate and normalize user input.

    Args:
        user_input: Raw user input string

    Returns:
        {
            "valid": bool,
            "move": str | None,
            "reason": str | None
        }
    """
    normalized = user_input.strip().lower()
    weapon = MOVE_ALIASES.get(normalized)

    if weapon is None:
        return {
            "valid": False,
            "move": None,
            "reason": f"Invalid move. Valid moves are: {', '.join(VALID_MOVES)}"
        }

    return {
        "valid": True,
        "move": weapon.value,
        "reason": None
    }


def play_round(user_move: str, controller: MatchController) -> Dict:
    """
    Play the current round with the user's move.

    The computer's weapon is drawn by the controller, which also applies
    the win/lose instruction and updates the scores.

    Returns:
        {
            "player_move": str,
            "computer_move": str,
            "natural_winner": "player" | "computer" | "draw",
            "outcome": "player" | "computer" | "draw",
            "instruction": str,
            "current_state": dict
        }
        or {"error": str}
    """
    checked = validate_move(user_move)
    if not checked["valid"]:
        return {"error": checked["reason"]}

    try:
        controller.play_round(Weapon(checked["move"]))
    except MatchError as e:
        return {"error": str(e)}

    snapshot = controller.snapshot()
    reveal = snapshot.reveal
    return {
        "player_move": reveal.player_choice.value,
        "computer_move": reveal.computer_choice.value,
        "natural_winner": reveal.verdict.value,
        "outcome": reveal.outcome.value,
        "instruction": snapshot.instruction.intent,
        "current_state": snapshot.to_dict()
    }


def advance_round(controller: MatchController) -> Dict:
    """
    Continue to the next round, or finish the match after round 10.

    Returns:
        {"match_over": False, "round": int, "instruction": str}
        or {"match_over": True, "summary": dict}
        or {"error": str}
    """
    try:
        status = controller.advance_round()
    except MatchError as e:
        return {"error": str(e)}

    if isinstance(status, MatchComplete):
        return {
            "match_over": True,
            "summary": status.summary.to_dict()
        }

    return {
        "match_over": False,
        "round": status.round_number,
        "instruction": controller.snapshot().instruction.intent
    }


def get_match_state(controller: MatchController) -> Dict:
    return controller.snapshot().to_dict()


def describe_outcome(outcome: RoundOutcome) -> str:
    if outcome is RoundOutcome.PLAYER:
        return "You WIN!"
    if outcome is RoundOutcome.COMPUTER:
        return "Computer WINS!"
    return "DRAW!"


def get_match_summary(snapshot: MatchSnapshot, summary: MatchSummary) -> str:
    """
    Generate a human-readable match summary.

    Args:
        snapshot: State of the finished match
        summary: Result reported by advance_round

    Returns:
        Formatted summary string
    """
    text = "\n=== GAME OVER ===\n"
    text += (f"Final Score: You {summary.player_score} - {summary.computer_score} Computer "
             f"(Draws: {snapshot.draws})\n\n")
    text += f"{summary.title}\n{summary.message}\n"

    text += "\nRound History:\n"
    for r in snapshot.history:
        told = "win" if r.instruction.value else "lose"
        text += (f"  Round {r.round}: told to {told}, you played {r.player_choice.value}, "
                 f"Computer played {r.computer_choice.value} -> {describe_outcome(r.outcome)}\n")

    return text
