import pytest

from state import Instruction, Weapon
from tools import (
    advance_round,
    get_match_state,
    get_match_summary,
    play_round,
    validate_move,
)


WIN = Instruction.MUST_WIN
LOSE = Instruction.MUST_LOSE


@pytest.mark.parametrize("raw, move", [
    ("scissors", "scissors"),
    ("  PAPER ", "paper"),
    ("Stone", "stone"),
    ("rock", "stone"),
    ("granite", "stone"),
    ("s", "scissors"),
    ("p", "paper"),
    ("r", "stone"),
])
def test_validate_move(raw, move):
    assert validate_move(raw) == {"valid": True, "move": move, "reason": None}


@pytest.mark.parametrize("raw", ["", "lizard", "bomb", "rocks"])
def test_validate_move_rejects(raw):
    result = validate_move(raw)
    assert result["valid"] is False
    assert result["move"] is None
    assert "scissors, paper, stone" in result["reason"]


def test_play_round(scripted):
    controller, _ = scripted(LOSE, Weapon.PAPER)
    result = play_round("stone", controller)

    assert result["player_move"] == "stone"
    assert result["computer_move"] == "paper"
    assert result["natural_winner"] == "computer"
    assert result["outcome"] == "player"
    assert result["current_state"]["player_score"] == 1
    assert result["current_state"]["revealed"] is True


def test_play_round_invalid_move_leaves_state(scripted):
    controller, _ = scripted(WIN)
    result = play_round("lizard", controller)

    assert "error" in result
    assert not controller.snapshot().is_revealed


def test_play_round_twice_reports_error(scripted):
    controller, _ = scripted(WIN, Weapon.PAPER)
    play_round("scissors", controller)
    result = play_round("scissors", controller)

    assert "already been played" in result["error"]
    assert controller.snapshot().player_score == 1


def test_advance_round(scripted):
    controller, _ = scripted(WIN)
    assert "not been played" in advance_round(controller)["error"]

    controller.rng.values.extend([Weapon.PAPER, LOSE])
    play_round("paper", controller)
    result = advance_round(controller)

    assert result == {
        "match_over": False,
        "round": 2,
        "instruction": LOSE.intent,
    }


def test_full_match_summary(scripted):
    controller, rng = scripted(WIN)
    for i in range(10):
        rng.values.append(Weapon.STONE)
        play_round("paper", controller)
        if i < 9:
            rng.values.append(WIN if i % 2 else LOSE)
            assert advance_round(controller)["match_over"] is False

    result = advance_round(controller)
    assert result["match_over"] is True
    assert result["summary"]["player_score"] == 5
    assert result["summary"]["computer_score"] == 5
    assert result["summary"]["leader"] == "tied"

    state = get_match_state(controller)
    assert len(state["history"]) == 10

    text = get_match_summary(controller.snapshot(), controller.advance_round().summary)
    assert "Final Score: You 5 - 5 Computer (Draws: 0)" in text
    assert "You drew with the computer!" in text
    assert "Round 10: told to lose, you played paper, Computer played stone -> Computer WINS!" in text
