from main import execute_tool_call, get_tools
from state import Instruction, Weapon


def test_tool_declarations_match_dispatch():
    names = {d.name for d in get_tools()[0].function_declarations}
    assert names == {"validate_move", "play_round", "advance_round", "get_match_state"}


def test_execute_tool_call(scripted):
    controller, _ = scripted(Instruction.MUST_WIN, Weapon.STONE)

    assert execute_tool_call("validate_move", {"user_input": "Rock"}, controller)["move"] == "stone"
    assert execute_tool_call("get_match_state", {}, controller)["round"] == 1

    result = execute_tool_call("play_round", {"user_move": "paper"}, controller)
    assert result["outcome"] == "player"


def test_unknown_tool(scripted):
    controller, _ = scripted(Instruction.MUST_WIN)
    assert execute_tool_call("resolve_round", {}, controller) == {"error": "Unknown tool: resolve_round"}
