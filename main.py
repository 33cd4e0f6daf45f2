"""
Complex Scissors Paper Stone console referee using Google Gemini.

This is the main entry point: a Gemini model hosts the game and calls the
referee tools, which drive the MatchController.
"""

import logging
import os
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

from google import genai
from google.genai import types
from controller import MatchController
from state import TOTAL_ROUNDS
from tools import (
    RULES_TEXT,
    advance_round,
    get_match_state,
    get_match_summary,
    play_round,
    validate_move,
)


logger = logging.getLogger(__name__)


DEFAULT_MODEL = "gemini-2.5-flash-preview-09-2025"

# System prompt for the agent
SYSTEM_PROMPT = f"""You are the host of Complex Scissors Paper Stone.

GAME RULES (explain these briefly at start):
{RULES_TEXT}
- Exactly {TOTAL_ROUNDS} rounds will be played
- Valid moves: scissors, paper, stone
- Scissors beats paper, paper beats stone, stone beats scissors
- Each round the player is told to WIN or to LOSE
- Doing what you were told scores a point for you; doing the opposite scores for the computer
- Draws score nothing

YOUR RESPONSIBILITIES:
1. Explain rules in <=5 lines at game start, then call get_match_state and tell the player what they have to do in round 1
2. Call validate_move to check the player's input
3. If valid, call play_round to get the computer's move and the scored outcome
4. Provide clear feedback after each round:
   - Round number
   - Player's move
   - Computer's move
   - Whether the player followed the instruction
   - Current score
5. When the player wants to continue, call advance_round and tell them what they have to do next
6. When advance_round reports match_over, announce the final result from its summary

CRITICAL RULES:
- NEVER decide winners yourself - always use play_round
- NEVER track state in conversation - state lives in the match controller
- NEVER call play_round twice in the same round, or advance_round before play_round

Be concise, friendly, and clear. Keep responses short."""


def create_agent(api_key: str):
    """
    Create the Gemini client.

    Args:
        api_key: Google API key for Gemini

    Returns:
        Configured client
    """
    client = genai.Client(api_key=api_key)
    return client


def execute_tool_call(tool_name: str, args: dict, controller: MatchController) -> dict:
    """
    Execute a tool call and return the result.

    Args:
        tool_name: Name of the tool to execute
        args: Tool arguments
        controller: Controller for the current match

    Returns:
        Tool execution result
    """
    if tool_name == "validate_move":
        return validate_move(args["user_input"])

    elif tool_name == "play_round":
        return play_round(args["user_move"], controller)

    elif tool_name == "advance_round":
        return advance_round(controller)

    elif tool_name == "get_match_state":
        return get_match_state(controller)

    else:
        return {"error": f"Unknown tool: {tool_name}"}


# Define tools
def get_tools():
    """Define tools using correct SDK types."""
    return [types.Tool(
        function_declarations=[
            types.FunctionDeclaration(
                name="validate_move",
                description="Validate player input and normalize it to scissors, paper or stone",
                parameters={
                    "type": "object",
                    "properties": {
                        "user_input": {
                            "type": "string",
                            "description": "Raw player input to validate"
                        }
                    },
                    "required": ["user_input"]
                }
            ),
            types.FunctionDeclaration(
                name="play_round",
                description="Play the current round: picks the computer's move, applies the win/lose instruction and updates the score. This tool contains all game logic.",
                parameters={
                    "type": "object",
                    "properties": {
                        "user_move": {
                            "type": "string",
                            "description": "Validated player move (scissors/paper/stone)"
                        }
                    },
                    "required": ["user_move"]
                }
            ),
            types.FunctionDeclaration(
                name="advance_round",
                description="Continue after a played round. Starts the next round with a new instruction, or reports the final result after the last round.",
                parameters={
                    "type": "object",
                    "properties": {}
                }
            ),
            types.FunctionDeclaration(
                name="get_match_state",
                description="Read the current round, scores, instruction and round history.",
                parameters={
                    "type": "object",
                    "properties": {}
                }
            )
        ]
    )]


def generate(client, model_name: str, messages: list, tool_definitions: list):
    return client.models.generate_content(
        model=model_name,
        contents=messages,
        config=types.GenerateContentConfig(
            system_instruction=SYSTEM_PROMPT,
            tools=tool_definitions,
            temperature=0.7
        )
    )


def run_turn(client, model_name: str, messages: list, tool_definitions: list,
             controller: MatchController):
    """Send the conversation to the model and execute tool calls until it answers in text."""
    response = generate(client, model_name, messages, tool_definitions)

    while True:
        function_calls = []
        text_parts = []

        if not response.candidates or not response.candidates[0].content or not response.candidates[0].content.parts:
            logger.warning(
                "Response has no candidates or parts. Finish reason: %s",
                response.candidates[0].finish_reason if response.candidates else "N/A",
            )
            break

        for part in response.candidates[0].content.parts:
            if part.function_call:
                function_calls.append(part.function_call)
            if part.text:
                text_parts.append(part.text)

        # Print any text first
        if text_parts:
            print(f"\nReferee: {' '.join(text_parts)}\n")

        # If no function calls, we're done with this turn
        if not function_calls:
            if text_parts:
                messages.append({"role": "model", "parts": [{"text": " ".join(text_parts)}]})
            break

        # Record the model's tool calls in history
        model_parts = []
        if text_parts:
            model_parts.append({"text": " ".join(text_parts)})
        for fc in function_calls:
            model_parts.append({"function_call": {"name": fc.name, "args": fc.args}})
        messages.append({"role": "model", "parts": model_parts})

        user_response_parts = []
        for fc in function_calls:
            args = dict(fc.args) if fc.args else {}
            result = execute_tool_call(fc.name, args, controller)
            user_response_parts.append({
                "function_response": {
                    "name": fc.name,
                    "response": result
                }
            })

        messages.append({"role": "user", "parts": user_response_parts})
        response = generate(client, model_name, messages, tool_definitions)


def run_game():
    """Main game loop."""
    logging.basicConfig(level=os.getenv("SPS_LOG_LEVEL", "WARNING").upper())

    # Get API key
    api_key = os.getenv("GOOGLE_API_KEY")
    if not api_key:
        print("Error: GOOGLE_API_KEY environment variable not set")
        print("Please add it to your .env file")
        return

    # Initialize
    client = create_agent(api_key)
    controller = MatchController()
    tool_definitions = get_tools()
    model_name = os.getenv("GEMINI_MODEL", DEFAULT_MODEL)

    print("=" * 60)
    print("WELCOME TO COMPLEX SCISSORS PAPER STONE!")
    print("=" * 60)

    try:
        while True:
            messages = [{"role": "user", "parts": [{"text": "Start a new game and explain the rules briefly."}]}]
            run_turn(client, model_name, messages, tool_definitions, controller)

            while not controller.is_complete:
                user_input = input("You: ").strip()

                if not user_input:
                    continue

                messages.append({"role": "user", "parts": [{"text": user_input}]})
                run_turn(client, model_name, messages, tool_definitions, controller)

            # Match over; advance_round at the final round only re-reports the result
            summary = controller.advance_round().summary
            print("\n" + get_match_summary(controller.snapshot(), summary))

            if input("Play again! (y/n): ").strip().lower() not in ("y", "yes"):
                break
            controller.start_match()

    except Exception as e:
        print(f"\nError occurred: {e}")
        import traceback
        traceback.print_exc()


if __name__ == "__main__":
    run_game()
