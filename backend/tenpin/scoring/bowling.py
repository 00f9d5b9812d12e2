"""Event-driven ten-pin bowling scoring engine.

Wraps :class:`~tenpin.scoring.game.Game` in the ``init_state`` /
``apply`` / ``summary`` contract so a bowling game can be replayed from a
stream of ``{"type": "ROLL", "pins": n}`` events.
"""
from typing import Any, Dict, List, Sequence, Tuple

from ..schemas import FrameSummary, GameSummary
from ..services.validation import validate_roll_sequence
from .game import Game


def init_state(config: Dict) -> Dict:
    return {
        "config": config,
        "game": Game(),
    }


def apply(event: Dict, state: Dict) -> Dict:
    if event.get("type") != "ROLL" or "pins" not in event:
        raise ValueError("invalid bowling event")
    state["game"].roll(event["pins"])
    return state


def summary(state: Dict) -> Dict:
    game: Game = state["game"]
    frames: List[FrameSummary] = []
    running = 0
    for number, frame in enumerate(game.frames, start=1):
        running += frame.score
        frames.append(
            FrameSummary(
                number=number,
                rolls=list(frame.rolls),
                score=frame.score,
                cumulative=running,
                finished=frame.is_finished,
                settled=frame.is_settled,
            )
        )
    return GameSummary(
        frames=frames,
        scores=[f.score for f in frames],
        total=running,
        complete=game.is_complete,
        current_frame=game.current_frame_index + 1,
    ).model_dump()


def record_rolls(rolls: Sequence[Any]) -> Tuple[List[Dict], Dict]:
    """Replay ``rolls`` into a fresh game.

    Returns the generated events alongside the final state.
    """

    events: List[Dict] = []
    state = init_state({})
    for pins in validate_roll_sequence(rolls):
        event = {"type": "ROLL", "pins": pins}
        state = apply(event, state)
        events.append(event)
    return events, state
