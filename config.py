"""Configuration for matches and problem generation.

Constants mirror the classroom defaults of the game. The pydantic models
allow the CLI and the simulator to tune a match without touching the core.
"""

from pydantic import BaseModel, Field

MAX_ROPE = 5                   # rope extreme that ends the match
DEFAULT_DIFFICULTY = 3         # monomial addition/subtraction
DEFAULT_ROUND_SECONDS = 30     # per-round countdown
DEFAULT_MATCH_SECONDS = 180    # match-wide countdown
CHOICE_COUNT = 4               # options per multiple choice problem

DEFAULT_PLAYERS = [
    {"name": "Player 1", "color_id": "violet"},
    {"name": "Player 2", "color_id": "pink"},
]


class MatchConfig(BaseModel):
    """Configuration for a single match."""

    # None means every round draws a random template
    difficulty: int | None = DEFAULT_DIFFICULTY
    max_rope: int = Field(default=MAX_ROPE, ge=1)
    round_seconds: float | None = Field(default=None, gt=0)
    match_seconds: float | None = Field(default=None, gt=0)
