"""Data models for the match simulator."""

from datetime import datetime

from pydantic import BaseModel, Field

from models import FinishReason, PlayerStats


class SimulatedPlayerConfig(BaseModel):
    """Configuration for a simulated player's answering behavior."""

    name: str

    # Probability of answering correctly when an answer is given
    accuracy: float = Field(default=0.7, ge=0.0, le=1.0)

    # Probability of letting the round countdown run out
    timeout_rate: float = Field(default=0.0, ge=0.0, le=1.0)


class MatchResult(BaseModel):
    """Result of a single simulated match."""

    match_number: int  # 1-indexed
    winner: int
    reason: FinishReason
    rounds: int
    rope_position: int
    scores: list[int]
    stats: list[PlayerStats]


class DifficultySummary(BaseModel):
    """Answer accuracy for problems of one difficulty level."""

    difficulty: int
    label: str
    answered: int = 0
    correct: int = 0

    @property
    def accuracy(self) -> float:
        return self.correct / self.answered if self.answered > 0 else 0.0


class SimulationResults(BaseModel):
    """Complete results from a simulation run."""

    players: list[SimulatedPlayerConfig]
    difficulty: int | None
    max_rope: int
    max_rounds: int
    random_seed: int | None = None
    start_time: datetime
    end_time: datetime

    matches: list[MatchResult] = Field(default_factory=list)
    wins: list[int] = Field(default_factory=lambda: [0, 0])
    finish_reasons: dict[str, int] = Field(default_factory=dict)
    average_rounds: float = 0.0
    by_difficulty: dict[int, DifficultySummary] = Field(default_factory=dict)
