from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, model_validator

from config import CHOICE_COUNT, MAX_ROPE


class InputType(str, Enum):
    NUMERIC = "numeric"
    MULTIPLE_CHOICE = "multipleChoice"


class TemplateKind(str, Enum):
    """The closed set of problem templates, one per difficulty level."""

    ARITHMETIC = "arithmetic"
    LINEAR_EQUATION = "linear_equation"
    MONOMIAL_ADD_SUB = "monomial_add_sub"
    MONOMIAL_MULTIPLY = "monomial_multiply"
    MONOMIAL_DIVIDE = "monomial_divide"
    POLYNOMIAL_ADD = "polynomial_add"
    POLYNOMIAL_SUBTRACT = "polynomial_subtract"
    POLYNOMIAL_TIMES_MONOMIAL = "polynomial_times_monomial"
    BINOMIAL_SQUARE = "binomial_square"
    DIFFERENCE_OF_SQUARES = "difference_of_squares"


# ============================================================================
# Problem Models
# ============================================================================


class Term(BaseModel):
    """A single coefficient * x^exponent term of a polynomial."""

    model_config = ConfigDict(frozen=True)

    coefficient: int
    exponent: int = Field(ge=0)


class Choice(BaseModel):
    """One option of a multiple choice problem."""

    model_config = ConfigDict(frozen=True)

    markup: str
    correct: bool = False


class Problem(BaseModel):
    """A generated exercise. Immutable once produced."""

    model_config = ConfigDict(frozen=True)

    kind: TemplateKind
    category: str
    label: str = ""
    prompt: str | None = None  # e.g. "Solve for x:"
    expression: str = Field(min_length=1)  # Question markup
    input_type: InputType
    answer: str  # Compared verbatim against numeric input
    answer_markup: str  # Shown as feedback for every input type
    difficulty: int = Field(ge=1, le=10)
    choices: tuple[Choice, ...] | None = None

    @model_validator(mode="after")
    def _check_choices(self) -> "Problem":
        if self.input_type == InputType.NUMERIC:
            if self.choices is not None:
                raise ValueError("numeric problems do not carry choices")
            return self

        if self.choices is None or len(self.choices) != CHOICE_COUNT:
            raise ValueError(
                f"multiple choice problems need exactly {CHOICE_COUNT} choices"
            )
        correct_count = sum(1 for choice in self.choices if choice.correct)
        if correct_count != 1:
            raise ValueError(
                f"exactly one choice must be correct, got {correct_count}"
            )
        return self

    @property
    def correct_index(self) -> int | None:
        """Index of the correct choice, or None for numeric problems."""
        if self.choices is None:
            return None
        return next(i for i, choice in enumerate(self.choices) if choice.correct)

    @property
    def is_multiple_choice(self) -> bool:
        return self.input_type == InputType.MULTIPLE_CHOICE


# ============================================================================
# Match Models
# ============================================================================


class MatchPhase(str, Enum):
    MENU = "menu"
    PLAYING = "playing"
    FINISHED = "finished"


class RoundPhase(str, Enum):
    AWAITING_ANSWER = "awaitingAnswer"
    FEEDBACK = "feedback"


class FinishReason(str, Enum):
    ROPE = "rope"  # Rope reached an extreme
    TIMEOUT = "timeout"  # Match-wide countdown expired
    FORCED = "forced"  # Host ended the match


class Player(BaseModel):
    name: str
    score: int = Field(default=0, ge=0)
    color_id: str = ""


class PlayerStats(BaseModel):
    """Per-player answer statistics for the end-of-match summary."""

    correct: int = 0
    wrong: int = 0
    current_streak: int = 0
    max_streak: int = 0

    @property
    def answered(self) -> int:
        return self.correct + self.wrong

    @property
    def accuracy(self) -> float:
        if self.answered == 0:
            return 0.0
        return self.correct / self.answered

    def record(self, correct: bool) -> None:
        if correct:
            self.correct += 1
            self.current_streak += 1
            self.max_streak = max(self.max_streak, self.current_streak)
        else:
            self.wrong += 1
            self.current_streak = 0


class AnswerFeedback(BaseModel):
    """Outcome of the current round, kept until the next round starts."""

    correct: bool
    correct_markup: str
    submitted: str | None = None
    timed_out: bool = False


class MatchState(BaseModel):
    """Mutable state owned by the match state machine."""

    phase: MatchPhase = MatchPhase.MENU
    round_phase: RoundPhase = RoundPhase.AWAITING_ANSWER
    players: list[Player] = Field(default_factory=list)
    stats: list[PlayerStats] = Field(default_factory=list)
    turn: int = Field(default=0, ge=0, le=1)
    rope_position: int = 0  # Negative favors player 0, positive player 1
    max_rope: int = Field(default=MAX_ROPE, ge=1)
    round: int = Field(default=1, ge=1)
    streak: int = Field(default=0, ge=0)
    winner: int | None = None
    finish_reason: FinishReason | None = None
    difficulty: int | None = None
    problem: Problem | None = None
    feedback: AnswerFeedback | None = None
    round_time_left: float | None = None
    match_time_left: float | None = None

    @property
    def current_player(self) -> Player | None:
        if not self.players:
            return None
        return self.players[self.turn]

    @property
    def is_finished(self) -> bool:
        return self.phase == MatchPhase.FINISHED


# ============================================================================
# Match Events
# ============================================================================


class RoundStarted(BaseModel):
    round: int
    turn: int
    problem: Problem


class AnswerResolved(BaseModel):
    player: int
    correct: bool
    timed_out: bool = False
    rope_position: int
    streak: int


class MatchFinished(BaseModel):
    winner: int
    reason: FinishReason
    players: list[Player]
    stats: list[PlayerStats]
    rope_position: int
    rounds: int


MatchEvent = RoundStarted | AnswerResolved | MatchFinished
