"""Tug of Math UI module - terminal interface for the math tug-of-war game."""

from ui.app import GameUI
from ui.components import (
    FeedbackPanel,
    ProblemPanel,
    RopeBar,
    ScoreBoard,
    WelcomeScreen,
    WinnerScreen,
)
from ui.mathtext import to_plain
from ui.styles import (
    DEFAULT_THEME,
    ERROR_RED,
    INFO_BLUE,
    MUTED_GRAY,
    ROPE_GOLD,
    SUCCESS_GREEN,
    TEAM_PINK,
    TEAM_VIOLET,
)

__all__ = [
    "GameUI",
    "FeedbackPanel",
    "ProblemPanel",
    "RopeBar",
    "ScoreBoard",
    "WelcomeScreen",
    "WinnerScreen",
    "to_plain",
    "DEFAULT_THEME",
    "TEAM_VIOLET",
    "TEAM_PINK",
    "ROPE_GOLD",
    "SUCCESS_GREEN",
    "ERROR_RED",
    "INFO_BLUE",
    "MUTED_GRAY",
]
