from rich.style import Style
from rich.text import Text
from rich.theme import Theme

TEAM_VIOLET = "#7C6BF0"
TEAM_PINK = "#FF6B9D"
ROPE_GOLD = "#FFD93D"
SUCCESS_GREEN = "#6BCB77"
ERROR_RED = "#E74C3C"
INFO_BLUE = "#4D96FF"
MUTED_GRAY = "#7F8C8D"
TEXT_WHITE = "#FFFFFF"

PLAYER_COLORS = {
    "violet": TEAM_VIOLET,
    "pink": TEAM_PINK,
    "gold": ROPE_GOLD,
    "blue": INFO_BLUE,
    "green": SUCCESS_GREEN,
}

DEFAULT_THEME = Theme(
    {
        "primary": Style(color=TEAM_VIOLET, bold=True),
        "secondary": Style(color=TEAM_PINK, bold=True),
        "success": Style(color=SUCCESS_GREEN),
        "error": Style(color=ERROR_RED, bold=True),
        "info": Style(color=INFO_BLUE),
        "muted": Style(color=MUTED_GRAY),
        "expression": Style(color=TEXT_WHITE, bold=True),
        "option_label": Style(color=ROPE_GOLD, bold=True),
        "option_text": Style(color=TEXT_WHITE),
        "rope": Style(color=ROPE_GOLD),
        "title": Style(color=TEAM_VIOLET, bold=True),
        "subtitle": Style(color=MUTED_GRAY),
    }
)


def get_player_color(color_id: str, index: int = 0) -> str:
    """Get the display color for a player, falling back by seat."""
    fallback = TEAM_VIOLET if index == 0 else TEAM_PINK
    return PLAYER_COLORS.get(color_id, fallback)


def get_player_style(color_id: str, index: int = 0) -> Style:
    return Style(color=get_player_color(color_id, index), bold=True)


def get_accuracy_style(accuracy: float) -> Style:
    """Get color style based on answer accuracy."""
    if accuracy >= 0.8:
        return Style(color=SUCCESS_GREEN, bold=True)
    elif accuracy >= 0.5:
        return Style(color=ROPE_GOLD)
    else:
        return Style(color=ERROR_RED)


def create_welcome_banner() -> Text:
    """Create the welcome banner text."""
    banner = Text()
    banner.append("╔══════════════════════════════════════╗\n", Style(color=TEAM_VIOLET))
    banner.append("║        T U G   O F   M A T H         ║\n", Style(color=ROPE_GOLD, bold=True))
    banner.append("║   Answer right, pull the rope!       ║\n", Style(color=TEAM_PINK))
    banner.append("╚══════════════════════════════════════╝", Style(color=TEAM_VIOLET))
    return banner
