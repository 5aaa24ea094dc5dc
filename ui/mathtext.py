"""Plain-text rendering of problem markup for the terminal."""

import re

SUPERSCRIPTS = str.maketrans("0123456789-+", "⁰¹²³⁴⁵⁶⁷⁸⁹⁻⁺")

# A brace group may contain one level of nested braces, e.g. {6x^{3}}
_BRACED = r"((?:[^{}]|\{[^{}]*\})*)"
_FRACTION = re.compile(r"\\frac\{" + _BRACED + r"\}\{" + _BRACED + r"\}")
_POWER = re.compile(r"\^\{([^{}]*)\}")


def to_plain(markup: str) -> str:
    """Convert markup such as '\\frac{6x^{3}}{2x}' to '(6x³) / (2x)'."""
    text = _FRACTION.sub(lambda m: f"({m.group(1)}) / ({m.group(2)})", markup)
    text = _POWER.sub(lambda m: m.group(1).translate(SUPERSCRIPTS), text)
    return text.replace("\\times", "×")
