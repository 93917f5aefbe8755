# src/processlog/presentation/colors.py
import re

from processlog.config import Config
from processlog.utils.logger import Log

# ANSI 전경색 코드
ANSI_CODES = {
    "black": 30,
    "red": 31,
    "green": 32,
    "yellow": 33,
    "blue": 34,
    "magenta": 35,
    "cyan": 36,
    "white": 37,
    "grey": 90,
    "gray": 90,
}

HEX_PATTERN = re.compile(r"^#?([0-9a-fA-F]{6})$")

def escape_for(token: str) -> str:
    """
    Escape sequence for a color token: an ANSI color name or #RRGGBB.
    Unknown tokens map to an empty string (uncolored output).
    """
    if not token:
        return ""
    code = ANSI_CODES.get(token.lower())
    if code is not None:
        return f"\033[{code}m"

    match = HEX_PATTERN.match(token)
    if match:
        value = match.group(1)
        r, g, b = (int(value[i:i + 2], 16) for i in (0, 2, 4))
        return f"\033[38;2;{r};{g};{b}m"
    return ""


def colorize(text: str, token: str) -> str:
    if not Config.COLOR_ENABLED:
        return text
    escape = escape_for(token)
    if not escape:
        return text
    return f"{escape}{text}{Log.RESET}"
