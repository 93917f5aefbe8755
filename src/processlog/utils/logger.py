# src/processlog/utils/logger.py
from processlog.config import Config

class Log:
    """
    Console Logger with Colors using ANSI Escape Codes.
    Diagnostic channel of the process logger (warnings, errors, sections).
    """

    # ANSI Colors
    BLUE = '\033[94m'        # Blue
    GREEN = '\033[92m'       # Green
    GREY = '\033[90m'        # Grey
    WARNING = '\033[93m'     # Yellow
    FAIL = '\033[91m'        # Red
    BOLD = '\033[1m'         # Bold
    RESET = '\033[0m'        # Reset to default

    @staticmethod
    def paint(msg: str, *codes: str) -> str:
        """Wrap msg in the given escape codes, unless color is disabled."""
        if not Config.COLOR_ENABLED or not codes:
            return msg
        return f"{''.join(codes)}{msg}{Log.RESET}"

    @staticmethod
    def warning(msg: str):
        """Warning messages (Yellow)"""
        print(Log.paint(f"[Warning] {msg}", Log.WARNING))

    @staticmethod
    def error(msg: str):
        """Error messages (Red)"""
        print(Log.paint(f"  [Error] {msg}", Log.FAIL))

    @staticmethod
    def section(msg: str):
        """Section Divider (Bold Blue)"""
        print("\n" + Log.paint(f"=== {msg} ===", Log.BLUE, Log.BOLD))
