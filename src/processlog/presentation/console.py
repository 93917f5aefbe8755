# src/processlog/presentation/console.py
import pprint
from typing import Any, Optional, TextIO

from processlog.config import Config
from processlog.utils.logger import Log
from .base import Presenter
from .call_site import CallSite
from .colors import colorize

class ConsolePresenter(Presenter):
    """
    Prints process renders to the console in the Log color style.

        ---------- START - upload ---------- - Process logger.
        Description: Uploading files
        • upload - Uploading file 1 /demo.py:14
        ---------- END - upload ---------- - Completed in 2.003 seconds.
    """

    def __init__(self, stream: Optional[TextIO] = None):
        # None 이면 print 시점의 sys.stdout 사용
        self.stream = stream

    def render_start(self, name: str, color: str, description: Optional[str] = None) -> None:
        self._print(
            Log.paint(f"{Config.LINES} START -", Log.GREEN, Log.BOLD),
            colorize(name, color),
            Log.paint(Config.LINES, Log.GREEN, Log.BOLD),
            Log.paint("- Process logger.", Log.GREY),
        )
        if description:
            self._print(Log.paint(f"Description: {description}", Log.GREY))

    def render_log(self, name: str, color: str, message: Any, call_site: Optional[CallSite] = None) -> None:
        parts = [colorize(f"• {name} -", color), self.format_message(message)]
        if call_site is not None:
            parts.append(Log.paint(f"/{call_site.file}:{call_site.line}", Log.GREY))
        self._print(*parts)

    def render_end(self, name: str, color: str, duration: float) -> None:
        self._print(
            Log.paint(f"{Config.LINES} END -", Log.GREEN, Log.BOLD),
            colorize(name, color),
            Log.paint(Config.LINES, Log.GREEN, Log.BOLD),
            Log.paint(f"- Completed in {round(duration, 3)} seconds.", Log.GREY),
        )

    def warning(self, message: str) -> None:
        Log.warning(message)

    @staticmethod
    def format_message(message: Any) -> str:
        if isinstance(message, str):
            return message
        return pprint.pformat(message)

    def _print(self, *parts: str) -> None:
        print(*parts, file=self.stream)
