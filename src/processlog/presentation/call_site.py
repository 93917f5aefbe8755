# src/processlog/presentation/call_site.py
import inspect
import os
from typing import NamedTuple

from processlog.config import Config

# processlog 패키지 내부 프레임은 호출 위치에서 제외
_PACKAGE_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))

class CallSite(NamedTuple):
    file: str
    line: str

    @classmethod
    def unknown(cls) -> "CallSite":
        return cls(Config.UNKNOWN_FILE, Config.UNKNOWN_LINE)


def _is_internal(filename: str) -> bool:
    return os.path.abspath(filename).startswith(_PACKAGE_DIR + os.sep)


def capture_call_site() -> CallSite:
    """
    Best-effort file name and line number of the first frame outside
    the processlog package. Falls back to placeholders.
    """
    frame = inspect.currentframe()
    try:
        while frame is not None and _is_internal(frame.f_code.co_filename):
            frame = frame.f_back
        if frame is None:
            return CallSite.unknown()
        return CallSite(os.path.basename(frame.f_code.co_filename), str(frame.f_lineno))
    finally:
        del frame
