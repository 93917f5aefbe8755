# src/processlog/presentation/__init__.py
"""
Presentation Sub-package
========================
프로세스 레지스트리의 출력(Render)을 담당합니다.
레지스트리는 이 인터페이스만 호출하며, 출력 형식은 교체 가능합니다.

Modules:
--------
1. base.py (Presenter)
   - render_start / render_log / render_end / warning 인터페이스.

2. console.py (ConsolePresenter)
   - ANSI 컬러 콘솔 출력 (기본 구현).

3. colors.py
   - 색상 토큰(ANSI 이름, #RRGGBB) → Escape Code 변환.

4. call_site.py
   - log() 호출 위치(파일명, 라인) 조회. 실패 시 'unknown file' / 'unknown line'.
"""

from .call_site import CallSite, capture_call_site
from .base import Presenter
from .console import ConsolePresenter
from .colors import colorize, escape_for

__all__ = [
    "CallSite",
    "capture_call_site",
    "Presenter",
    "ConsolePresenter",
    "colorize",
    "escape_for"
]
