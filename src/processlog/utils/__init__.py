# src/processlog/utils/__init__.py
"""
Utilities Package
=================
프로세스 로거 전반에서 사용되는 공통 보조 기능(Cross-cutting Concerns)을 제공하는 패키지입니다.

포함된 모듈 (Modules):
----------------------
1. logger.py
   - Log: ANSI Escape Code를 활용한 컬러 콘솔 로깅 (Warning, Error, Section).

2. decorators.py
   - track_process: 함수 호출 전체를 하나의 프로세스(START ~ END)로 기록.
   - log_lifecycle: 함수 호출의 시작과 끝을 실행 중인 프로세스에 로그로 남김.
"""

# 패키지 레벨에서 바로 접근 가능하도록 주요 클래스/함수 노출 (Convenience Imports)
from .logger import Log
from .decorators import track_process, log_lifecycle

__all__ = [
    "Log",
    "track_process",
    "log_lifecycle"
]
