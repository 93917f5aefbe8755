# src/processlog/core/__init__.py
"""
Core Sub-package
================
프로세스 이름 → 실행 중인 레코드 매핑과 라이프사이클(start → log → end)을 관리합니다.

Modules:
--------
1. registry.py (ProcessRegistry, get_registry)
   - start / log / end / toggle_logging, 기본 전역 인스턴스.

2. record.py (ProcessRecord)
   - 프로세스 하나의 상태 (이름, 활성 여부, 시작 시각, 로그 라인, 색상).

3. handle.py (ProcessHandle)
   - 이름에 묶인 호출용 핸들. log() 체이닝 지원.

4. errors.py
   - ProcessLogError, UnknownProcessError.
"""

from .errors import ProcessLogError, UnknownProcessError
from .record import ProcessRecord
from .handle import ProcessHandle
from .registry import ProcessRegistry, get_registry

__all__ = [
    "ProcessLogError",
    "UnknownProcessError",
    "ProcessRecord",
    "ProcessHandle",
    "ProcessRegistry",
    "get_registry"
]
