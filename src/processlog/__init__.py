# src/processlog/__init__.py
"""
processlog
==========
이름이 있는 논리적 작업(프로세스)의 시작과 끝을 기록하고, 실행 중 로그를 남기며,
종료 시 소요 시간을 자동으로 출력하는 경량 로거입니다.

사용 예:
    import processlog

    processlog.start("upload", description="Uploading files")
    processlog.log("upload", "Uploading file 1")
    processlog.end("upload")

    # 핸들 / 체이닝
    processlog.start("download").log("dataset 1").log("dataset 2").end()

    # 명시적 인스턴스 (테스트 등)
    registry = processlog.ProcessRegistry()
    with registry.process("batch") as job:
        job.log("step 1")

Sub-packages:
-------------
1. core          - ProcessRegistry, ProcessRecord, ProcessHandle, 예외
2. presentation  - Presenter 인터페이스, ConsolePresenter, 호출 위치 조회
3. utils         - Log (컬러 콘솔 로거), 데코레이터
"""

from typing import Any, Optional

from .config import Config
from .core import (
    ProcessHandle,
    ProcessLogError,
    ProcessRecord,
    ProcessRegistry,
    UnknownProcessError,
    get_registry,
)
from .presentation import CallSite, ConsolePresenter, Presenter, capture_call_site
from .utils import Log, log_lifecycle, track_process

__version__ = "0.2.0"

# 기본 전역 인스턴스에 위임하는 편의 함수들

def start(
    name: str,
    log: bool = Config.DEFAULT_LOG,
    description: Optional[str] = None,
    color: Optional[str] = None,
) -> ProcessHandle:
    return get_registry().start(name, log=log, description=description, color=color)

def log(name: str, message: Any) -> ProcessHandle:
    return get_registry().log(name, message)

def end(name: str) -> Optional[float]:
    return get_registry().end(name)

def toggle_logging(name: str, active: bool) -> None:
    get_registry().toggle_logging(name, active)

__all__ = [
    "Config",
    "ProcessHandle",
    "ProcessLogError",
    "ProcessRecord",
    "ProcessRegistry",
    "UnknownProcessError",
    "get_registry",
    "CallSite",
    "ConsolePresenter",
    "Presenter",
    "capture_call_site",
    "Log",
    "log_lifecycle",
    "track_process",
    "start",
    "log",
    "end",
    "toggle_logging"
]
