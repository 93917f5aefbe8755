# src/processlog/main.py
import sys
import threading
import traceback

from processlog import get_registry
from processlog.utils import Log

# ==========================================
# 1. 글로벌 예외 핸들러 정의
# ==========================================
def global_exception_handler(exc_type, exc_value, exc_traceback):
    """
    프로그램 내에서 잡히지 않은(Uncaught) 모든 예외를 여기서 처리합니다.
    """
    if issubclass(exc_type, KeyboardInterrupt):
        Log.warning("사용자에 의해 작업이 중단되었습니다. (KeyboardInterrupt)")
        sys.exit(0)

    error_msg = f"{exc_type.__name__}: {exc_value}"
    Log.error(f"예기치 못한 오류로 프로그램이 종료됩니다.\n{'-'*60}")

    traceback_details = "".join(traceback.format_tb(exc_traceback))
    print(Log.paint(f"{traceback_details}{error_msg}", Log.FAIL))
    print(f"{'-'*60}")

# ==========================================
# 2. Demo 실행
# ==========================================
def main():
    sys.excepthook = global_exception_handler
    registry = get_registry()
    Log.section("Process Logger Demo")

    upload = registry.start("upload", log=True, description="Uploading files")
    upload.log("Uploading file 1")

    registry.start("download", log=True, description="Downloading data")
    registry["download"].log("Downloading dataset 1")

    # 지연 호출 (타이머 스레드에서 로그/종료)
    # 타이머 스레드의 호출 위치는 threading.py 로 표시됨
    timers = [
        threading.Timer(1.0, upload.log, args=("Uploading file 2",)),
        threading.Timer(1.5, registry.log, args=("download", "Downloading dataset 2")),
        threading.Timer(2.0, upload.end),
        threading.Timer(3.0, registry.end, args=("download",)),
    ]
    for timer in timers:
        timer.start()
    for timer in timers:
        timer.join()

    # 종료된 프로세스 참조는 무시됨
    upload.log("ignored after end")
    Log.section(f"Demo Complete. Active processes: {len(registry)}")

if __name__ == "__main__":
    main()
