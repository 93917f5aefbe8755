# src/processlog/config.py
import os

class Config:
    """프로세스 로거 전체에서 사용되는 설정 및 상수 정의"""

    # START / END 라인 구분자
    LINES = "----------"

    # 색상 팔레트 (ANSI 이름 또는 #RRGGBB)
    PALETTE = (
        "magenta",
        "cyan",
        "#FC814A",
        "#072AC8",
        "#FCF300",
        "#8367C7",
        "#36827F",
        "#D6A99A",
    )

    # start() 기본값
    DEFAULT_LOG = True

    # 비활성 프로세스에서도 log_lines 를 기록할지 여부
    KEEP_DISABLED_LINES = False

    # 존재하지 않는 프로세스 참조 시 정책: "ignore" | "warn"
    # 대소문자, 공백 무시. 그 외 값은 레지스트리에서 "ignore" 로 대체
    ON_UNKNOWN = os.environ.get("PROCESSLOG_ON_UNKNOWN", "ignore").strip().lower()

    # NO_COLOR 환경변수가 비어 있지 않으면 색상 비활성화
    COLOR_ENABLED = not os.environ.get("NO_COLOR")

    # 호출 위치를 알 수 없을 때의 대체값
    UNKNOWN_FILE = "unknown file"
    UNKNOWN_LINE = "unknown line"
