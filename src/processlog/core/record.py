# src/processlog/core/record.py
from dataclasses import dataclass, field
from typing import Any, List, Optional

@dataclass
class ProcessRecord:
    """
    진행 중인 프로세스 하나의 상태.
    start() 시점에 생성되고 end() 시점에 레지스트리에서 제거됩니다.
    """

    name: str
    start_time: float
    color: str
    active: bool = True
    description: Optional[str] = None
    log_lines: List[Any] = field(default_factory=list)

    def elapsed(self, now: float) -> float:
        return now - self.start_time
