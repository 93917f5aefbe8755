# src/processlog/core/registry.py
import random
import threading
import time
from contextlib import contextmanager
from typing import Any, Callable, Dict, Iterator, List, Optional, Sequence

from processlog.config import Config
from processlog.presentation import CallSite, ConsolePresenter, Presenter, capture_call_site
from processlog.utils.logger import Log
from .errors import UnknownProcessError
from .handle import ProcessHandle
from .record import ProcessRecord

_ON_UNKNOWN_POLICIES = ("ignore", "warn")
_reported_policies = set()

def _configured_policy() -> str:
    """Config.ON_UNKNOWN, or "ignore" (reported once per value) when it is not a known policy."""
    policy = Config.ON_UNKNOWN
    if policy in _ON_UNKNOWN_POLICIES:
        return policy
    if policy not in _reported_policies:
        _reported_policies.add(policy)
        Log.warning(f"PROCESSLOG_ON_UNKNOWN='{policy}' is not one of {_ON_UNKNOWN_POLICIES}, using 'ignore'")
    return "ignore"

class ProcessRegistry:
    """
    # ProcessRegistry
    Structured logging of named processes from start to finish.

    - start / end 로 프로세스 구간을 표시하고 종료 시 소요 시간을 출력합니다.
    - 프로세스별로 로깅을 켜고 끌 수 있습니다.
    - 프로세스마다 고정된 색상으로 출력을 구분합니다.

    Usage:
        registry = ProcessRegistry()
        registry.start("datasource", description="Fetches data source templates.")
        registry.log("datasource", "Creating data source")
        registry["datasource"].log("SUCCESS - Fetched data source template")
        registry.end("datasource")

    Output:
        ---------- START - datasource ---------- - Process logger.
        • datasource - Creating data source /app.py:12
        ---------- END - datasource ---------- - Completed in 1.46 seconds.

    Referencing a name with no live process never raises: the call is a
    no-op, or a warning on the presenter when on_unknown="warn".
    """

    def __init__(
        self,
        presenter: Optional[Presenter] = None,
        clock: Callable[[], float] = time.perf_counter,
        rng: Optional[random.Random] = None,
        palette: Sequence[str] = Config.PALETTE,
        call_site: Callable[[], CallSite] = capture_call_site,
        on_unknown: Optional[str] = None,
        keep_disabled_lines: Optional[bool] = None,
    ):
        if on_unknown is None:
            on_unknown = _configured_policy()
        elif on_unknown not in _ON_UNKNOWN_POLICIES:
            raise ValueError(f"on_unknown must be one of {_ON_UNKNOWN_POLICIES}, got '{on_unknown}'")
        if not palette:
            raise ValueError("palette must not be empty")

        self.presenter = presenter or ConsolePresenter()
        self.clock = clock
        self.rng = rng or random.Random()
        self.palette = tuple(palette)
        self.call_site = call_site
        self.on_unknown = on_unknown
        self.keep_disabled_lines = (
            Config.KEEP_DISABLED_LINES if keep_disabled_lines is None else keep_disabled_lines
        )

        self.processes: Dict[str, ProcessRecord] = {}
        self._lock = threading.RLock()

    # ---------------------------------- Start ---------------------------------
    def start(
        self,
        name: str,
        log: bool = Config.DEFAULT_LOG,
        description: Optional[str] = None,
        color: Optional[str] = None,
    ) -> ProcessHandle:
        """
        Start a process and return a handle bound to its name.

        A live process with the same name is replaced, not merged.
        Pass log=False to keep the process silent.
        """
        if not isinstance(name, str) or not name:
            raise ValueError("Process name must be a non-empty string")

        with self._lock:
            record = ProcessRecord(
                name=name,
                start_time=self.clock(),
                color=color or self.rng.choice(self.palette),
                active=log,
                description=description,
            )
            self.processes[name] = record

        if record.active:
            self.presenter.render_start(name, record.color, description)
        return ProcessHandle(self, name)

    # ----------------------------------- Log ----------------------------------
    def log(self, name: str, message: Any) -> ProcessHandle:
        """Log a message (str or structured value) to a live process."""
        handle = ProcessHandle(self, name)
        missing = None
        with self._lock:
            try:
                record = self._lookup(name)
            except UnknownProcessError as e:
                missing = e
            else:
                active = record.active
                if active or self.keep_disabled_lines:
                    record.log_lines.append(message)

        if missing is not None:
            self._unknown(missing, "log")
        elif active:
            self.presenter.render_log(name, record.color, message, self._capture_call_site())
        return handle

    # ----------------------------------- End ----------------------------------
    def end(self, name: str) -> Optional[float]:
        """
        End a process: report its duration if active, then forget it.
        Returns the duration in seconds, or None for an unknown name.
        """
        missing = None
        with self._lock:
            try:
                record = self._lookup(name)
            except UnknownProcessError as e:
                missing = e
            else:
                duration = record.elapsed(self.clock())
                del self.processes[name]

        if missing is not None:
            self._unknown(missing, "end")
            return None
        if record.active:
            self.presenter.render_end(name, record.color, duration)
        return duration

    def toggle_logging(self, name: str, active: bool) -> None:
        missing = None
        with self._lock:
            try:
                self._lookup(name).active = active
            except UnknownProcessError as e:
                missing = e

        if missing is not None:
            self._unknown(missing, "toggle_logging")

    @contextmanager
    def process(
        self,
        name: str,
        log: bool = Config.DEFAULT_LOG,
        description: Optional[str] = None,
        color: Optional[str] = None,
    ) -> Iterator[ProcessHandle]:
        handle = self.start(name, log=log, description=description, color=color)
        try:
            yield handle
        finally:
            handle.end()

    # ------------------------------ Introspection -----------------------------
    def get(self, name: str) -> Optional[ProcessRecord]:
        with self._lock:
            return self.processes.get(name)

    def names(self) -> List[str]:
        with self._lock:
            return list(self.processes)

    def __getitem__(self, name: str) -> ProcessHandle:
        return ProcessHandle(self, name)

    def __contains__(self, name: object) -> bool:
        with self._lock:
            return name in self.processes

    def __len__(self) -> int:
        with self._lock:
            return len(self.processes)

    # --------------------------------- Helpers --------------------------------
    def _lookup(self, name: str) -> ProcessRecord:
        record = self.processes.get(name)
        if record is None:
            raise UnknownProcessError(name)
        return record

    def _unknown(self, error: UnknownProcessError, operation: str) -> None:
        # lock 밖에서 호출
        if self.on_unknown == "warn":
            self.presenter.warning(f"{operation}: {error}")

    def _capture_call_site(self) -> CallSite:
        # 호출 위치 조회 실패는 로그 호출을 실패시키지 않음
        try:
            return self.call_site()
        except Exception:
            return CallSite.unknown()


# 모듈 레벨 기본 인스턴스 (프로세스 수명 동안 유지)
_default_registry: Optional[ProcessRegistry] = None
_default_lock = threading.Lock()

def get_registry() -> ProcessRegistry:
    """Process-wide default registry, created on first use."""
    global _default_registry
    with _default_lock:
        if _default_registry is None:
            _default_registry = ProcessRegistry()
        return _default_registry
