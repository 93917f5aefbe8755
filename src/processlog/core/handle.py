# src/processlog/core/handle.py
from typing import Any, Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from .record import ProcessRecord
    from .registry import ProcessRegistry

class ProcessHandle:
    """
    Caller-facing handle bound to a process name.

    Calls are forwarded to the registry by name, so a handle kept across a
    re-start addresses the newest record, and a handle whose process has
    ended is a no-op.

        handle = registry.start("upload")
        handle.log("file 1").log("file 2").end()
    """

    __slots__ = ("name", "_registry")

    def __init__(self, registry: "ProcessRegistry", name: str):
        self.name = name
        self._registry = registry

    def log(self, message: Any) -> "ProcessHandle":
        return self._registry.log(self.name, message)

    def end(self) -> Optional[float]:
        return self._registry.end(self.name)

    def toggle(self, active: bool) -> "ProcessHandle":
        self._registry.toggle_logging(self.name, active)
        return self

    @property
    def record(self) -> Optional["ProcessRecord"]:
        return self._registry.get(self.name)

    @property
    def alive(self) -> bool:
        return self.name in self._registry

    def __enter__(self) -> "ProcessHandle":
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        self.end()

    def __repr__(self) -> str:
        return f"ProcessHandle(name={self.name!r}, alive={self.alive})"
