# src/processlog/presentation/base.py
from abc import ABC, abstractmethod
from typing import Any, Optional

from .call_site import CallSite

class Presenter(ABC):
    """
    Output side of the process registry.
    The registry calls these synchronously; the output medium is up to the implementation.
    """

    @abstractmethod
    def render_start(self, name: str, color: str, description: Optional[str] = None) -> None:
        ...

    @abstractmethod
    def render_log(self, name: str, color: str, message: Any, call_site: Optional[CallSite] = None) -> None:
        ...

    @abstractmethod
    def render_end(self, name: str, color: str, duration: float) -> None:
        ...

    @abstractmethod
    def warning(self, message: str) -> None:
        """Diagnostic channel, e.g. for references to unknown processes."""
