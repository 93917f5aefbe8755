# src/processlog/core/errors.py

class ProcessLogError(Exception):
    """Base class for process logger errors."""


class UnknownProcessError(ProcessLogError, KeyError):
    """Raised when a name has no live process record."""

    def __init__(self, name: str):
        super().__init__(name)
        self.name = name

    def __str__(self) -> str:
        return f"No active process named '{self.name}'"
