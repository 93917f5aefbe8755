# src/processlog/utils/decorators.py

import functools
from typing import Callable, Any, Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from processlog.core import ProcessRegistry

def _resolve(registry: Optional["ProcessRegistry"]) -> "ProcessRegistry":
    if registry is not None:
        return registry
    # core 가 presentation → utils 를 import 하므로 지연 import
    from processlog.core import get_registry
    return get_registry()

def track_process(
    name: Optional[str] = None,
    description: Optional[str] = None,
    log: bool = True,
    registry: Optional["ProcessRegistry"] = None,
) -> Callable[[Callable], Callable]:
    """
    Run the decorated function as a process: START on call, END (with duration) on return.
    The process is ended even when the function raises.
    """
    def decorator(func: Callable) -> Callable:
        process_name = name or func.__name__

        @functools.wraps(func)
        def wrapper(*args, **kwargs) -> Any:
            target = _resolve(registry)
            target.start(process_name, log=log, description=description)
            try:
                return func(*args, **kwargs)
            finally:
                target.end(process_name)
        return wrapper
    return decorator

def log_lifecycle(process_name: str, registry: Optional["ProcessRegistry"] = None) -> Callable[[Callable], Callable]:
    """Log 'Starting' / 'Finished' lines for the decorated function into a live process."""
    def decorator(func: Callable) -> Callable:
        @functools.wraps(func)
        def wrapper(*args, **kwargs) -> Any:
            label = func.__qualname__
            target = _resolve(registry)
            target.log(process_name, f"Starting: {label}")
            result = func(*args, **kwargs)
            target.log(process_name, f"Finished: {label}")
            return result
        return wrapper
    return decorator
