"""Performance profiling utilities for cl_image_tools algorithms."""

import time
from collections.abc import Callable
from functools import wraps
from typing import ParamSpec, TypeVar

from loguru import logger

P = ParamSpec("P")
R = TypeVar("R")


def elapsed_ms(start_time: float) -> float:
    """Milliseconds since a time.perf_counter() reading."""
    return (time.perf_counter() - start_time) * 1000


def timed(func: Callable[P, R]) -> Callable[P, R]:
    """Decorator to measure and log execution time of algorithm functions.

    Logs the function name and execution time at INFO level.

    Usage:
        @timed
        def my_algorithm(image):
            # ... processing ...
            return result
    """

    @wraps(func)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
        start_time = time.perf_counter()
        try:
            return func(*args, **kwargs)
        finally:
            logger.info(f"[PROFILE] {func.__qualname__} took {elapsed_ms(start_time):.1f}ms")

    return wrapper
