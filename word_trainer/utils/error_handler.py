"""Decorator that turns load failures into a logged error and a fallback value"""

import logging
from collections.abc import Callable
from functools import wraps
from typing import Any, TypeVar, cast

from ..exceptions import WordTrainerError

T = TypeVar("T")

ExceptionTypes = type[Exception] | tuple[type[Exception], ...]


def handle_errors(
    default_return: Any = None,
    reraise_on: ExceptionTypes | None = None,
    operation_name: str | None = None,
) -> Callable[[Callable[..., T]], Callable[..., T]]:
    """Log failures of the wrapped call and return ``default_return`` instead.

    ``WordTrainerError`` is an expected failure (a missing or unreadable word
    file) and is logged as one line. Anything else also gets a traceback.
    Exceptions matching ``reraise_on`` are caller bugs, e.g. a non-string
    resource name, and propagate unchanged.
    """

    def decorator(func: Callable[..., T]) -> Callable[..., T]:
        op_name = operation_name or func.__name__
        logger = logging.getLogger(func.__module__)

        @wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> T:
            try:
                return func(*args, **kwargs)
            except WordTrainerError as e:
                if reraise_on and isinstance(e, reraise_on):
                    raise
                logger.error(f"{op_name} failed: {e}")
            except Exception as e:
                if reraise_on and isinstance(e, reraise_on):
                    raise
                logger.exception(f"{op_name} failed unexpectedly: {e}")

            return cast(T, default_return)

        return wrapper

    return decorator
