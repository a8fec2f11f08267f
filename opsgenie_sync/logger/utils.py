from collections.abc import Callable, Generator
from contextlib import contextmanager
from dataclasses import dataclass
from functools import wraps
from typing import ParamSpec, TypeVar

from .app_logger import get_app_logger

P = ParamSpec("P")
R = TypeVar("R")


@dataclass
class OperationStatus:
    """Outcome of a block wrapped by `log_operation`."""

    succeeded: bool = False


def print_section(section: str) -> None:
    logger = get_app_logger()
    logger.print("=" * 50)
    logger.print("%s...", section)
    logger.print("=" * 50 + "\n")


@contextmanager
def log_operation(operation_name: str) -> Generator[OperationStatus, None, None]:
    """
    Context manager to log when an operation starts, finishes, or fails.

    Failures are logged with their traceback and suppressed, check the yielded
    status to know whether the block completed.
    """
    logger = get_app_logger()
    status = OperationStatus()
    logger.info("Starting to %s...", operation_name)
    try:
        yield status
        status.succeeded = True
        logger.success("Successfully %s.\n", operation_name)
    except Exception:
        logger.exception("Failed to %s", operation_name)


def log_role_sync() -> Callable[[Callable[P, R]], Callable[P, R]]:
    def decorator(func: Callable[P, R]) -> Callable[P, R]:
        """
        Decorate a team role sync function to log around it.

        The resource name should always be the second argument of the function.
        """

        @wraps(func)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
            name = args[1]
            if not isinstance(name, str):
                # Raise an error here since this is purely a programming error
                msg = "Second argument must be the resource name"
                raise TypeError(msg)

            logger = get_app_logger()
            logger.print("Syncing team role %s...\n", name)
            result = func(*args, **kwargs)
            logger.print("")
            return result

        return wrapper

    return decorator
