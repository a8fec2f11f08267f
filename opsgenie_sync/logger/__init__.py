from .app_logger import get_app_logger, get_log_status_filter
from .components import AppLogger, LogStatusFilter
from .utils import OperationStatus, log_operation, log_role_sync, print_section

__all__ = [
    "AppLogger",
    "LogStatusFilter",
    "OperationStatus",
    "get_app_logger",
    "get_log_status_filter",
    "log_operation",
    "log_role_sync",
    "print_section",
]
