from .logger import SERVICE_NAME, get_logger, set_log_level

__all__ = ["SERVICE_NAME", "get_logger", "set_log_level"]
