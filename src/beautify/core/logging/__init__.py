from .setup import SessionIdFilter, configure_logging, get_logger, log_file_paths

__all__ = ["SessionIdFilter", "configure_logging", "get_logger", "log_file_paths"]
