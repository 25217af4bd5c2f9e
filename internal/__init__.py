from internal.logging import LogLevel, StructuredLogger, configure_logging, get_logger

__all__ = [
    "LogLevel",
    "StructuredLogger",
    "configure_logging",
    "get_logger",
]
