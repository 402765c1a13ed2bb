"""In-memory structures of a log-structured key-value store: skip list, snapshot list and log format constants."""

__version__ = "0.1.0"
__all__ = ["log_format", "skiplist", "snapshot"]