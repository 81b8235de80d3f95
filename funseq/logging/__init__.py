"""
Logging configuration and utilities for funseq.
"""
from .config import configure_logging, get_logger, get_config_logger

__all__ = ["configure_logging", "get_logger", "get_config_logger"]
