"""
================================================================================
Common Utilities
================================================================================

Shared configuration management and logging setup.

Exports:
    - ContribConfig: Singleton configuration manager
    - get_config: Convenience function to get configuration values
    - init_logger: Initialize the loguru logger with standard settings

Usage:
    from playwright_contrib.common import get_config, init_logger

    init_logger()
    timeout = get_config("timeouts.elements_removed")

================================================================================
"""

from .config import ConfigurationError, ContribConfig, get_config
from .logger import get_logger, init_logger, reset_logger

__all__ = [
    "ContribConfig",
    "ConfigurationError",
    "get_config",
    "init_logger",
    "get_logger",
    "reset_logger",
]
