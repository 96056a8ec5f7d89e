"""
Configuration Module

Application settings and logging setup.
"""

from .settings import Settings, get_settings, DEFAULT_DB_PATH
from .logging_setup import configure_logging, LOG_FORMAT

__all__ = ['Settings', 'get_settings', 'DEFAULT_DB_PATH', 'configure_logging', 'LOG_FORMAT']
