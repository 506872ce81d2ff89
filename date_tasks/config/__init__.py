"""
Configuration loading for the date tasks.
"""

from date_tasks.config.manager import ConfigManager

__all__ = ["ConfigManager"]
