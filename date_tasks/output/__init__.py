"""
Console output formatting.
"""

from date_tasks.output.formatter import ConsoleFormatter

__all__ = ["ConsoleFormatter"]
