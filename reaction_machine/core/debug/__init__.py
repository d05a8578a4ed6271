"""
Debug exports.

Console logging shared by every module.
"""

from reaction_machine.core.debug.debug_logger import DebugLogger, LoggerConfig

__all__ = [
    'DebugLogger',
    'LoggerConfig',
]
