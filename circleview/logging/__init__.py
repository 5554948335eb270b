"""
Structured Logging for circleview
=================================

Bounded Context: Observability

Public API
----------
    LogEvent: Typed event names (enum)
    StructuredLogger: JSON logger implementation
    create_logger: Factory function

Example:
    >>> from circleview.logging import create_logger, LogEvent
    >>> logger = create_logger("renderer")
    >>> logger.info(
    ...     event=LogEvent.COMPOSITE_BUILT,
    ...     message="Built composite",
    ...     metadata={'viewport': [200, 200]}
    ... )
"""

from .events import LogEvent
from .structured import StructuredLogger, create_logger

__all__ = [
    'LogEvent',
    'StructuredLogger',
    'create_logger',
]
