# 📄 File: findeasily/shared/events/__init__.py
# 🧭 Purpose (Layman Explanation):
# Groups the pieces that let one part of the site announce "something happened"
# and let other parts react to it later.
# 🧪 Purpose (Technical Summary):
# Domain event base classes, handler registry and outbound event queue/publisher.

from .base import DomainEvent, EventMetadata
from .handlers import EventHandlerRegistry, HandlerExecutionResult
from .publisher import (
    AsyncioEventQueue,
    EventPublisher,
    EventQueue,
    EventQueueFullError,
    EventQueueStatus,
)

__all__ = [
    "DomainEvent",
    "EventMetadata",
    "EventHandlerRegistry",
    "HandlerExecutionResult",
    "AsyncioEventQueue",
    "EventPublisher",
    "EventQueue",
    "EventQueueFullError",
    "EventQueueStatus",
]
