# 📄 File: findeasily/shared/events/handlers.py
# 🧭 Purpose (Layman Explanation):
# This file keeps the list of "listeners" that react when something important happens on the site
# (like sending an email after sign-up) and runs them one after another.
# 🧪 Purpose (Technical Summary):
# Event handler registry implementing publish-subscribe dispatch keyed by event type, with
# per-handler error isolation and execution results.
# 🔗 Dependencies:
# base.py, typing, inspect, logging, time
# 🔄 Connected Modules / Calls From:
# shared.events.publisher (queue worker), user_management.domain.events.handlers (subscriptions)

import inspect
import logging
import time
from collections import defaultdict
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Dict, List, Optional

from .base import DomainEvent

logger = logging.getLogger(__name__)

EventHandlerFunc = Callable[[DomainEvent], Awaitable[Any]]


@dataclass
class HandlerExecutionResult:
    """Result of handler execution"""
    handler_name: str
    success: bool
    execution_time: float
    error_message: Optional[str] = None
    error_type: Optional[str] = None


class EventHandlerRegistry:
    """
    Registry of async event handlers keyed by event type string.

    Handlers for one event run sequentially in subscription order; a failing
    handler is logged and does not prevent the others from running.
    """

    def __init__(self):
        self._handlers: Dict[str, List[EventHandlerFunc]] = defaultdict(list)

    def subscribe(self, event_type: str, handler: EventHandlerFunc) -> None:
        if not inspect.iscoroutinefunction(handler) and not inspect.iscoroutinefunction(
            getattr(handler, "__call__", None)
        ):
            raise TypeError(f"Handler for '{event_type}' must be an async callable")
        self._handlers[event_type].append(handler)
        logger.debug(f"Subscribed {_handler_name(handler)} to {event_type}")

    def get_handlers(self, event_type: str) -> List[EventHandlerFunc]:
        return list(self._handlers.get(event_type, []))

    async def dispatch(self, event: DomainEvent) -> List[HandlerExecutionResult]:
        """
        Deliver an event to every handler subscribed to its type.

        Args:
            event: Domain event to deliver

        Returns:
            List of per-handler execution results
        """
        handlers = self.get_handlers(event.event_type)
        if not handlers:
            logger.debug(f"No handlers registered for event type: {event.event_type}")
            return []

        results = []
        for handler in handlers:
            name = _handler_name(handler)
            start = time.perf_counter()
            try:
                await handler(event)
            except Exception as e:
                logger.error(
                    f"Event handler '{name}' failed for {event}: {e}",
                    exc_info=True,
                )
                results.append(HandlerExecutionResult(
                    handler_name=name,
                    success=False,
                    execution_time=time.perf_counter() - start,
                    error_message=str(e),
                    error_type=type(e).__name__,
                ))
            else:
                results.append(HandlerExecutionResult(
                    handler_name=name,
                    success=True,
                    execution_time=time.perf_counter() - start,
                ))
        return results


def _handler_name(handler: EventHandlerFunc) -> str:
    return getattr(handler, "__qualname__", None) or type(handler).__name__
