# 📄 File: findeasily/shared/events/publisher.py
# 🧭 Purpose (Layman Explanation):
# This file is like a post office for the site - when something important happens (like a password
# reset request), the request drops a letter in the outbox and a separate worker delivers it later,
# so the visitor never waits for emails to be sent.
# 🧪 Purpose (Technical Summary):
# Outbound event queue and publisher. Publishing is a non-blocking enqueue; a background worker
# task drains the queue and dispatches each event to the handler registry, decoupled from the
# request/response cycle.
# 🔗 Dependencies:
# base.py, handlers.py, asyncio, logging, abc, enum
# 🔄 Connected Modules / Calls From:
# main.py (lifespan start/stop), user_management.domain.events (UserEventPublisher),
# presentation dependencies

import asyncio
import logging
from abc import ABC, abstractmethod
from enum import Enum
from typing import Optional

from .base import DomainEvent
from .handlers import EventHandlerRegistry

logger = logging.getLogger(__name__)


class EventQueueStatus(Enum):
    """Lifecycle of the queue worker"""
    CREATED = "created"
    RUNNING = "running"
    STOPPED = "stopped"


class EventQueueFullError(Exception):
    """Raised when an event cannot be enqueued because the queue is at capacity."""


class EventQueue(ABC):
    """Outbound destination for published domain events."""

    @abstractmethod
    def put(self, event: DomainEvent) -> None:
        """
        Enqueue an event without blocking.

        Raises:
            EventQueueFullError: If the event cannot be accepted
        """


class AsyncioEventQueue(EventQueue):
    """
    In-process event queue backed by asyncio.Queue.

    `start` spawns a single worker task on the running loop that delivers
    events to the registry in FIFO order; `stop` drains what is left and
    cancels the worker.
    """

    def __init__(self, registry: EventHandlerRegistry, max_size: int = 1000):
        self.registry = registry
        self._queue: asyncio.Queue = asyncio.Queue(maxsize=max_size)
        self._worker: Optional[asyncio.Task] = None
        self.status = EventQueueStatus.CREATED

        # Statistics
        self.published_count = 0
        self.processed_count = 0
        self.failed_count = 0

    def put(self, event: DomainEvent) -> None:
        try:
            self._queue.put_nowait(event)
        except asyncio.QueueFull as e:
            raise EventQueueFullError(f"Event queue is full, dropping {event}") from e
        self.published_count += 1

    @property
    def pending(self) -> int:
        return self._queue.qsize()

    async def start(self) -> None:
        if self._worker is not None and not self._worker.done():
            logger.warning("Event queue worker already running")
            return
        self._worker = asyncio.create_task(self._run(), name="event-queue-worker")
        self.status = EventQueueStatus.RUNNING
        logger.info("Event queue worker started")

    async def stop(self, drain: bool = True) -> None:
        """
        Stop the worker.

        Args:
            drain: Deliver already queued events before stopping
        """
        if self._worker is None:
            return
        if drain and not self._worker.done():
            await self._queue.join()
        self._worker.cancel()
        try:
            await self._worker
        except asyncio.CancelledError:
            pass
        self._worker = None
        self.status = EventQueueStatus.STOPPED
        logger.info(
            f"Event queue worker stopped (published={self.published_count}, "
            f"processed={self.processed_count}, failed={self.failed_count})"
        )

    async def join(self) -> None:
        """Wait until every queued event has been delivered."""
        await self._queue.join()

    async def _run(self) -> None:
        while True:
            event = await self._queue.get()
            try:
                results = await self.registry.dispatch(event)
                if all(result.success for result in results):
                    self.processed_count += 1
                else:
                    self.failed_count += 1
            except Exception as e:
                self.failed_count += 1
                logger.error(
                    f"Dispatch failed for event {event}: {e}",
                    exc_info=True,
                    extra={"extra_fields": {"event": event.to_dict()}},
                )
            finally:
                self._queue.task_done()


class EventPublisher:
    """
    Fire-and-forget publisher writing domain events to an EventQueue.

    Publishing never blocks the caller and never raises into the request:
    a rejected event is logged and reported through the return value.
    """

    def __init__(self, queue: EventQueue):
        self.queue = queue

    def publish(self, event: DomainEvent) -> bool:
        """
        Publish a domain event.

        Args:
            event: Domain event to publish

        Returns:
            bool: True when the event was enqueued
        """
        try:
            self.queue.put(event)
        except EventQueueFullError as e:
            logger.error(f"Failed to publish event {event}: {e}")
            return False

        logger.debug(f"Published event {event}")
        return True
