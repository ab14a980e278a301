"""Tests for the event queue and the user event subscribers."""

import asyncio
from contextlib import asynccontextmanager

import pytest

from findeasily.modules.user_management.domain.events.handlers import UserEventSubscribers
from findeasily.modules.user_management.domain.events.user_events import (
    UserEvent,
    UserEventPublisher,
    UserEventType,
)
from findeasily.modules.user_management.domain.models.user import User
from findeasily.modules.user_management.domain.services.token_service import TokenService
from findeasily.shared.events import AsyncioEventQueue, EventHandlerRegistry, EventPublisher
from findeasily.shared.utils.logging import log_context


@pytest.fixture
def user():
    return User(email="known@example.com", password_hash="hash")


class TestEventHandlerRegistry:

    def test_rejects_sync_handlers(self):
        with pytest.raises(TypeError):
            EventHandlerRegistry().subscribe("X", lambda event: None)

    async def test_failing_handler_does_not_stop_others(self, user):
        registry = EventHandlerRegistry()
        seen = []

        async def broken(event):
            raise RuntimeError("boom")

        async def working(event):
            seen.append(event.event_type)

        registry.subscribe("ACCOUNT_CONFIRMATION", broken)
        registry.subscribe("ACCOUNT_CONFIRMATION", working)

        results = await registry.dispatch(UserEvent(UserEventType.ACCOUNT_CONFIRMATION, user))

        assert [r.success for r in results] == [False, True]
        assert results[0].error_type == "RuntimeError"
        assert seen == ["ACCOUNT_CONFIRMATION"]


class TestAsyncioEventQueue:

    async def test_delivers_in_order_outside_publisher(self, user):
        registry = EventHandlerRegistry()
        delivered = []

        async def record(event):
            delivered.append(event.event_type)

        for event_type in UserEventType:
            registry.subscribe(event_type.value, record)

        queue = AsyncioEventQueue(registry)
        publisher = UserEventPublisher(EventPublisher(queue))
        await queue.start()
        try:
            publisher.publish(UserEventType.PASSWORD_RESET_REQUEST, user)
            publisher.publish(UserEventType.PASSWORD_RESET_COMPLETE, user)
            await asyncio.wait_for(queue.join(), timeout=5)
        finally:
            await queue.stop()

        assert delivered == ["PASSWORD_RESET_REQUEST", "PASSWORD_RESET_COMPLETE"]
        assert queue.processed_count == 2

    def test_full_queue_reported_not_raised(self, user):
        queue = AsyncioEventQueue(EventHandlerRegistry(), max_size=1)
        publisher = UserEventPublisher(EventPublisher(queue))

        assert publisher.publish(UserEventType.ACCOUNT_CONFIRMATION, user) is True
        assert publisher.publish(UserEventType.ACCOUNT_CONFIRMATION, user) is False

    def test_request_id_travels_with_event(self, user, event_queue, event_publisher):
        with log_context(request_id="req-42"):
            UserEventPublisher(event_publisher).publish(UserEventType.ACCOUNT_CONFIRMATION, user)

        assert event_queue.events[0].metadata.request_id == "req-42"
        assert event_queue.events[0].metadata.category == "user"


class TestUserEventSubscribers:

    @pytest.fixture
    def subscribers(self, token_repository, mail_sender):
        @asynccontextmanager
        async def factory():
            yield TokenService(token_repository, expire_hours=2)

        return UserEventSubscribers(mail_sender, factory, "https://findeasily.test/")

    async def test_reset_request_issues_token_and_mails_link(self, subscribers, user, token_repository, mail_sender):
        await subscribers.on_password_reset_request(UserEvent(UserEventType.PASSWORD_RESET_REQUEST, user))

        token = next(iter(token_repository.tokens.values()))
        assert token.user_id == user.id
        message = mail_sender.messages[0]
        assert message.to == "known@example.com"
        assert f"https://findeasily.test/password/reset?token={token.value}" in message.body

    async def test_confirmation_and_completion_mails(self, subscribers, user, mail_sender):
        await subscribers.on_account_confirmation(UserEvent(UserEventType.ACCOUNT_CONFIRMATION, user))
        await subscribers.on_password_reset_complete(UserEvent(UserEventType.PASSWORD_RESET_COMPLETE, user))

        assert [m.subject for m in mail_sender.messages] == [
            "Welcome to FindEasily",
            "Your FindEasily password was changed",
        ]

    def test_register_subscribes_every_type(self, subscribers):
        registry = EventHandlerRegistry()
        subscribers.register(registry)
        for event_type in UserEventType:
            assert len(registry.get_handlers(event_type.value)) == 1
