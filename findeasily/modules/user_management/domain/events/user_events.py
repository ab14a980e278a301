# 📄 File: findeasily/modules/user_management/domain/events/user_events.py
# 🧭 Purpose (Layman Explanation):
# Defines the things that happen to an account that other parts of the site care about - a new
# sign-up, a forgotten password, a finished password reset - and the "outbox" they are sent to.
# 🧪 Purpose (Technical Summary):
# UserEvent domain event with its type enumeration and the UserEventPublisher facade that turns
# (event type, user) into an event on the outbound queue.
# 🔗 Dependencies:
# shared.events (DomainEvent, EventPublisher), User domain model
# 🔄 Connected Modules / Calls From:
# Registration request handler, user event subscribers, tests (recording queue)

import logging
from enum import Enum
from typing import Any, Dict, Optional

from findeasily.shared.events.base import DomainEvent, EventMetadata
from findeasily.shared.events.publisher import EventPublisher
from findeasily.shared.utils.logging import request_id_var

from ..models.user import User

logger = logging.getLogger(__name__)


class UserEventType(str, Enum):
    ACCOUNT_CONFIRMATION = "ACCOUNT_CONFIRMATION"
    PASSWORD_RESET_REQUEST = "PASSWORD_RESET_REQUEST"
    PASSWORD_RESET_COMPLETE = "PASSWORD_RESET_COMPLETE"


class UserEvent(DomainEvent):
    """
    Event carrying the affected user.

    Only identifying data travels with the event; subscribers load whatever
    else they need.
    """

    def __init__(self, event_type: UserEventType, user: User, metadata: Optional[EventMetadata] = None, **kwargs):
        self.user_event_type = UserEventType(event_type)
        super().__init__(
            event_type=self.user_event_type.value,
            data={
                "user_id": user.id,
                "email": user.email,
                "role": user.role.value,
            },
            metadata=metadata,
            category="user",
            user_id=user.id,
            **kwargs
        )

    def _validate_event_data(self):
        if not self.data.get("user_id"):
            raise ValueError("user_id is required")
        if not self.data.get("email"):
            raise ValueError("email is required")

    @property
    def user_id(self) -> str:
        return self.data["user_id"]

    @property
    def email(self) -> str:
        return self.data["email"]


class UserEventPublisher:
    """Publishes user events to the outbound queue without waiting for subscribers."""

    def __init__(self, publisher: EventPublisher):
        self.publisher = publisher

    def publish(self, event_type: UserEventType, user: User) -> bool:
        event = UserEvent(event_type, user, request_id=request_id_var.get() or None)
        published = self.publisher.publish(event)
        if published:
            logger.info(f"Queued {event_type.value} for user {user.id}")
        return published


def event_summary(event: UserEvent) -> Dict[str, Any]:
    return {
        "event_id": event.event_id,
        "event_type": event.event_type,
        "user_id": event.user_id,
    }
