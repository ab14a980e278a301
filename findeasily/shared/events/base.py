# 📄 File: findeasily/shared/events/base.py

# 🧭 Purpose (Layman Explanation):
# Describes what every "something happened" note looks like: a kind, the facts about what
# happened, and a small label saying when and during which web request it was written.

# 🧪 Purpose (Technical Summary):
# DomainEvent base class and its EventMetadata (id, UTC timestamp, originating request and
# user, category) shared by every module that emits events onto the outbound queue.

# 🔗 Dependencies:
# - dataclasses, uuid, datetime

# 🔄 Connected Modules / Calls From:
# Used by: user_management.domain.events (UserEvent), event publisher and queue,
# event handler registry

from abc import ABC, abstractmethod
from dataclasses import dataclass, field, asdict
from datetime import datetime, timezone
from typing import Any, Dict, Optional
from uuid import uuid4


@dataclass
class EventMetadata:
    """Bookkeeping attached to an event when it is created."""
    event_id: str = field(default_factory=lambda: str(uuid4()))
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    source: str = "findeasily-web"
    user_id: Optional[str] = None
    request_id: Optional[str] = None
    category: str = "general"

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data['timestamp'] = self.timestamp.isoformat()
        return data


class DomainEvent(ABC):
    """
    Base class for events placed on the outbound queue.

    Subclasses pass a flat ``data`` payload and check it in
    ``_validate_event_data``. Keyword arguments naming an ``EventMetadata``
    field (``request_id``, ``category``, ...) are copied onto the metadata;
    anything else is ignored.
    """

    def __init__(
        self,
        event_type: str,
        data: Dict[str, Any],
        metadata: Optional[EventMetadata] = None,
        **kwargs
    ):
        if not event_type:
            raise ValueError("Event type is required")
        if not isinstance(data, dict):
            raise ValueError("Event data must be a dictionary")

        self.event_type = event_type
        self.data = data
        self.metadata = metadata or EventMetadata()
        for key, value in kwargs.items():
            if hasattr(self.metadata, key):
                setattr(self.metadata, key, value)

        self._validate_event_data()

    @abstractmethod
    def _validate_event_data(self):
        """Raise ValueError when the payload is incomplete."""

    @property
    def event_id(self) -> str:
        return self.metadata.event_id

    def to_dict(self) -> Dict[str, Any]:
        return {
            'event_type': self.event_type,
            'data': self.data,
            'metadata': self.metadata.to_dict()
        }

    def __str__(self) -> str:
        return f"{self.event_type}({self.event_id})"

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(type='{self.event_type}', id='{self.event_id}')"
