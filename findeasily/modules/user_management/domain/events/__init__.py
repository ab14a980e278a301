# 📄 File: findeasily/modules/user_management/domain/events/__init__.py
# 🧭 Purpose (Layman Explanation):
# Organizes the account events (sign-up, forgotten password, password reset) and the automatic
# reactions to them
# 🧪 Purpose (Technical Summary):
# Package initialization for user domain events, their publisher facade and subscribers
# 🔗 Dependencies:
# user_events.py, handlers.py
# 🔄 Connected Modules / Calls From:
# Registration handler, main.py, tests

from .user_events import UserEvent, UserEventPublisher, UserEventType
from .handlers import UserEventSubscribers

__all__ = [
    "UserEvent",
    "UserEventPublisher",
    "UserEventType",
    "UserEventSubscribers",
]
