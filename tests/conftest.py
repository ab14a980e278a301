"""Pytest configuration and fixtures."""

import io
import os
from typing import Dict, List, Optional

# Settings are cached on first use, so the test environment is set before
# anything from the package is imported.
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("DEBUG", "false")
os.environ.setdefault("RATE_LIMIT_ENABLED", "false")
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("BCRYPT_ROUNDS", "4")
os.environ.setdefault("LOG_FORMAT", "text")
os.environ.setdefault("SECRET_KEY", "test-session-secret")
os.environ.setdefault("JWT_SECRET_KEY", "test-jwt-secret")

import pytest
from fastapi.testclient import TestClient
from PIL import Image

from findeasily.main import create_application
from findeasily.modules.listing_management.domain.models.listing import Listing, ListingPhoto
from findeasily.modules.listing_management.domain.repositories.listing_repository import ListingRepository
from findeasily.modules.user_management.domain.models.token import Token, TokenType
from findeasily.modules.user_management.domain.models.user import Role, User, UserExt
from findeasily.modules.user_management.domain.repositories.token_repository import TokenRepository
from findeasily.modules.user_management.domain.repositories.user_repository import UserRepository
from findeasily.modules.user_management.domain.services.user_service import UserService
from findeasily.modules.user_management.infrastructure.database.user_repository_impl import SQLAlchemyUserRepository
from findeasily.modules.user_management.infrastructure.external.mail_sender import MailMessage, MailSender
from findeasily.shared.config.settings import Settings
from findeasily.shared.core.dependencies import CurrentUser, get_settings_dep
from findeasily.shared.core.exceptions import DuplicateResourceError
from findeasily.shared.core.security import PasswordEncoder, get_password_encoder
from findeasily.shared.events.base import DomainEvent
from findeasily.shared.events.publisher import EventPublisher, EventQueue


# ============================================================================
# In-memory collaborators
# ============================================================================

class InMemoryUserRepository(UserRepository):
    """Dict-backed user repository recording every write."""

    def __init__(self):
        self.users: Dict[str, User] = {}
        self.exts: Dict[str, UserExt] = {}
        self.writes: List[str] = []

    async def create(self, user: User) -> User:
        if any(u.email == user.email for u in self.users.values()):
            raise DuplicateResourceError("Email already exists", resource_type="user", field="email")
        self.users[user.id] = user.model_copy()
        self.writes.append("create")
        return user

    async def get_by_id(self, user_id: str) -> Optional[User]:
        user = self.users.get(user_id)
        return user.model_copy() if user else None

    async def get_by_email(self, email: str) -> Optional[User]:
        for user in self.users.values():
            if user.email == email:
                return user.model_copy()
        return None

    async def update(self, user: User) -> bool:
        self.writes.append("update")
        if user.id not in self.users:
            return False
        self.users[user.id] = user.model_copy()
        return True

    async def update_password_hash(self, user_id: str, password_hash: str) -> bool:
        self.writes.append("update_password_hash")
        user = self.users.get(user_id)
        if user is None:
            return False
        user.password_hash = password_hash
        return True

    async def list_all(self) -> List[User]:
        return [user.model_copy() for user in self.users.values()]

    async def get_ext(self, user_id: str) -> Optional[UserExt]:
        return self.exts.get(user_id)

    async def save_ext(self, user_ext: UserExt) -> UserExt:
        self.writes.append("save_ext")
        self.exts[user_ext.user_id] = user_ext
        return user_ext


class InMemoryTokenRepository(TokenRepository):

    def __init__(self):
        self.tokens: Dict[int, Token] = {}
        self._next_id = 1

    async def create(self, token: Token) -> Token:
        token = token.model_copy(update={"id": self._next_id})
        self.tokens[token.id] = token
        self._next_id += 1
        return token

    async def get_by_id(self, token_id: int) -> Optional[Token]:
        return self.tokens.get(token_id)

    async def get_by_value(self, value: str, token_type: TokenType) -> Optional[Token]:
        for token in self.tokens.values():
            if token.value == value and token.type == token_type:
                return token
        return None

    async def delete_by_id(self, token_id: int) -> bool:
        return self.tokens.pop(token_id, None) is not None

    async def delete_by_user_id(self, user_id: str, token_type: TokenType) -> int:
        doomed = [t.id for t in self.tokens.values() if t.user_id == user_id and t.type == token_type]
        for token_id in doomed:
            del self.tokens[token_id]
        return len(doomed)


class InMemoryListingRepository(ListingRepository):

    def __init__(self):
        self.listings: Dict[str, Listing] = {}
        self._next_photo_id = 1

    async def save(self, listing: Listing) -> Listing:
        self.listings[listing.id] = listing.model_copy(deep=True)
        return listing.model_copy(deep=True)

    async def get_by_id(self, listing_id: str) -> Optional[Listing]:
        listing = self.listings.get(listing_id)
        return listing.model_copy(deep=True) if listing else None

    async def get_by_owner_id(self, owner_id: str) -> List[Listing]:
        return [l.model_copy(deep=True) for l in self.listings.values() if l.owner_id == owner_id]

    async def add_photo(self, photo: ListingPhoto) -> ListingPhoto:
        photo = photo.model_copy(update={"id": self._next_photo_id})
        self._next_photo_id += 1
        self.listings[photo.listing_id].photos.append(photo)
        return photo


class RecordingEventQueue(EventQueue):
    """Keeps published events instead of delivering them."""

    def __init__(self):
        self.events: List[DomainEvent] = []

    def put(self, event: DomainEvent) -> None:
        self.events.append(event)

    def of_type(self, event_type: str) -> List[DomainEvent]:
        return [event for event in self.events if event.event_type == event_type]


class RecordingMailSender(MailSender):

    def __init__(self):
        self.messages: List[MailMessage] = []

    async def send(self, message: MailMessage) -> None:
        self.messages.append(message)


# ============================================================================
# Unit fixtures
# ============================================================================

@pytest.fixture
def password_encoder() -> PasswordEncoder:
    return PasswordEncoder(rounds=4)


@pytest.fixture
def user_repository() -> InMemoryUserRepository:
    return InMemoryUserRepository()


@pytest.fixture
def token_repository() -> InMemoryTokenRepository:
    return InMemoryTokenRepository()


@pytest.fixture
def listing_repository() -> InMemoryListingRepository:
    return InMemoryListingRepository()


@pytest.fixture
def event_queue() -> RecordingEventQueue:
    return RecordingEventQueue()


@pytest.fixture
def event_publisher(event_queue) -> EventPublisher:
    return EventPublisher(event_queue)


@pytest.fixture
def user_service(user_repository, password_encoder) -> UserService:
    return UserService(user_repository, password_encoder)


@pytest.fixture
def make_caller():
    def _make(user_id: str = "user-1", email: str = "user@example.com", admin: bool = False) -> CurrentUser:
        roles = [Role.ADMIN.value] if admin else [Role.USER.value]
        return CurrentUser(user_id=user_id, email=email, roles=roles)
    return _make


@pytest.fixture
def png_bytes() -> bytes:
    """A small valid PNG image."""
    buffer = io.BytesIO()
    Image.new("RGB", (32, 32), color=(200, 40, 40)).save(buffer, format="PNG")
    return buffer.getvalue()


# ============================================================================
# HTTP fixtures
# ============================================================================

@pytest.fixture
def test_settings(tmp_path) -> Settings:
    return Settings(
        ENVIRONMENT="test",
        DEBUG=False,
        DATABASE_URL=f"sqlite+aiosqlite:///{tmp_path / 'findeasily.db'}",
        DB_CREATE_ALL=True,
        UPLOAD_DIR=str(tmp_path / "uploads"),
        RATE_LIMIT_ENABLED=False,
        BCRYPT_ROUNDS=4,
        LOG_FORMAT="text",
        SITE_URL="http://testserver",
    )


@pytest.fixture
def mail_sender() -> RecordingMailSender:
    return RecordingMailSender()


@pytest.fixture
def client(test_settings, mail_sender):
    app = create_application(test_settings, mail_sender=mail_sender)
    app.dependency_overrides[get_settings_dep] = lambda: test_settings
    with TestClient(app, follow_redirects=False) as test_client:
        yield test_client


@pytest.fixture
def create_user(client):
    """Insert a user straight into the application database."""
    def _create(email: str, password: str, role: Role = Role.USER) -> User:
        async def _insert() -> User:
            async with client.app.state.database.session() as session:
                service = UserService(SQLAlchemyUserRepository(session), get_password_encoder())
                return await service.create(email, password, role)

        return client.portal.call(_insert)
    return _create


@pytest.fixture
def login(client):
    """Sign in and return the Authorization header."""
    def _login(email: str, password: str) -> Dict[str, str]:
        response = client.post("/login", data={"email": email, "password": password})
        assert response.status_code == 200, response.text
        return {"Authorization": f"Bearer {response.json()['access_token']}"}
    return _login


@pytest.fixture
def wait_for_events(client):
    """Block until the event worker has delivered everything queued."""
    def _wait() -> None:
        client.portal.call(client.app.state.event_queue.join)
    return _wait
