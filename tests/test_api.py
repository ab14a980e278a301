"""HTTP-level tests across the full routing surface."""

import pytest

from findeasily.modules.user_management.domain.models.user import Role


PASSWORD = "correct-horse"


@pytest.fixture
def alice(create_user):
    return create_user("alice@example.com", PASSWORD)


@pytest.fixture
def alice_headers(alice, login):
    return login("alice@example.com", PASSWORD)


@pytest.fixture
def admin_headers(create_user, login):
    create_user("admin@example.com", PASSWORD, Role.ADMIN)
    return login("admin@example.com", PASSWORD)


# ============================================================================
# Application shell
# ============================================================================

class TestShell:

    def test_health(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json()["components"]["database"]["status"] == "healthy"
        assert response.json()["components"]["event_queue"]["status"] == "running"

    def test_request_id_echoed(self, client):
        response = client.get("/health/live", headers={"X-Request-ID": "abc-123"})
        assert response.headers["X-Request-ID"] == "abc-123"

    def test_unauthenticated_error_envelope(self, client):
        response = client.get("/user")
        body = response.json()

        assert response.status_code == 401
        assert body["error"]["code"] == "AUTHENTICATION_ERROR"
        assert body["error"]["request_id"] == response.headers["X-Request-ID"]
        assert "timestamp" in body["error"]


# ============================================================================
# Public endpoints
# ============================================================================

class TestSignupAndLogin:

    def test_signup_then_login(self, client, login):
        response = client.post(
            "/signup",
            data={"email": "new@example.com", "password": "pw123", "password_repeated": "pw123"},
        )

        assert response.status_code == 200
        assert response.json()["email"] == "new@example.com"
        assert response.json()["role"] == "USER"
        assert "Authorization" in login("new@example.com", "pw123")

    def test_signup_sends_confirmation_mail(self, client, mail_sender, wait_for_events):
        client.post("/signup", data={"email": "mail@example.com", "password": "p", "password_repeated": "p"})
        wait_for_events()
        assert [m.subject for m in mail_sender.messages] == ["Welcome to FindEasily"]

    def test_signup_validation_errors(self, client):
        response = client.post("/signup", data={"email": "bad", "password": "a", "password_repeated": "b"})
        error = response.json()["error"]

        assert response.status_code == 422
        assert error["code"] == "FORM_VALIDATION_ERROR"
        assert [e["code"] for e in error["details"]["errors"]] == ["email.invalid", "password.no_match"]

    def test_duplicate_signup_is_422_not_500(self, client, alice):
        response = client.post(
            "/signup",
            data={"email": "alice@example.com", "password": "x", "password_repeated": "x"},
        )
        assert response.status_code == 422
        assert response.json()["error"]["details"]["errors"][0]["message"] == "Email already exists"

    def test_wrong_password(self, client, alice):
        response = client.post("/login", data={"email": "alice@example.com", "password": "nope"})
        assert response.status_code == 401


class TestPasswordReset:

    def test_unknown_email(self, client, alice):
        response = client.post("/password/forget/handler", data={"email": "missing@example.com"})
        assert response.status_code == 404
        assert response.json()["error"]["message"] == (
            "There is no existing user account associated with this email address"
        )

    def test_full_reset_flow(self, client, alice, mail_sender, wait_for_events, login):
        response = client.post("/password/forget/handler", data={"email": "alice@example.com"})
        assert response.status_code == 200
        assert response.content == b""

        wait_for_events()
        reset_mails = [m for m in mail_sender.messages if m.subject == "Reset your FindEasily password"]
        assert len(reset_mails) == 1
        token = reset_mails[0].body.split("token=")[1].split()[0]

        assert client.get("/password/reset", params={"token": token}).status_code == 200

        response = client.post(
            "/password/reset/handler",
            data={"user_id": "ignored", "password": "new-secret", "password_repeated": "new-secret"},
        )
        assert response.status_code == 200
        assert response.json()["id"] == alice.id

        assert "Authorization" in login("alice@example.com", "new-secret")
        # token is single use
        assert client.get("/password/reset", params={"token": token}).status_code == 404

    def test_reset_without_session(self, client, alice):
        response = client.post(
            "/password/reset/handler",
            data={"user_id": alice.id, "password": "x", "password_repeated": "x"},
        )
        assert response.status_code == 500
        assert response.json()["error"]["message"] == "Something went wrong."

    def test_invalid_token(self, client):
        assert client.get("/password/reset", params={"token": "nope"}).status_code == 404


# ============================================================================
# Account pages
# ============================================================================

class TestAccount:

    def test_self_page_empty_by_default(self, client, alice_headers):
        response = client.get("/user", headers=alice_headers)
        assert response.status_code == 200
        assert response.json()["view"] == "user/user"
        assert response.json()["model"]["user_ext"]["self_introduction"] is None

    def test_update_profile_with_picture(self, client, alice, alice_headers, png_bytes):
        response = client.post(
            "/user",
            data={"self-introduction": "Hi, I rent flats"},
            files={"file": ("me.png", png_bytes, "image/png")},
            headers=alice_headers,
        )
        assert response.status_code == 303
        assert response.headers["location"] == "/user"

        user_ext = client.get("/user", headers=alice_headers).json()["model"]["user_ext"]
        assert user_ext["self_introduction"] == "Hi, I rent flats"
        assert user_ext["picture"].startswith(f"users/{alice.id}/")

    def test_bad_picture_persists_nothing(self, client, alice_headers):
        response = client.post(
            "/user",
            data={"self-introduction": "Hello"},
            files={"file": ("me.png", b"not an image", "image/png")},
            headers=alice_headers,
        )
        assert response.status_code == 415
        assert client.get("/user", headers=alice_headers).json()["model"]["user_ext"]["self_introduction"] is None

    def test_other_user_page_forbidden(self, client, alice_headers, create_user):
        bob = create_user("bob@example.com", PASSWORD)
        assert client.get(f"/user/{bob.id}", headers=alice_headers).status_code == 403

    def test_own_user_page(self, client, alice, alice_headers):
        response = client.get(f"/user/{alice.id}", headers=alice_headers)
        assert response.json()["model"]["user"]["email"] == "alice@example.com"

    def test_admin_sees_any_user_and_unknown_is_404(self, client, alice, admin_headers):
        assert client.get(f"/user/{alice.id}", headers=admin_headers).status_code == 200
        assert client.get("/user/does-not-exist", headers=admin_headers).status_code == 404


class TestPasswordChange:

    def test_page(self, client, alice_headers):
        assert client.get("/user/password", headers=alice_headers).json()["view"] == "user/password"

    def test_blank_fields(self, client, alice_headers, login):
        response = client.post("/user/password", data={"current-password": PASSWORD}, headers=alice_headers)

        assert response.status_code == 422
        assert response.json()["toastr"]["type"] == "error"
        assert "Authorization" in login("alice@example.com", PASSWORD)

    def test_change(self, client, alice_headers, login):
        response = client.post(
            "/user/password",
            data={"current-password": PASSWORD, "new-password": "next-one", "repeated-password": "next-one"},
            headers=alice_headers,
        )
        assert response.status_code == 200
        assert response.json()["toastr"] == {"type": "success", "message": "Password is updated successfully"}
        assert "Authorization" in login("alice@example.com", "next-one")


class TestAdmin:

    def test_user_create_requires_admin(self, client, alice_headers):
        assert client.get("/user/create", headers=alice_headers).status_code == 403
        response = client.post(
            "/user/create",
            data={"email": "x@example.com", "password": "p", "password_repeated": "p"},
            headers=alice_headers,
        )
        assert response.status_code == 403

    def test_admin_creates_user(self, client, admin_headers):
        assert client.get("/user/create", headers=admin_headers).json()["view"] == "user/user_create"

        response = client.post(
            "/user/create",
            data={"email": "carol@example.com", "password": "p", "password_repeated": "p", "role": "USER"},
            headers=admin_headers,
        )
        assert response.status_code == 303
        assert response.headers["location"] == "/users"

        emails = [u["email"] for u in client.get("/users", headers=admin_headers).json()["model"]["users"]]
        assert "carol@example.com" in emails

    def test_duplicate_redisplays_form(self, client, alice, admin_headers):
        response = client.post(
            "/user/create",
            data={"email": "alice@example.com", "password": "p", "password_repeated": "p"},
            headers=admin_headers,
        )
        assert response.status_code == 422
        assert response.json()["model"]["errors"] == [
            {"field": "email", "code": "email.exists", "message": "Email already exists"}
        ]


# ============================================================================
# Listing management
# ============================================================================

class TestListings:

    def _create(self, client, headers, **fields):
        data = {"title": "Loft", "address": "1 Main St", "city": "Paris", "price": "1200", "bedrooms": "2"}
        data.update(fields)
        response = client.post("/mgmt/listing", data=data, headers=headers)
        assert response.status_code == 303
        return response.headers["location"]

    def test_new_listing_page(self, client, alice_headers):
        assert client.get("/mgmt/listing/new", headers=alice_headers).json()["view"] == "listing/new"

    def test_create_and_view(self, client, alice, alice_headers):
        location = self._create(client, alice_headers)
        assert location.startswith("/mgmt/listing/")

        listing = client.get(location, headers=alice_headers).json()["model"]["listing"]
        assert listing["owner_id"] == alice.id
        assert listing["title"] == "Loft"
        assert listing["bedrooms"] == 2

    def test_invalid_form_still_redirects_to_listing(self, client, alice_headers):
        location = self._create(client, alice_headers, title="", price="free")
        listing = client.get(location, headers=alice_headers).json()["model"]["listing"]
        assert listing["title"] is None
        assert listing["price"] is None

    def test_oversized_numbers_still_redirect(self, client, alice_headers):
        location = self._create(client, alice_headers, bedrooms="99999999999999999999", price="1e20")
        listing = client.get(location, headers=alice_headers).json()["model"]["listing"]
        assert listing["bedrooms"] is None
        assert listing["price"] is None
        assert listing["title"] == "Loft"

    def test_stranger_forbidden(self, client, alice_headers, create_user, login):
        location = self._create(client, alice_headers)
        create_user("bob@example.com", PASSWORD)
        bob_headers = login("bob@example.com", PASSWORD)

        assert client.get(location, headers=bob_headers).status_code == 403
        assert client.get(f"{location}/photo", headers=bob_headers).status_code == 403

    def test_admin_may_view(self, client, alice_headers, admin_headers):
        location = self._create(client, alice_headers)
        assert client.get(location, headers=admin_headers).status_code == 200

    def test_unknown_listing_redirects_home(self, client, alice_headers):
        response = client.get("/mgmt/listing/unknown-id", headers=alice_headers)
        assert response.status_code == 303
        assert response.headers["location"] == "/"

    def test_photo_upload(self, client, alice_headers, png_bytes):
        location = self._create(client, alice_headers)
        listing_id = location.rsplit("/", 1)[1]

        assert client.get(f"{location}/photo", headers=alice_headers).json()["view"] == "listing/photo"

        response = client.post(
            f"{location}/photo",
            files={"file": ("room.png", png_bytes, "image/png")},
            headers=alice_headers,
        )
        assert response.status_code == 200
        assert response.json()["success"] is True
        assert response.json()["data"]["path"].startswith(f"listings/{listing_id}/")

        photos = client.get(location, headers=alice_headers).json()["model"]["listing"]["photos"]
        assert len(photos) == 1

    def test_photo_upload_rejected_file(self, client, alice_headers):
        location = self._create(client, alice_headers)
        response = client.post(
            f"{location}/photo",
            files={"file": ("notes.txt", b"hello", "text/plain")},
            headers=alice_headers,
        )
        assert response.status_code == 200
        assert response.json()["success"] is False

    def test_my_listings(self, client, alice_headers, admin_headers):
        self._create(client, alice_headers, title="Mine")
        self._create(client, admin_headers, title="Theirs")

        listings = client.get("/mgmt/listings", headers=alice_headers).json()["model"]["listings"]
        assert [l["title"] for l in listings] == ["Mine"]
