"""Tests for the authorization predicates."""

import pytest

from findeasily.modules.listing_management.domain.models.listing import Listing
from findeasily.modules.listing_management.domain.services.listing_service import ListingService
from findeasily.modules.user_management.domain.services.current_user_service import CurrentUserService


class TestCanAccessUser:

    def test_self_allowed(self, make_caller):
        assert CurrentUserService().can_access_user(make_caller("u1"), "u1") is True

    def test_other_user_denied(self, make_caller):
        assert CurrentUserService().can_access_user(make_caller("u1"), "u2") is False

    def test_admin_allowed_everywhere(self, make_caller):
        assert CurrentUserService().can_access_user(make_caller("admin", admin=True), "u2") is True

    def test_anonymous_denied(self):
        assert CurrentUserService().can_access_user(None, "u1") is False


class TestCanEditListing:

    @pytest.fixture
    async def listing(self, listing_repository):
        return await listing_repository.save(Listing(owner_id="owner", title="Flat"))

    @pytest.fixture
    def service(self, listing_repository):
        return CurrentUserService(listing_lookup=ListingService(listing_repository))

    async def test_owner_allowed(self, service, listing, make_caller):
        assert await service.can_edit_listing(make_caller("owner"), listing.id) is True

    async def test_stranger_denied(self, service, listing, make_caller):
        assert await service.can_edit_listing(make_caller("stranger"), listing.id) is False

    async def test_admin_allowed(self, service, listing, make_caller):
        assert await service.can_edit_listing(make_caller("root", admin=True), listing.id) is True

    async def test_unknown_listing_passes_through(self, service, make_caller):
        assert await service.can_edit_listing(make_caller("stranger"), "missing") is True

    async def test_without_lookup_only_admins(self, make_caller):
        service = CurrentUserService()
        assert await service.can_edit_listing(make_caller("owner"), "any") is False
        assert await service.can_edit_listing(make_caller("root", admin=True), "any") is True
