# 📄 File: findeasily/modules/user_management/domain/services/current_user_service.py
# 🧭 Purpose (Layman Explanation):
# Answers "is this person allowed to do that?" - for example whether someone may look at a
# particular user's page or edit a particular listing.
# 🧪 Purpose (Technical Summary):
# Authorization predicates over (caller, target id). Handlers call them before touching any
# data and turn a False into an AuthorizationError.
# 🔗 Dependencies:
# shared.core.dependencies.CurrentUser, a listing lookup exposing get_by_id
# 🔄 Connected Modules / Calls From:
# Account request handler, listing request handler

import logging
from typing import Any, Optional, Protocol

from findeasily.shared.core.dependencies import CurrentUser

logger = logging.getLogger(__name__)


class ListingLookup(Protocol):
    async def get_by_id(self, listing_id: str) -> Optional[Any]: ...


class CurrentUserService:
    """Boolean authorization checks for the authenticated caller."""

    def __init__(self, listing_lookup: Optional[ListingLookup] = None):
        self.listing_lookup = listing_lookup

    def can_access_user(self, caller: Optional[CurrentUser], user_id: str) -> bool:
        """Admins may access every user page, everybody else only their own."""
        if caller is None:
            return False
        allowed = caller.is_admin() or caller.user_id == str(user_id)
        logger.debug(f"can_access_user caller={caller.user_id} target={user_id} -> {allowed}")
        return allowed

    async def can_edit_listing(self, caller: Optional[CurrentUser], listing_id: str) -> bool:
        """
        Admins may edit every listing, owners their own.

        An id that does not resolve to a listing is allowed through so the
        handler can send the caller back to the home page.
        """
        if caller is None:
            return False
        if caller.is_admin():
            return True
        if self.listing_lookup is None:
            return False

        listing = await self.listing_lookup.get_by_id(listing_id)
        allowed = listing is None or listing.is_owned_by(caller.user_id)
        logger.debug(f"can_edit_listing caller={caller.user_id} listing={listing_id} -> {allowed}")
        return allowed
