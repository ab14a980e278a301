# 📄 File: findeasily/modules/listing_management/application/forms.py
# 🧭 Purpose (Layman Explanation):
# The form an owner fills in to describe a property: title, description, where it is, the price
# and how many bedrooms and bathrooms it has.
# 🧪 Purpose (Technical Summary):
# Request-scoped listing form bound from form-encoded parameters. Values stay raw strings until
# to_listing converts them, dropping numbers that do not parse or do not fit the columns.
# 🔗 Dependencies:
# pydantic, shared.utils.validators, listing domain model
# 🔄 Connected Modules / Calls From:
# application.validators, application.handlers.listing_handler, presentation.api.v1.listings

from decimal import Decimal
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict

from findeasily.shared.utils.validators import is_blank, validate_decimal, validate_integer

from ..domain.models.listing import Listing


# Largest values the listings table columns hold: Numeric(12, 2) and a 32 bit Integer.
MAX_PRICE = Decimal("9999999999.99")
MAX_ROOMS = 2**31 - 1


def _text(value: Optional[str]) -> Optional[str]:
    return None if is_blank(value) else value.strip()


class ListingBasicInfoForm(BaseModel):
    model_config = ConfigDict(extra="ignore")

    title: Optional[str] = None
    description: Optional[str] = None
    address: Optional[str] = None
    city: Optional[str] = None
    price: Optional[str] = None
    bedrooms: Optional[str] = None
    bathrooms: Optional[str] = None

    def to_view(self) -> Dict[str, Any]:
        return self.model_dump()

    def to_listing(self, owner_id: str) -> Listing:
        """Build a new listing owned by ``owner_id``; unparseable or out of range numbers are left empty."""
        price = validate_decimal(self.price, min_value=0, max_value=MAX_PRICE)
        bedrooms = validate_integer(self.bedrooms, min_value=0, max_value=MAX_ROOMS)
        bathrooms = validate_integer(self.bathrooms, min_value=0, max_value=MAX_ROOMS)

        return Listing(
            owner_id=owner_id,
            title=_text(self.title),
            description=_text(self.description),
            address=_text(self.address),
            city=_text(self.city),
            price=price.normalized if price else None,
            bedrooms=bedrooms.normalized if bedrooms else None,
            bathrooms=bathrooms.normalized if bathrooms else None,
        )
