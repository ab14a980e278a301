# 📄 File: findeasily/modules/listing_management/application/validators.py
# 🧭 Purpose (Layman Explanation):
# Checks a listing form: a title, street address and city must be there, and price and room
# counts must be sensible numbers when given.
# 🧪 Purpose (Technical Summary):
# Stateless listing form validator returning every FieldError in field order.
# 🔗 Dependencies:
# shared.utils.validators, application.forms
# 🔄 Connected Modules / Calls From:
# Listing request handler, tests

from typing import List

from findeasily.shared.utils.validators import (
    FieldError,
    FormValidator,
    is_blank,
    validate_decimal,
    validate_integer,
)

from .forms import MAX_PRICE, MAX_ROOMS, ListingBasicInfoForm

REQUIRED_FIELDS = (
    ("title", "Title is required"),
    ("address", "Address is required"),
    ("city", "City is required"),
)


class ListingCreateFormValidator(FormValidator):

    def validate(self, form: ListingBasicInfoForm) -> List[FieldError]:
        errors: List[FieldError] = []

        for field, message in REQUIRED_FIELDS:
            if is_blank(getattr(form, field)):
                errors.append(FieldError(field, f"{field}.required", message))

        if not validate_decimal(form.price, min_value=0, max_value=MAX_PRICE):
            errors.append(FieldError("price", "price.invalid", f"Price must be a number between 0 and {MAX_PRICE}"))

        for field in ("bedrooms", "bathrooms"):
            if not validate_integer(getattr(form, field), min_value=0, max_value=MAX_ROOMS):
                errors.append(FieldError(field, f"{field}.invalid", f"{field.capitalize()} must be a whole number between 0 and {MAX_ROOMS}"))

        return errors
