"""Tests for the form validators."""

import pytest

from findeasily.modules.listing_management.application.forms import ListingBasicInfoForm
from findeasily.modules.listing_management.application.validators import ListingCreateFormValidator
from findeasily.modules.user_management.application.forms import (
    ForgetPasswordForm,
    ResetPasswordForm,
    UserCreateForm,
)
from findeasily.modules.user_management.application.validators import (
    ForgetPasswordFormValidator,
    ResetPasswordFormValidator,
    UserCreateFormValidator,
)


def codes(errors):
    return [error.code for error in errors]


# ============================================================================
# User create form
# ============================================================================

class TestUserCreateFormValidator:

    @pytest.fixture
    def validator(self):
        return UserCreateFormValidator()

    def test_valid_form(self, validator):
        form = UserCreateForm(email="new@example.com", password="secret1", password_repeated="secret1")
        assert validator.validate(form) == []

    def test_empty_form_reports_every_error(self, validator):
        errors = validator.validate(UserCreateForm())
        assert codes(errors) == ["email.required", "password.required", "password_repeated.required"]

    def test_blank_strings_count_as_missing(self, validator):
        form = UserCreateForm(email="   ", password=" ", password_repeated="\t")
        assert codes(validator.validate(form)) == [
            "email.required", "password.required", "password_repeated.required"
        ]

    def test_malformed_email(self, validator):
        form = UserCreateForm(email="not-an-email", password="a", password_repeated="a")
        errors = validator.validate(form)
        assert codes(errors) == ["email.invalid"]
        assert errors[0].field == "email"

    def test_password_mismatch_is_form_level(self, validator):
        form = UserCreateForm(email="a@example.com", password="one", password_repeated="two")
        errors = validator.validate(form)
        assert codes(errors) == ["password.no_match"]
        assert errors[0].field is None
        assert errors[0].message == "Passwords do not match"

    def test_known_role_accepted_case_insensitively(self, validator):
        form = UserCreateForm(email="a@example.com", password="x", password_repeated="x", role="admin")
        assert validator.validate(form) == []

    def test_unknown_role_rejected(self, validator):
        form = UserCreateForm(email="a@example.com", password="x", password_repeated="x", role="OWNER")
        assert codes(validator.validate(form)) == ["role.invalid"]

    def test_validator_is_stateless(self, validator):
        bad = UserCreateForm()
        good = UserCreateForm(email="a@example.com", password="x", password_repeated="x")
        validator.validate(bad)
        assert validator.validate(good) == []


class TestForgetPasswordFormValidator:

    def test_requires_email(self):
        assert codes(ForgetPasswordFormValidator().validate(ForgetPasswordForm())) == ["email.required"]

    def test_accepts_well_formed_email(self):
        form = ForgetPasswordForm(email="known@example.com")
        assert ForgetPasswordFormValidator().validate(form) == []


class TestResetPasswordFormValidator:

    def test_requires_both_passwords(self):
        errors = ResetPasswordFormValidator().validate(ResetPasswordForm(password="abc"))
        assert codes(errors) == ["password_repeated.required"]

    def test_mismatch(self):
        form = ResetPasswordForm(password="abc", password_repeated="abd")
        assert codes(ResetPasswordFormValidator().validate(form)) == ["password.no_match"]

    def test_user_id_is_not_validated(self):
        form = ResetPasswordForm(user_id=None, password="abc", password_repeated="abc")
        assert ResetPasswordFormValidator().validate(form) == []


# ============================================================================
# Listing form
# ============================================================================

class TestListingCreateFormValidator:

    @pytest.fixture
    def validator(self):
        return ListingCreateFormValidator()

    def test_valid_form(self, validator):
        form = ListingBasicInfoForm(
            title="Sunny flat", address="1 Main St", city="Springfield",
            price="1200.50", bedrooms="2", bathrooms="1",
        )
        assert validator.validate(form) == []

    def test_required_fields(self, validator):
        assert codes(validator.validate(ListingBasicInfoForm())) == [
            "title.required", "address.required", "city.required"
        ]

    def test_optional_numbers_may_be_blank(self, validator):
        form = ListingBasicInfoForm(title="t", address="a", city="c", price="", bedrooms=" ")
        assert validator.validate(form) == []

    @pytest.mark.parametrize("price", ["-1", "abc", "NaN"])
    def test_bad_price(self, validator, price):
        form = ListingBasicInfoForm(title="t", address="a", city="c", price=price)
        assert codes(validator.validate(form)) == ["price.invalid"]

    def test_bad_room_counts(self, validator):
        form = ListingBasicInfoForm(title="t", address="a", city="c", bedrooms="1.5", bathrooms="-2")
        assert codes(validator.validate(form)) == ["bedrooms.invalid", "bathrooms.invalid"]

    def test_numbers_too_large_for_storage(self, validator):
        form = ListingBasicInfoForm(
            title="t", address="a", city="c",
            price="10000000000", bedrooms="99999999999999999999", bathrooms=str(2**31),
        )
        assert codes(validator.validate(form)) == ["price.invalid", "bedrooms.invalid", "bathrooms.invalid"]

    def test_largest_storable_numbers_accepted(self, validator):
        form = ListingBasicInfoForm(
            title="t", address="a", city="c",
            price="9999999999.99", bedrooms=str(2**31 - 1), bathrooms="0",
        )
        assert validator.validate(form) == []


class TestListingBasicInfoForm:

    def test_to_listing_drops_unparseable_numbers(self):
        form = ListingBasicInfoForm(title="  Loft ", city="Paris", price="abc", bedrooms="3", bathrooms="-1")
        listing = form.to_listing("owner-1")

        assert listing.owner_id == "owner-1"
        assert listing.title == "Loft"
        assert listing.address is None
        assert listing.price is None
        assert listing.bedrooms == 3
        assert listing.bathrooms is None

    def test_to_listing_drops_out_of_range_numbers(self):
        form = ListingBasicInfoForm(title="Loft", price="12345678901.5", bedrooms="99999999999999999999", bathrooms="2")
        listing = form.to_listing("owner-1")

        assert listing.price is None
        assert listing.bedrooms is None
        assert listing.bathrooms == 2
