"""Tests for the Account aggregate and Email value object."""

import pytest

from profilehub.domain.account import (
    AccountRole,
    AccountStatus,
    Email,
    InvalidEmailError,
    email_key,
)
from profilehub.domain.shared.exceptions import ValidationError
from tests.shared.fixtures.factories import make_account


class TestEmail:
    def test_normalizes_case_and_whitespace(self):
        assert Email("  Ada@Example.COM ").value == "ada@example.com"

    @pytest.mark.parametrize("value", ["", "no-at-sign", "a@b", "a b@c.de"])
    def test_rejects_invalid(self, value):
        with pytest.raises(InvalidEmailError):
            Email(value)

    def test_error_names_the_rejected_value(self):
        with pytest.raises(InvalidEmailError) as exc_info:
            Email("not-an-email")

        assert exc_info.value.details == {"field": "email", "value": "not-an-email"}

    def test_lookup_key(self):
        assert email_key(" Ada@Example.com") == "ada@example.com"
        assert email_key(Email("ada@example.com")) == "ada@example.com"


class TestAccount:
    def test_create_defaults(self):
        account = make_account()

        assert account.role == AccountRole.USER
        assert account.status == AccountStatus.ACTIVE
        assert account.is_active
        assert not account.is_admin
        assert account.last_login_at is None

    def test_rejects_blank_name(self):
        with pytest.raises(ValidationError):
            make_account(name="  ")

    def test_blank_phone_is_none(self):
        assert make_account(phone_number=" ").phone_number is None

    def test_set_status_accepts_strings(self):
        account = make_account()

        account.set_status("inactive")

        assert account.status == AccountStatus.INACTIVE
        assert not account.is_active

    def test_mutations_refresh_updated_at(self):
        account = make_account()
        before = account.updated_at

        account.record_login()

        assert account.last_login_at is not None
        assert account.updated_at >= before

    def test_copy_is_independent(self):
        account = make_account()
        clone = account.copy()

        clone.set_role(AccountRole.ADMIN)

        assert clone == account
        assert account.role == AccountRole.USER
