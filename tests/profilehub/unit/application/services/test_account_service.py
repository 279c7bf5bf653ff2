"""Unit tests for AccountService."""

import pytest

from profilehub.domain.account import (
    AccountRole,
    AccountStatus,
    CannotDemoteSelfError,
    EmailAlreadyExistsError,
)
from profilehub_auth import (
    AccountInactiveError,
    InvalidCredentialsError,
    InvalidTokenError,
    PermissionDeniedError,
    WeakPasswordError,
)
from tests.shared.fixtures.factories import TEST_PASSWORD


class TestRegistration:
    @pytest.mark.asyncio
    async def test_provisions_profile_and_settings(self, services):
        account = await services.register()

        assert await services.profiles.get(account.id) is not None
        assert await services.settings.get(account.id) is not None

    @pytest.mark.asyncio
    async def test_stores_hash_not_password(self, services):
        account = await services.register()

        assert account.password_hash != TEST_PASSWORD
        assert account.password_hash.startswith("$2")

    @pytest.mark.asyncio
    async def test_duplicate_email_is_rejected(self, services):
        await services.register(email="ada@example.com")

        with pytest.raises(EmailAlreadyExistsError):
            await services.register(email="ADA@example.com")

        assert (await services.accounts.stats()).total == 1

    @pytest.mark.asyncio
    async def test_weak_password_is_rejected(self, services):
        with pytest.raises(WeakPasswordError):
            await services.accounts.create_account(
                name="Ada", email="ada@example.com", password="short"
            )

        assert await services.accounts.find_by_email("ada@example.com") is None


class TestAuthentication:
    @pytest.mark.asyncio
    async def test_returns_token_that_resolves_to_account(self, services):
        account = await services.register()

        logged_in, token = await services.accounts.authenticate(
            "ada@example.com", TEST_PASSWORD
        )

        assert logged_in.id == account.id
        assert logged_in.last_login_at is not None
        resolved = await services.accounts.resolve_token(token)
        assert resolved.id == account.id

    @pytest.mark.asyncio
    async def test_wrong_password(self, services):
        await services.register()

        with pytest.raises(InvalidCredentialsError):
            await services.accounts.authenticate("ada@example.com", "wrong-password")

    @pytest.mark.asyncio
    async def test_unknown_email(self, services):
        with pytest.raises(InvalidCredentialsError):
            await services.accounts.authenticate("nobody@example.com", TEST_PASSWORD)

    @pytest.mark.asyncio
    async def test_inactive_account_cannot_log_in(self, services):
        account = await services.register()
        await services.accounts.update_status(account.id, AccountStatus.INACTIVE)

        with pytest.raises(AccountInactiveError):
            await services.accounts.authenticate("ada@example.com", TEST_PASSWORD)

    @pytest.mark.asyncio
    async def test_token_of_deleted_account_is_invalid(self, services):
        account = await services.register()
        _, token = await services.accounts.authenticate(
            "ada@example.com", TEST_PASSWORD
        )
        await services.accounts.delete(account.id)

        with pytest.raises(InvalidTokenError):
            await services.accounts.resolve_token(token)


class TestAdministration:
    @pytest.mark.asyncio
    async def test_admin_changes_role(self, services):
        admin = await services.register("root@example.com", role=AccountRole.ADMIN)
        user = await services.register("user@example.com")

        updated = await services.accounts.change_role(admin, user.id, "admin")

        assert updated.role == AccountRole.ADMIN

    @pytest.mark.asyncio
    async def test_admin_cannot_demote_self(self, services):
        admin = await services.register("root@example.com", role=AccountRole.ADMIN)

        with pytest.raises(CannotDemoteSelfError):
            await services.accounts.change_role(admin, admin.id, AccountRole.USER)

    @pytest.mark.asyncio
    async def test_non_admin_is_denied(self, services):
        user = await services.register("user@example.com")
        other = await services.register("other@example.com")

        with pytest.raises(PermissionDeniedError):
            await services.accounts.set_status(user, other.id, AccountStatus.INACTIVE)

    @pytest.mark.asyncio
    async def test_change_password(self, services):
        account = await services.register()

        await services.accounts.change_password(
            account.id, TEST_PASSWORD, "an-even-better-password"
        )

        await services.accounts.authenticate(
            "ada@example.com", "an-even-better-password"
        )
        with pytest.raises(InvalidCredentialsError):
            await services.accounts.change_password(
                account.id, TEST_PASSWORD, "yet-another-password"
            )


class TestInitialAdmin:
    @pytest.mark.asyncio
    async def test_creates_admin_once(self, services):
        first = await services.accounts.ensure_initial_admin(
            "admin@example.com", "Administrator", TEST_PASSWORD
        )
        second = await services.accounts.ensure_initial_admin(
            "admin@example.com", "Administrator", TEST_PASSWORD
        )

        assert first is not None
        assert first.role == AccountRole.ADMIN
        assert second is None
        assert (await services.accounts.stats()).admins == 1
