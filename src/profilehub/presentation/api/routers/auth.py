"""Authentication router: registration, login and the current account."""

import logging

from fastapi import APIRouter, status

from profilehub.presentation.api.dependencies import CurrentAccount, Services
from profilehub.presentation.api.schemas.auth import (
    AccountResponse,
    AuthResponse,
    ChangePasswordRequest,
    LoginRequest,
    RegisterRequest,
    UpdateAccountRequest,
)

logger = logging.getLogger(__name__)

router = APIRouter()


def _create_auth_response(
    services: Services,
    account_response: AccountResponse,
    access_token: str,
) -> AuthResponse:
    lifetime = services.jwt_service.access_token_lifetime
    return AuthResponse(
        account=account_response,
        access_token=access_token,
        expires_in=int(lifetime.total_seconds()),
    )


@router.post(
    "/register",
    status_code=status.HTTP_201_CREATED,
    summary="Register a new account",
    responses={
        201: {"description": "Account registered"},
        400: {"description": "Invalid input, weak password or email taken"},
    },
)
async def register(request: RegisterRequest, services: Services) -> AuthResponse:
    """Create an account with a default profile and settings, then log in."""
    await services.accounts.create_account(
        name=request.name,
        email=request.email,
        password=request.password,
        phone_number=request.phone_number,
    )
    account, token = await services.accounts.authenticate(
        request.email, request.password
    )
    return _create_auth_response(
        services, AccountResponse.from_account(account), token
    )


@router.post(
    "/login",
    summary="Authenticate with email and password",
    responses={
        200: {"description": "Login successful"},
        401: {"description": "Invalid credentials"},
        403: {"description": "Account inactive"},
    },
)
async def login(request: LoginRequest, services: Services) -> AuthResponse:
    account, token = await services.accounts.authenticate(
        request.email, request.password
    )
    return _create_auth_response(
        services, AccountResponse.from_account(account), token
    )


@router.get("/me", summary="Get the current account")
async def get_me(account: CurrentAccount) -> AccountResponse:
    return AccountResponse.from_account(account)


@router.patch("/me", summary="Update name or phone number")
async def update_me(
    request: UpdateAccountRequest,
    account: CurrentAccount,
    services: Services,
) -> AccountResponse:
    updated = await services.accounts.update_details(
        account.id,
        name=request.name,
        phone_number=request.phone_number,
    )
    return AccountResponse.from_account(updated)


@router.post(
    "/me/password",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Change the password of the current account",
)
async def change_password(
    request: ChangePasswordRequest,
    account: CurrentAccount,
    services: Services,
) -> None:
    await services.accounts.change_password(
        account.id, request.current_password, request.new_password
    )
