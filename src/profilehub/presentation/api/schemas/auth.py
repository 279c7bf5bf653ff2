"""Authentication schemas for request/response models."""

from __future__ import annotations

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, EmailStr, Field

from profilehub.domain.account import Account


class RegisterRequest(BaseModel):
    """Request schema for account registration."""

    name: str = Field(..., min_length=1, max_length=100)
    email: EmailStr = Field(..., description="Account email address")
    password: str = Field(
        ...,
        min_length=8,
        max_length=72,
        description="Password (8-72 characters)",
    )
    phone_number: str | None = Field(default=None, max_length=32)

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "name": "Ada Lovelace",
                "email": "ada@example.com",
                "password": "securepassword123",
            },
        },
    )


class LoginRequest(BaseModel):
    """Request schema for login."""

    email: EmailStr
    password: str


class UpdateAccountRequest(BaseModel):
    name: str | None = Field(default=None, min_length=1, max_length=100)
    phone_number: str | None = Field(default=None, max_length=32)


class ChangePasswordRequest(BaseModel):
    current_password: str
    new_password: str = Field(..., min_length=8, max_length=72)


class AccountResponse(BaseModel):
    """Account data without credentials."""

    id: UUID
    name: str
    email: str
    phone_number: str | None
    role: str
    status: str
    last_login_at: datetime | None
    created_at: datetime

    @classmethod
    def from_account(cls, account: Account) -> AccountResponse:
        return cls(
            id=account.id,
            name=account.name,
            email=account.email,
            phone_number=account.phone_number,
            role=account.role.value,
            status=account.status.value,
            last_login_at=account.last_login_at,
            created_at=account.created_at,
        )


class AuthResponse(BaseModel):
    """Response for register and login."""

    account: AccountResponse
    access_token: str
    token_type: str = "bearer"
    expires_in: int = Field(..., description="Token lifetime in seconds")
