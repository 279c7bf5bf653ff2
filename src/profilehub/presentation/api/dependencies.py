"""FastAPI dependencies: services, authentication and authorization.

Services are built once in the application lifespan and kept on
``app.state``; routers receive them through the ``Services`` alias.
"""

import logging
from typing import Annotated

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from profilehub.domain.account import Account
from profilehub.presentation.container import ServiceContainer
from profilehub_auth import InvalidTokenError

logger = logging.getLogger(__name__)

# Security scheme for JWT Bearer tokens
security = HTTPBearer(auto_error=False)


def get_services(request: Request) -> ServiceContainer:
    """Return the service container created at startup."""
    return request.app.state.services


# Type alias for injected services
Services = Annotated[ServiceContainer, Depends(get_services)]


async def get_current_account(
    services: Services,
    credentials: HTTPAuthorizationCredentials | None = Depends(security),
) -> Account:
    """
    FastAPI dependency to get the current authenticated account from JWT.

    Raises
    ------
    HTTPException
        401 if the token is missing, invalid, or its account is gone
    """
    if credentials is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required",
            headers={"WWW-Authenticate": "Bearer"},
        )

    try:
        return await services.accounts.resolve_token(credentials.credentials)
    except InvalidTokenError as e:
        logger.warning("Invalid token: %s", e)
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or expired token",
            headers={"WWW-Authenticate": "Bearer"},
        ) from e


# Type alias for injected current account
CurrentAccount = Annotated[Account, Depends(get_current_account)]


async def require_admin(account: CurrentAccount) -> Account:
    """Require an admin account."""
    if not account.is_admin:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Admin access required",
        )
    return account


# Type alias for admin account
AdminAccount = Annotated[Account, Depends(require_admin)]
