"""Access tokens for profilehub accounts.

A token carries the account id (``sub``), email and role, is issued by
``profilehub`` and expires after a configurable number of hours.
"""

from datetime import datetime, timedelta, timezone
from uuid import UUID

import jwt

from profilehub_auth.exceptions import InvalidTokenError
from profilehub_auth.schemas import TokenPayload

ISSUER = "profilehub"
REQUIRED_CLAIMS = ("sub", "email", "exp", "iss")


class JWTService:
    """Issues and verifies HS256-signed access tokens.

    Examples
    --------
    >>> service = JWTService(secret_key="your-secret-key")
    >>> token = service.create_access_token(account_id, "ann@x.com", "admin")
    >>> service.verify_token(token).is_admin()
    True
    """

    DEFAULT_ACCESS_EXPIRE_HOURS = 24
    ALGORITHM = "HS256"

    def __init__(
        self,
        secret_key: str,
        access_token_expire_hours: int = DEFAULT_ACCESS_EXPIRE_HOURS,
    ):
        if not secret_key:
            msg = "JWT secret key cannot be empty"
            raise ValueError(msg)

        self._secret_key = secret_key
        self._lifetime = timedelta(hours=access_token_expire_hours)

    @property
    def access_token_lifetime(self) -> timedelta:
        return self._lifetime

    def create_access_token(
        self,
        account_id: UUID,
        email: str,
        role: str = "user",
        expires_delta: timedelta | None = None,
    ) -> str:
        """Sign a token for ``account_id``.

        ``expires_delta`` overrides the configured lifetime; a negative
        value yields an already expired token.
        """
        issued_at = datetime.now(tz=timezone.utc)
        claims = {
            "iss": ISSUER,
            "sub": str(account_id),
            "email": email,
            "role": role,
            "iat": issued_at,
            "exp": issued_at + (expires_delta or self._lifetime),
        }
        return jwt.encode(claims, self._secret_key, algorithm=self.ALGORITHM)

    def verify_token(self, token: str) -> TokenPayload:
        """Check signature, issuer and expiry, then return the claims.

        Raises
        ------
        InvalidTokenError
            If the token is expired, forged, or lacks a usable claim
        """
        try:
            claims = jwt.decode(
                token,
                self._secret_key,
                algorithms=[self.ALGORITHM],
                issuer=ISSUER,
                options={"require": list(REQUIRED_CLAIMS)},
            )
        except jwt.ExpiredSignatureError as e:
            raise InvalidTokenError("Token has expired") from e
        except jwt.MissingRequiredClaimError as e:
            raise InvalidTokenError(f"Malformed token: {e}") from e
        except jwt.InvalidTokenError as e:
            raise InvalidTokenError(f"Invalid token: {e}") from e

        return self._to_payload(claims)

    @staticmethod
    def _to_payload(claims: dict) -> TokenPayload:
        try:
            account_id = UUID(claims["sub"])
        except (TypeError, ValueError) as e:
            raise InvalidTokenError(f"Malformed token subject: {e}") from e

        return TokenPayload(
            account_id=account_id,
            email=claims["email"],
            role=claims.get("role", "user"),
            exp=datetime.fromtimestamp(claims["exp"], tz=timezone.utc),
        )
