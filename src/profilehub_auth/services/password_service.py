"""bcrypt password hashing for account credentials.

Passwords are encoded as UTF-8 before hashing. bcrypt only reads the first
72 bytes of its input, so longer passwords are refused instead of being
silently truncated.
"""

import bcrypt

from profilehub_auth.exceptions import WeakPasswordError

BCRYPT_MAX_BYTES = 72


def _encode(value: str) -> bytes:
    return value.encode("utf-8")


class PasswordHashingService:
    """Hashes passwords and checks them against stored hashes.

    Examples
    --------
    >>> service = PasswordHashingService(rounds=4)
    >>> stored = service.hash("my_secure_password")
    >>> service.verify("my_secure_password", stored)
    True
    """

    MIN_LENGTH = 8
    MAX_BYTES = BCRYPT_MAX_BYTES

    def __init__(self, rounds: int = 12):
        """
        Parameters
        ----------
        rounds
            bcrypt cost factor (log2 of the key expansion rounds)
        """
        self._rounds = rounds

    @property
    def rounds(self) -> int:
        return self._rounds

    def hash(self, password: str) -> str:
        """Return the bcrypt hash of ``password``.

        Raises
        ------
        WeakPasswordError
            If the password is empty, too short, or too long for bcrypt
        """
        self.validate_strength(password)
        digest = bcrypt.hashpw(_encode(password), bcrypt.gensalt(rounds=self._rounds))
        return digest.decode("ascii")

    def verify(self, password: str, password_hash: str) -> bool:
        """Return True if ``password`` matches ``password_hash``.

        A stored value that is not a bcrypt hash never matches.
        """
        try:
            return bcrypt.checkpw(_encode(password), _encode(password_hash))
        except (ValueError, TypeError):
            return False

    def validate_strength(self, password: str) -> None:
        if not password:
            msg = "Password cannot be empty"
            raise WeakPasswordError(msg)

        if len(password) < self.MIN_LENGTH:
            msg = f"Password must be at least {self.MIN_LENGTH} characters"
            raise WeakPasswordError(msg)

        if len(_encode(password)) > self.MAX_BYTES:
            msg = f"Password cannot exceed {self.MAX_BYTES} bytes"
            raise WeakPasswordError(msg)
