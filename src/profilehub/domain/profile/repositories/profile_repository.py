"""Abstract repository for profiles."""

from abc import ABC, abstractmethod
from uuid import UUID

from profilehub.domain.profile.aggregates import Profile


class ProfileRepository(ABC):
    """Repository interface for Profile aggregates, keyed by account id."""

    @abstractmethod
    async def find_by_account_id(self, account_id: UUID) -> Profile | None:
        """Find the profile of an account, returns None if not exists."""

    @abstractmethod
    async def save(self, profile: Profile) -> Profile:
        """Insert or replace the profile (last writer wins)."""

    @abstractmethod
    async def insert_if_absent(self, profile: Profile) -> Profile:
        """Store ``profile`` unless the account already has one.

        Returns the stored profile: ``profile`` itself, or the one another
        caller inserted first.
        """

    @abstractmethod
    async def delete(self, account_id: UUID) -> bool:
        """Delete the profile. Returns True if deleted."""

    @abstractmethod
    async def increment_views(self, account_id: UUID) -> int:
        """Atomically add one to view_count and return the new value.

        Raises ProfileNotFoundError if the account has no profile.
        """

    @abstractmethod
    async def count(self) -> int:
        """Count stored profiles."""
