"""In-memory implementation of ProfileRepository."""

import copy
import logging
from uuid import UUID

from profilehub.domain.profile import Profile, ProfileNotFoundError, ProfileRepository

logger = logging.getLogger(__name__)


class ProfileRepositoryMemory(ProfileRepository):
    def __init__(self) -> None:
        self._profiles: dict[UUID, Profile] = {}

    async def find_by_account_id(self, account_id: UUID) -> Profile | None:
        profile = self._profiles.get(account_id)
        return copy.deepcopy(profile) if profile else None

    async def save(self, profile: Profile) -> Profile:
        snapshot = copy.deepcopy(profile)
        stored = self._profiles.get(profile.account_id)
        if stored is not None:
            # view_count is only changed through increment_views
            snapshot.view_count = stored.view_count
        self._profiles[profile.account_id] = snapshot
        return profile

    async def insert_if_absent(self, profile: Profile) -> Profile:
        stored = self._profiles.setdefault(profile.account_id, copy.deepcopy(profile))
        return copy.deepcopy(stored)

    async def delete(self, account_id: UUID) -> bool:
        return self._profiles.pop(account_id, None) is not None

    async def increment_views(self, account_id: UUID) -> int:
        # No await between read and write, so this is atomic on the loop
        profile = self._profiles.get(account_id)
        if profile is None:
            raise ProfileNotFoundError(account_id)
        return profile.increment_views()

    async def count(self) -> int:
        return len(self._profiles)
