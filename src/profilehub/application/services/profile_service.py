"""Profile service: read and update the profile of an account."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Mapping
from uuid import UUID

from profilehub.domain.profile import MediaReference, Profile, ProfileNotFoundError

if TYPE_CHECKING:
    from profilehub.application.factories import RepositoryFactory
    from profilehub.application.services.file_record_service import (
        FileRecordService,
    )
    from profilehub.domain.profile import ProfileRepository

logger = logging.getLogger(__name__)


class ProfileService:
    """Compute-then-persist pipeline around the Profile aggregate.

    Completeness is recomputed before every save except view counting.
    When a picture is replaced, the superseded file id is handed to the
    file service; this service never deletes files itself.
    """

    def __init__(
        self,
        profile_repository: ProfileRepository,
        file_service: FileRecordService | None = None,
    ):
        self._profile_repo = profile_repository
        self._file_service = file_service

    @classmethod
    def from_factory(
        cls,
        factory: RepositoryFactory,
        file_service: FileRecordService | None = None,
    ) -> ProfileService:
        return cls(
            profile_repository=factory.profile_repository(),
            file_service=file_service,
        )

    async def get_or_create(self, account_id: UUID) -> Profile:
        profile = await self._profile_repo.find_by_account_id(account_id)
        if profile is not None:
            return profile

        profile = Profile.default(account_id)
        profile.recalculate_completeness()
        stored = await self._profile_repo.insert_if_absent(profile)
        if stored.created_at == profile.created_at:
            logger.info("Profile created for account %s", account_id)
        return stored

    async def get(self, account_id: UUID) -> Profile:
        profile = await self._profile_repo.find_by_account_id(account_id)
        if profile is None:
            raise ProfileNotFoundError(account_id)
        return profile

    async def update(self, account_id: UUID, changes: Mapping[str, Any]) -> Profile:
        """Merge a partial update, recompute completeness and persist."""
        profile = await self.get_or_create(account_id)
        profile.apply_update(changes)
        profile.recalculate_completeness()
        await self._profile_repo.save(profile)
        logger.debug(
            "Profile updated for account %s (completeness %d%%)",
            account_id,
            profile.completeness_percent,
        )
        return profile

    async def set_profile_picture(
        self,
        account_id: UUID,
        picture: MediaReference,
    ) -> Profile:
        profile = await self.get_or_create(account_id)
        stale_file_id = profile.set_profile_picture(picture)
        return await self._save_media_change(profile, stale_file_id)

    async def set_cover_photo(
        self,
        account_id: UUID,
        photo: MediaReference,
    ) -> Profile:
        profile = await self.get_or_create(account_id)
        stale_file_id = profile.set_cover_photo(photo)
        return await self._save_media_change(profile, stale_file_id)

    async def increment_views(self, account_id: UUID) -> int:
        return await self._profile_repo.increment_views(account_id)

    async def delete(self, account_id: UUID) -> bool:
        deleted = await self._profile_repo.delete(account_id)
        if deleted:
            logger.info("Profile deleted for account %s", account_id)
        return deleted

    async def count(self) -> int:
        return await self._profile_repo.count()

    async def _save_media_change(
        self,
        profile: Profile,
        stale_file_id: UUID | None,
    ) -> Profile:
        profile.recalculate_completeness()
        await self._profile_repo.save(profile)

        if stale_file_id is not None and self._file_service is not None:
            try:
                await self._file_service.handle_stale_file(stale_file_id)
            except Exception:
                # The new reference is already saved at this point.
                logger.warning(
                    "Could not remove stale file %s for account %s",
                    stale_file_id,
                    profile.account_id,
                    exc_info=True,
                )
        return profile
