"""SQLAlchemy implementation of ProfileRepository."""

import logging
from typing import Optional
from uuid import UUID

from sqlalchemy import delete, func, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from profilehub.domain.profile import (
    EmergencyContact,
    Gender,
    Location,
    MediaReference,
    NotificationPreferences,
    Profile,
    ProfileNotFoundError,
    ProfilePrivacy,
    ProfileRepository,
    SocialLinks,
)
from profilehub.domain.shared.serialization import build_dataclass, to_primitive
from profilehub.domain.shared.time import ensure_tz_aware
from profilehub.infrastructure.persistence.sqlalchemy.models import ProfileModel

logger = logging.getLogger(__name__)


class ProfileRepositorySQLAlchemy(ProfileRepository):
    """SQLAlchemy implementation of ProfileRepository."""

    def __init__(self, session_maker: async_sessionmaker[AsyncSession]) -> None:
        self._session_maker = session_maker

    async def find_by_account_id(self, account_id: UUID) -> Optional[Profile]:
        async with self._session_maker() as session:
            model = await session.get(ProfileModel, account_id)
            return self._map_to_domain(model) if model else None

    async def save(self, profile: Profile) -> Profile:
        async with self._session_maker() as session:
            model = await session.get(ProfileModel, profile.account_id)
            if model is None:
                model = ProfileModel(account_id=profile.account_id)
                session.add(model)
            self._update_model(model, profile)
            await session.commit()
        return profile

    async def insert_if_absent(self, profile: Profile) -> Profile:
        async with self._session_maker() as session:
            model = ProfileModel(
                account_id=profile.account_id, view_count=profile.view_count
            )
            self._update_model(model, profile)
            session.add(model)
            try:
                await session.commit()
            except IntegrityError:
                await session.rollback()
                logger.debug("Profile of %s inserted concurrently", profile.account_id)
            else:
                return profile

        stored = await self.find_by_account_id(profile.account_id)
        return stored if stored is not None else profile

    async def delete(self, account_id: UUID) -> bool:
        stmt = delete(ProfileModel).where(ProfileModel.account_id == account_id)
        async with self._session_maker() as session:
            result = await session.execute(stmt)
            await session.commit()
        return result.rowcount > 0

    async def increment_views(self, account_id: UUID) -> int:
        stmt = (
            update(ProfileModel)
            .where(ProfileModel.account_id == account_id)
            .values(view_count=ProfileModel.view_count + 1)
        )
        async with self._session_maker() as session:
            result = await session.execute(stmt)
            if result.rowcount == 0:
                raise ProfileNotFoundError(account_id)
            await session.commit()
            count = await session.execute(
                select(ProfileModel.view_count).where(
                    ProfileModel.account_id == account_id,
                ),
            )
            return count.scalar_one()

    async def count(self) -> int:
        async with self._session_maker() as session:
            result = await session.execute(select(func.count(ProfileModel.account_id)))
            return result.scalar_one()

    def _map_to_domain(self, model: ProfileModel) -> Profile:
        return Profile(
            account_id=model.account_id,
            bio=model.bio or "",
            date_of_birth=model.date_of_birth,
            gender=Gender(model.gender),
            location=build_dataclass(Location, model.location),
            social_links=build_dataclass(SocialLinks, model.social_links),
            emergency_contact=build_dataclass(
                EmergencyContact, model.emergency_contact
            ),
            profile_picture=(
                build_dataclass(MediaReference, model.profile_picture)
                if model.profile_picture
                else None
            ),
            cover_photo=(
                build_dataclass(MediaReference, model.cover_photo)
                if model.cover_photo
                else None
            ),
            privacy=build_dataclass(ProfilePrivacy, model.privacy),
            notification_prefs=build_dataclass(
                NotificationPreferences, model.notification_prefs
            ),
            custom_fields=dict(model.custom_fields or {}),
            view_count=model.view_count,
            completeness_percent=model.completeness_percent,
            last_profile_update=(
                ensure_tz_aware(model.last_profile_update)
                if model.last_profile_update
                else None
            ),
            created_at=ensure_tz_aware(model.created_at),
            updated_at=ensure_tz_aware(model.updated_at),
        )

    def _update_model(self, model: ProfileModel, profile: Profile) -> None:
        # view_count is only changed through increment_views
        model.bio = profile.bio
        model.date_of_birth = profile.date_of_birth
        model.gender = profile.gender.value
        model.location = to_primitive(profile.location)
        model.social_links = to_primitive(profile.social_links)
        model.emergency_contact = to_primitive(profile.emergency_contact)
        model.profile_picture = to_primitive(profile.profile_picture)
        model.cover_photo = to_primitive(profile.cover_photo)
        model.privacy = to_primitive(profile.privacy)
        model.notification_prefs = to_primitive(profile.notification_prefs)
        model.custom_fields = to_primitive(profile.custom_fields)
        model.completeness_percent = profile.completeness_percent
        model.last_profile_update = profile.last_profile_update
        model.created_at = profile.created_at
        model.updated_at = profile.updated_at
        if model.view_count is None:
            model.view_count = profile.view_count
