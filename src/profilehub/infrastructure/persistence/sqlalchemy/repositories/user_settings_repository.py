"""SQLAlchemy implementation of UserSettingsRepository."""

import logging
from uuid import UUID

from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from profilehub.domain.settings import (
    AppearanceSettings,
    CommunicationSettings,
    DataManagementSettings,
    GeneralSettings,
    IntegrationSettings,
    NotificationSettings,
    PrivacySettings,
    SecuritySettings,
    SettingChange,
    UserSettings,
    UserSettingsRepository,
)
from profilehub.domain.shared.serialization import build_dataclass, to_primitive
from profilehub.domain.shared.time import ensure_tz_aware
from profilehub.infrastructure.persistence.sqlalchemy.models import (
    SettingChangeModel,
    UserSettingsModel,
)

logger = logging.getLogger(__name__)

_GROUP_TYPES = {
    "general": GeneralSettings,
    "privacy": PrivacySettings,
    "notifications": NotificationSettings,
    "security": SecuritySettings,
    "appearance": AppearanceSettings,
    "data_management": DataManagementSettings,
    "communication": CommunicationSettings,
    "integrations": IntegrationSettings,
}


class UserSettingsRepositorySQLAlchemy(UserSettingsRepository):
    """SQLAlchemy implementation of UserSettingsRepository.

    History entries live in their own table; :meth:`save` inserts the
    entries not yet stored and never rewrites existing ones.
    """

    def __init__(self, session_maker: async_sessionmaker[AsyncSession]) -> None:
        self._session_maker = session_maker

    async def find(self, account_id: UUID) -> UserSettings | None:
        async with self._session_maker() as session:
            model = await session.get(UserSettingsModel, account_id)
            if model is None:
                return None

            stmt = (
                select(SettingChangeModel)
                .where(SettingChangeModel.account_id == account_id)
                .order_by(SettingChangeModel.sequence)
            )
            history = (await session.execute(stmt)).scalars().all()
            return self._map_to_domain(model, history)

    async def save(self, settings: UserSettings) -> None:
        async with self._session_maker() as session:
            model = await session.get(UserSettingsModel, settings.account_id)
            if model is None:
                model = UserSettingsModel(account_id=settings.account_id)
                session.add(model)
            self._update_model(model, settings)

            stmt = select(SettingChangeModel.id).where(
                SettingChangeModel.account_id == settings.account_id,
            )
            stored_ids = set((await session.execute(stmt)).scalars().all())
            for position, change in enumerate(settings.change_history):
                if change.id not in stored_ids:
                    session.add(
                        self._map_change_to_model(
                            settings.account_id, change, position
                        )
                    )

            await session.commit()

    async def insert_if_absent(self, settings: UserSettings) -> UserSettings:
        async with self._session_maker() as session:
            model = UserSettingsModel(account_id=settings.account_id)
            self._update_model(model, settings)
            session.add(model)
            for position, change in enumerate(settings.change_history):
                session.add(
                    self._map_change_to_model(settings.account_id, change, position)
                )
            try:
                await session.commit()
            except IntegrityError:
                await session.rollback()
                logger.debug(
                    "Settings of %s inserted concurrently", settings.account_id
                )
            else:
                return settings

        stored = await self.find(settings.account_id)
        return stored if stored is not None else settings

    async def delete(self, account_id: UUID) -> bool:
        async with self._session_maker() as session:
            await session.execute(
                delete(SettingChangeModel).where(
                    SettingChangeModel.account_id == account_id,
                ),
            )
            result = await session.execute(
                delete(UserSettingsModel).where(
                    UserSettingsModel.account_id == account_id,
                ),
            )
            await session.commit()
        return result.rowcount > 0

    def _map_to_domain(
        self,
        model: UserSettingsModel,
        history: list[SettingChangeModel],
    ) -> UserSettings:
        groups = {
            name: build_dataclass(group_type, getattr(model, name))
            for name, group_type in _GROUP_TYPES.items()
        }
        return UserSettings(
            account_id=model.account_id,
            custom_settings=dict(model.custom_settings or {}),
            change_history=[
                SettingChange(
                    id=row.id,
                    setting_path=row.setting_path,
                    old_value=row.old_value,
                    new_value=row.new_value,
                    changed_by=row.changed_by,
                    changed_at=ensure_tz_aware(row.changed_at),
                )
                for row in history
            ],
            created_at=ensure_tz_aware(model.created_at),
            updated_at=ensure_tz_aware(model.updated_at),
            **groups,
        )

    def _update_model(self, model: UserSettingsModel, settings: UserSettings) -> None:
        for name in _GROUP_TYPES:
            setattr(model, name, to_primitive(getattr(settings, name)))
        model.custom_settings = to_primitive(settings.custom_settings)
        model.created_at = settings.created_at
        model.updated_at = settings.updated_at

    def _map_change_to_model(
        self,
        account_id: UUID,
        change: SettingChange,
        position: int,
    ) -> SettingChangeModel:
        return SettingChangeModel(
            id=change.id,
            account_id=account_id,
            sequence=position,
            setting_path=change.setting_path,
            old_value=change.old_value,
            new_value=change.new_value,
            changed_by=change.changed_by,
            changed_at=change.changed_at,
        )
