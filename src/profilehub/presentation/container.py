"""Wiring of application services for the API and the CLI."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from profilehub.application.services import (
    AccountService,
    FileRecordService,
    ProfileService,
    SettingsService,
    UserDataService,
)
from profilehub.infrastructure.storage import LocalFileStorage
from profilehub_auth import JWTService, PasswordHashingService

if TYPE_CHECKING:
    from profilehub.application.factories import RepositoryFactory
    from profilehub.application.ports import ObjectStorageClient
    from profilehub_config import Settings


@dataclass(frozen=True)
class ServiceContainer:
    """Application services sharing one repository factory."""

    accounts: AccountService
    profiles: ProfileService
    settings: SettingsService
    files: FileRecordService
    user_data: UserDataService
    jwt_service: JWTService

    @classmethod
    def build(
        cls,
        factory: RepositoryFactory,
        settings: Settings,
        object_storage: ObjectStorageClient | None = None,
    ) -> ServiceContainer:
        jwt_service = JWTService(
            secret_key=settings.jwt_secret_key.get_secret_value(),
            access_token_expire_hours=settings.jwt_access_token_expire_hours,
        )
        password_service = PasswordHashingService(rounds=settings.bcrypt_rounds)

        files = FileRecordService.from_factory(
            factory,
            blob_storage=LocalFileStorage(
                settings.upload_dir, settings.public_base_url
            ),
            object_storage=object_storage,
            max_upload_bytes=settings.upload_max_bytes,
            allowed_mime_prefixes=settings.allowed_mime_prefixes,
        )
        accounts = AccountService.from_factory(factory, password_service, jwt_service)
        profiles = ProfileService.from_factory(factory, file_service=files)
        user_settings = SettingsService.from_factory(factory)

        return cls(
            accounts=accounts,
            profiles=profiles,
            settings=user_settings,
            files=files,
            user_data=UserDataService(accounts, profiles, user_settings, files),
            jwt_service=jwt_service,
        )
