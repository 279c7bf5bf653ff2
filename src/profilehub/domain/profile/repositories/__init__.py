from profilehub.domain.profile.repositories.profile_repository import (
    ProfileRepository,
)

__all__ = ["ProfileRepository"]
