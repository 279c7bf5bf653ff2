from profilehub.presentation.api.routers.admin import router as admin_router
from profilehub.presentation.api.routers.auth import router as auth_router
from profilehub.presentation.api.routers.exports import router as exports_router
from profilehub.presentation.api.routers.files import router as files_router
from profilehub.presentation.api.routers.profile import router as profile_router
from profilehub.presentation.api.routers.settings import router as settings_router

__all__ = [
    "admin_router",
    "auth_router",
    "exports_router",
    "files_router",
    "profile_router",
    "settings_router",
]
