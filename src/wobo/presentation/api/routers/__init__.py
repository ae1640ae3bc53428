from wobo.presentation.api.routers.auth import router as auth_router
from wobo.presentation.api.routers.users import router as users_router

__all__ = [
    "auth_router",
    "users_router",
]
