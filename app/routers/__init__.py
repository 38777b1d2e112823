from .auth import router as auth_router
from .posts import router as posts_router
from .settings import router as settings_router
from .upload import router as upload_router
from .generate import router as generate_router
from .public import router as public_router
from .feeds import router as feeds_router

__all__ = [
    "auth_router", "posts_router", "settings_router", "upload_router",
    "generate_router", "public_router", "feeds_router",
]
