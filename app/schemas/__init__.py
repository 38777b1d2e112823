from .auth import *
from .post import *
from .site_settings import *
from .generation import *

__all__ = [
    # Auth
    "Login", "AuthStatus",

    # Post
    "FaqItem", "PostCreate", "PostUpdate", "PostPatch", "PostResponse",
    "PostListItem", "RelatedPost", "NameCount", "PostDraft", "serialize_post",

    # Settings
    "SiteSettings", "SiteSettingsUpdate", "DEFAULT_CATEGORIES",

    # Generación IA
    "GenerateInfoPostRequest", "GeneratedArticle",
]
