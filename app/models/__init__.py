from .post import Post
from .site_settings import SiteSettingsRow

__all__ = ["Post", "SiteSettingsRow"]
