from fastapi import APIRouter, Depends, Response
from sqlalchemy.orm import Session
from app.config import settings
from app.database import get_db
from app.schemas.site_settings import SiteSettings
from app.services import post_service
from app.services.feeds import build_rss, build_sitemap
from app.services.settings_service import get_site_settings

router = APIRouter()

FEED_SIZE = 50
CACHE_HEADERS = {"Cache-Control": "public, max-age=3600, s-maxage=3600"}


@router.get("/feed.xml")
def rss_feed(
    db: Session = Depends(get_db),
    site_settings: SiteSettings = Depends(get_site_settings),
):
    posts = post_service.get_published_posts(db, FEED_SIZE)
    body = build_rss(posts, settings.site_url, site_settings.site_name, site_settings.site_description)
    return Response(content=body, media_type="application/xml; charset=utf-8", headers=CACHE_HEADERS)


@router.get("/sitemap.xml")
def sitemap(db: Session = Depends(get_db)):
    posts = post_service.get_all_slugs_for_sitemap(db)
    categories = [name for name, _ in post_service.get_category_counts(db)]
    body = build_sitemap(settings.site_url, posts, categories)
    return Response(content=body, media_type="application/xml; charset=utf-8")
