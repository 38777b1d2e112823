from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from app.config import settings
from app.database import get_db
from app.core.exceptions import NotFoundException
from app.core.pagination import page_markers
from app.core.seo import format_price_krw, structured_data
from app.schemas.post import NameCount, PostListItem, RelatedPost, serialize_post
from app.schemas.site_settings import SiteSettings
from app.services import post_service
from app.services.settings_service import get_site_settings

router = APIRouter()


def _items(posts) -> list:
    return [PostListItem.model_validate(post).model_dump(mode="json") for post in posts]


def _counts(rows) -> list:
    return [NameCount(name=name, count=count).model_dump() for name, count in rows]


@router.get("/home")
def home(
    page: int = Query(1),
    db: Session = Depends(get_db),
    site_settings: SiteSettings = Depends(get_site_settings),
):
    """Portada: posts paginados (9 por página), categorías, populares y tags."""
    current_page = max(1, page)
    paginated = post_service.get_paginated_posts(db, current_page)
    return {
        "site_name": site_settings.site_name,
        "site_description": site_settings.site_description,
        "posts": _items(paginated["posts"]),
        "current_page": current_page,
        "total_count": paginated["total_count"],
        "total_pages": paginated["total_pages"],
        "page_markers": page_markers(current_page, paginated["total_pages"]),
        "categories": _counts(post_service.get_category_counts(db)),
        "popular_posts": _items(post_service.get_popular_posts(db, 5)),
        "tags": _counts(post_service.get_tag_counts(db)),
    }


@router.get("/posts/{slug}")
def post_detail(
    slug: str,
    db: Session = Depends(get_db),
    site_settings: SiteSettings = Depends(get_site_settings),
):
    post = post_service.get_post_by_slug(db, slug)
    if not post:
        raise NotFoundException("Post not found")

    related = post_service.get_related_posts(db, slug, post.category, 3)
    return {
        "post": serialize_post(post),
        "formatted_price": format_price_krw(post.product_price),
        "related_posts": [RelatedPost.model_validate(p).model_dump() for p in related],
        # La valoración del schema Product es sintética (derivada del slug)
        "structured_data": structured_data(post, settings.site_url, site_settings.site_name),
    }


@router.get("/category/{category}")
def category_posts(category: str, db: Session = Depends(get_db)):
    posts = post_service.get_posts_by_category(db, category)
    return {"category": category, "posts": _items(posts)}


@router.get("/categories")
def categories(db: Session = Depends(get_db)):
    return {"categories": _counts(post_service.get_category_counts(db))}


@router.get("/search")
def search(q: str = Query(""), db: Session = Depends(get_db)):
    posts = post_service.search_posts(db, q)
    return {"query": q.strip(), "posts": _items(posts)}


@router.get("/tags")
def tags(db: Session = Depends(get_db)):
    return {"tags": _counts(post_service.get_tag_counts(db))}
