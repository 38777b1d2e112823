# app/services/post_service.py
"""
Consultas y escrituras sobre la tabla ``posts``.

Las funciones de lectura pública solo devuelven posts publicados. Las de
escritura mantienen las invariantes del modelo: ``word_count`` se recalcula
cada vez que cambia ``content`` y ``published_at`` se fija una sola vez, la
primera vez que el post se publica.
"""

import logging
from collections import Counter
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional, Tuple

from sqlalchemy import func, or_
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.core.exceptions import SlugConflictError
from app.core.pagination import total_pages
from app.core.slugs import count_words, next_slug_number
from app.models.post import Post

logger = logging.getLogger(__name__)

DEFAULT_PAGE_SIZE = 9


def _now() -> datetime:
    return datetime.now(timezone.utc)


def _published(db: Session):
    return db.query(Post).filter(Post.is_published.is_(True))


# =======================================================
# LECTURA (sitio público)
# =======================================================
def get_published_posts(db: Session, limit: Optional[int] = None) -> List[Post]:
    query = _published(db).order_by(Post.published_at.desc())
    if limit:
        query = query.limit(limit)
    return query.all()


def get_post_by_slug(db: Session, slug: str) -> Optional[Post]:
    return _published(db).filter(Post.slug == slug).first()


def get_posts_by_category(db: Session, category: str, limit: Optional[int] = None) -> List[Post]:
    query = _published(db).filter(Post.category == category).order_by(Post.published_at.desc())
    if limit:
        query = query.limit(limit)
    return query.all()


def get_category_counts(db: Session) -> List[Tuple[str, int]]:
    rows = (
        db.query(Post.category, func.count(Post.id))
        .filter(Post.is_published.is_(True))
        .group_by(Post.category)
        .order_by(func.count(Post.id).desc(), Post.category)
        .all()
    )
    return [(category, count) for category, count in rows]


def get_all_slugs_for_sitemap(db: Session) -> List[Tuple[str, Optional[datetime]]]:
    return [(slug, updated_at) for slug, updated_at in _published(db).with_entities(Post.slug, Post.updated_at)]


def get_related_posts(db: Session, current_slug: str, category: str, limit: int = 3) -> List[Post]:
    return (
        _published(db)
        .filter(Post.category == category, Post.slug != current_slug)
        .order_by(Post.published_at.desc())
        .limit(limit)
        .all()
    )


def search_posts(db: Session, query: str, limit: int = 20) -> List[Post]:
    query = (query or "").strip()
    if not query:
        return []
    pattern = f"%{query}%"
    return (
        _published(db)
        .filter(or_(
            Post.title.ilike(pattern),
            Post.description.ilike(pattern),
            Post.product_name.ilike(pattern),
        ))
        .order_by(Post.published_at.desc())
        .limit(limit)
        .all()
    )


def get_paginated_posts(db: Session, page: int = 1, page_size: int = DEFAULT_PAGE_SIZE) -> Dict[str, Any]:
    page = max(1, page)
    total_count = _published(db).count()
    offset = (page - 1) * page_size
    posts = (
        _published(db)
        .order_by(Post.published_at.desc())
        .offset(offset)
        .limit(page_size)
        .all()
    )
    return {
        "posts": posts,
        "total_count": total_count,
        "total_pages": total_pages(total_count, page_size),
    }


def get_popular_posts(db: Session, limit: int = 5) -> List[Post]:
    return _published(db).order_by(Post.view_count.desc()).limit(limit).all()


def get_tag_counts(db: Session) -> List[Tuple[str, int]]:
    counter = Counter()
    for (tags,) in _published(db).with_entities(Post.tags):
        counter.update(tags or [])
    return counter.most_common()


# =======================================================
# ADMIN
# =======================================================
def list_all_posts(db: Session) -> List[Post]:
    return db.query(Post).order_by(Post.created_at.desc()).all()


def get_post(db: Session, post_id: str) -> Optional[Post]:
    return db.query(Post).filter(Post.id == post_id).first()


def slug_exists(db: Session, slug: str, exclude_id: Optional[str] = None) -> bool:
    query = db.query(Post.id).filter(Post.slug == slug)
    if exclude_id:
        query = query.filter(Post.id != exclude_id)
    return query.first() is not None


def all_slugs(db: Session) -> List[str]:
    return [slug for (slug,) in db.query(Post.slug).all()]


def suggest_slug_number(db: Session, prefix: str) -> int:
    return next_slug_number(all_slugs(db), prefix)


NON_NULLABLE_FIELDS = {"title", "slug", "content", "category", "is_published"}


def clean_changes(data: Dict[str, Any]) -> Dict[str, Any]:
    """Descarta nulos en columnas NOT NULL; en el resto un nulo borra el valor."""
    cleaned = {k: v for k, v in data.items() if v is not None or k not in NON_NULLABLE_FIELDS}
    for field in ("tags", "seo_keywords", "faq"):
        if field in cleaned and cleaned[field] is None:
            cleaned[field] = []
    return cleaned


def apply_changes(post: Post, data: Dict[str, Any]) -> None:
    """
    Aplica ``data`` sobre ``post`` respetando las invariantes derivadas.
    """
    for field, value in data.items():
        setattr(post, field, value)

    if "content" in data:
        post.word_count = count_words(post.content)

    if data.get("is_published") and post.published_at is None:
        post.published_at = _now()


def _commit(db: Session, post: Post) -> Post:
    # rollback() expira el objeto; se guarda el slug rechazado antes
    slug = post.slug
    try:
        db.commit()
    except IntegrityError as e:
        db.rollback()
        if "slug" not in str(e.orig).lower():
            raise
        logger.warning(f"❌ Slug duplicado rechazado por la base de datos: {slug} ({e.orig})")
        raise SlugConflictError(slug)
    db.refresh(post)
    return post


def create_post(db: Session, data: Dict[str, Any]) -> Post:
    data = dict(data)
    for field in ("tags", "seo_keywords", "faq"):
        data[field] = data.get(field) or []

    post = Post(view_count=0)
    apply_changes(post, data)

    db.add(post)
    post = _commit(db, post)
    logger.info(f"✅ Post creado: {post.slug} (publicado={post.is_published})")
    return post


def update_post(db: Session, post: Post, data: Dict[str, Any]) -> Post:
    apply_changes(post, data)
    post.updated_at = _now()
    post = _commit(db, post)
    logger.info(f"Post actualizado: {post.id}, campos: {', '.join(sorted(data))}")
    return post


def delete_post(db: Session, post_id: str) -> bool:
    deleted = db.query(Post).filter(Post.id == post_id).delete()
    db.commit()
    if deleted:
        logger.info(f"🗑️ Post eliminado: {post_id}")
    return bool(deleted)
