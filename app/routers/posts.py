from fastapi import APIRouter, Depends, Query, status
from typing import Optional
from sqlalchemy.orm import Session
from app.config import settings
from app.database import get_db
from app.core.exceptions import BadRequestException, NotFoundException
from app.core.security import require_admin_key
from app.core.slugs import build_slug
from app.schemas.post import PostCreate, PostDraft, PostPatch, PostUpdate, serialize_post
from app.schemas.site_settings import SiteSettings
from app.services import post_service
from app.services.settings_service import get_site_settings

router = APIRouter()


@router.get("", dependencies=[Depends(require_admin_key)])
def list_posts(db: Session = Depends(get_db)):
    """Lista todos los posts (incluidos los no publicados), más recientes primero."""
    posts = post_service.list_all_posts(db)
    return {"posts": [serialize_post(post) for post in posts]}


@router.get("/new", response_model=PostDraft, dependencies=[Depends(require_admin_key)])
def new_post_draft(
    db: Session = Depends(get_db),
    site_settings: SiteSettings = Depends(get_site_settings),
):
    """
    Borrador para el formulario de nuevo post: slug sugerido y categorías.

    El slug es solo una sugerencia; la restricción UNIQUE de la base de datos
    decide al guardar.
    """
    number = post_service.suggest_slug_number(db, settings.DRAFT_SLUG_PREFIX)
    return PostDraft(
        slug=build_slug(settings.DRAFT_SLUG_PREFIX, number),
        categories=site_settings.categories,
    )


@router.post("", status_code=status.HTTP_201_CREATED, dependencies=[Depends(require_admin_key)])
def create_post(post_data: PostCreate, db: Session = Depends(get_db)):
    if post_service.slug_exists(db, post_data.slug):
        raise BadRequestException("A post with this slug already exists")

    post = post_service.create_post(db, post_data.dict())
    return {"post": serialize_post(post)}


@router.put("", dependencies=[Depends(require_admin_key)])
def update_post(post_data: PostUpdate, db: Session = Depends(get_db)):
    if not post_data.id:
        raise BadRequestException("Post ID is required")

    post = post_service.get_post(db, post_data.id)
    if not post:
        raise NotFoundException("Post not found")

    changes = post_service.clean_changes(post_data.dict(exclude_unset=True, exclude={"id"}))
    if "slug" in changes and post_service.slug_exists(db, changes["slug"], exclude_id=post.id):
        raise BadRequestException("A post with this slug already exists")

    post = post_service.update_post(db, post, changes)
    return {"post": serialize_post(post)}


@router.delete("", dependencies=[Depends(require_admin_key)])
def delete_post(id: Optional[str] = Query(None), db: Session = Depends(get_db)):
    if not id:
        raise BadRequestException("Post ID is required")

    post_service.delete_post(db, id)
    return {"success": True}


@router.get("/{post_id}")
def get_post(post_id: str, db: Session = Depends(get_db)):
    post = post_service.get_post(db, post_id)
    if not post:
        raise NotFoundException("Post not found")
    return {"post": serialize_post(post)}


@router.patch("/{post_id}", dependencies=[Depends(require_admin_key)])
def patch_post(post_id: str, post_data: PostPatch, db: Session = Depends(get_db)):
    changes = post_service.clean_changes(post_data.dict(exclude_unset=True))
    if not changes:
        raise BadRequestException("No valid fields to update")

    post = post_service.get_post(db, post_id)
    if not post:
        raise NotFoundException("Post not found")

    post = post_service.update_post(db, post, changes)
    return {
        "post": serialize_post(post),
        "message": "포스트가 성공적으로 업데이트되었습니다.",
    }
