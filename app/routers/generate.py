import logging
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from app.config import settings
from app.database import get_db
from app.core.exceptions import BadRequestException, SlugConflictError
from app.core.security import require_admin_key
from app.core.slugs import build_slug
from app.schemas.generation import GenerateInfoPostRequest, GeneratedArticle
from app.schemas.post import serialize_post
from app.services import post_service
from app.services.ai_writer import InfoPostWriter, get_info_post_writer

logger = logging.getLogger(__name__)

router = APIRouter()

# Reintentos si otro post ocupa el mismo número entre la consulta y el INSERT
SLUG_ATTEMPTS = 3


def build_info_post(topic: str, article: GeneratedArticle, slug: str) -> dict:
    """Datos del post a partir de la respuesta del modelo (sin campos de afiliado)."""
    return {
        "title": article.title or f"{topic} - {settings.SITE_NAME}",
        "slug": slug,
        "description": article.description or f"{topic}에 대해 물리원리와 인체구조로 설명합니다.",
        "content": article.content or "",
        "featured_image": None,
        "coupang_url": None,
        "coupang_product_id": None,
        "product_name": None,
        "product_price": None,
        "category": settings.GENERATED_POST_CATEGORY,
        "tags": article.tags,
        "seo_keywords": article.seo_keywords,
        "faq": [item.dict() for item in article.faq],
        "is_published": True,
    }


@router.post("", status_code=status.HTTP_201_CREATED, dependencies=[Depends(require_admin_key)])
def generate_info_post(
    request_data: GenerateInfoPostRequest,
    db: Session = Depends(get_db),
    writer: InfoPostWriter = Depends(get_info_post_writer),
):
    topic = (request_data.topic or "").strip()
    if not topic:
        raise BadRequestException("Topic is required")

    article = writer.write(topic)

    # El número se calcula al guardar; la restricción UNIQUE es la que manda
    for attempt in range(1, SLUG_ATTEMPTS + 1):
        number = post_service.suggest_slug_number(db, settings.GENERATED_SLUG_PREFIX)
        slug = build_slug(settings.GENERATED_SLUG_PREFIX, number)
        try:
            post = post_service.create_post(db, build_info_post(topic, article, slug))
            break
        except SlugConflictError:
            if attempt == SLUG_ATTEMPTS:
                raise
            logger.warning(f"⚠️ Slug {slug} ocupado, reintentando ({attempt}/{SLUG_ATTEMPTS})")

    logger.info(f"✅ Post informativo creado: {post.title}")
    return {
        "post": serialize_post(post),
        "message": "정보 포스트가 성공적으로 생성되었습니다.",
    }
