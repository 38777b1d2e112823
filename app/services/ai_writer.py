# app/services/ai_writer.py
"""
Generación de posts informativos con la API de chat de OpenAI.

Una sola llamada por post: prompt de sistema fijo, respuesta en JSON.
"""

import json
import logging
from functools import lru_cache

from openai import OpenAI, OpenAIError
from pydantic import ValidationError

from app.config import settings
from app.core.exceptions import AIGenerationError
from app.schemas.generation import GeneratedArticle

logger = logging.getLogger(__name__)

INFO_POST_SYSTEM_PROMPT = """당신은 테니스 전문가이자 물리학/운동역학 전문 블로거입니다.
테니스의 기술과 원리를 물리학과 인체구조의 관점에서 과학적으로 설명합니다.
초보자도 이해하기 쉽게 작성하되, 과학적 근거를 바탕으로 설명합니다.
제품 홍보가 아닌 순수 정보 공유 목적으로 작성합니다.

응답은 반드시 아래 JSON 형식으로 작성해주세요:
{
  "title": "SEO 최적화된 제목 (50자 이내)",
  "description": "150-160자 내외의 메타 설명",
  "content": "HTML 형식의 본문 (1500-2500자)",
  "tags": ["태그1", "태그2", "태그3"],
  "seo_keywords": ["키워드1", "키워드2", "키워드3"],
  "faq": [
    {"question": "질문1", "answer": "답변1"},
    {"question": "질문2", "answer": "답변2"},
    {"question": "질문3", "answer": "답변3"}
  ]
}

본문 작성 시 주의사항:
- HTML 태그를 사용하여 구조화된 콘텐츠 작성
- h2, h3 태그로 섹션 구분
- p 태그로 단락 구분
- ul, li 태그로 목록 작성
- 쿠팡 링크나 제품 홍보 문구 절대 포함하지 않음
- 순수 정보 제공 목적의 콘텐츠만 작성"""

USER_PROMPT_TEMPLATE = "다음 주제에 대한 테니스 정보 블로그 포스트를 물리원리와 인체구조 관점에서 작성해주세요: {topic}"

TEMPERATURE = 0.7
MAX_TOKENS = 4000


def parse_article(raw: str) -> GeneratedArticle:
    """Convierte el texto JSON devuelto por el modelo en un GeneratedArticle."""
    try:
        data = json.loads(raw)
    except (TypeError, ValueError):
        logger.error(f"❌ Respuesta de OpenAI no es JSON: {raw!r:.200}")
        raise AIGenerationError("Failed to parse generated content")

    if not isinstance(data, dict):
        raise AIGenerationError("Failed to parse generated content")

    try:
        return GeneratedArticle(**data)
    except ValidationError as e:
        raise AIGenerationError(f"Failed to parse generated content: {e}")


class InfoPostWriter:
    def __init__(self, client: OpenAI, model: str = None):
        self.client = client
        self.model = model or settings.OPENAI_MODEL

    def write(self, topic: str) -> GeneratedArticle:
        logger.info(f"Generando post informativo: topic={topic!r} model={self.model}")
        try:
            completion = self.client.chat.completions.create(
                model=self.model,
                messages=[
                    {"role": "system", "content": INFO_POST_SYSTEM_PROMPT},
                    {"role": "user", "content": USER_PROMPT_TEMPLATE.format(topic=topic)},
                ],
                temperature=TEMPERATURE,
                max_tokens=MAX_TOKENS,
                response_format={"type": "json_object"},
            )
        except OpenAIError as e:
            logger.error(f"❌ Error de la API de OpenAI: {e}")
            raise AIGenerationError(f"OpenAI Error: {e}")

        content = completion.choices[0].message.content if completion.choices else None
        if not content:
            raise AIGenerationError("Failed to generate content")

        return parse_article(content)


@lru_cache
def get_info_post_writer() -> InfoPostWriter:
    if not settings.OPENAI_API_KEY:
        # No se rompe el arranque; solo falla cuando se llama al endpoint
        raise AIGenerationError("Missing OpenAI API key", status_code=500)
    return InfoPostWriter(OpenAI(api_key=settings.OPENAI_API_KEY))
