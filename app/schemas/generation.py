from pydantic import BaseModel, Field, validator
from typing import List, Optional

from app.schemas.post import FaqItem


class GenerateInfoPostRequest(BaseModel):
    topic: Optional[str] = Field(None, description="Tema del post informativo")


class GeneratedArticle(BaseModel):
    """Respuesta JSON del modelo. Todos los campos son opcionales: el modelo puede omitirlos."""
    title: Optional[str] = None
    description: Optional[str] = None
    content: Optional[str] = None
    tags: List[str] = []
    seo_keywords: List[str] = []
    faq: List[FaqItem] = []

    @validator("title", "description", "content", pre=True)
    def text_or_none(cls, v):
        return v if isinstance(v, str) and v.strip() else None

    # Listas mal formadas se descartan en lugar de fallar
    @validator("tags", "seo_keywords", pre=True)
    def only_string_lists(cls, v):
        if not isinstance(v, list):
            return []
        return [str(item) for item in v if isinstance(item, (str, int, float))]

    @validator("faq", pre=True)
    def only_complete_faq(cls, v):
        if not isinstance(v, list):
            return []
        return [
            item for item in v
            if isinstance(item, dict)
            and isinstance(item.get("question"), str)
            and isinstance(item.get("answer"), str)
        ]

    class Config:
        extra = 'ignore'
