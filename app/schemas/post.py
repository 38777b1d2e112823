from pydantic import BaseModel, Field, validator
from typing import List, Optional
from datetime import datetime

class FaqItem(BaseModel):
    question: str
    answer: str


OPTIONAL_TEXT_FIELDS = ("description", "featured_image", "coupang_url", "coupang_product_id", "product_name")
LIST_FIELDS = ("tags", "seo_keywords", "faq")


class PostFields(BaseModel):
    """Campos opcionales comunes a creación y actualización."""
    description: Optional[str] = None
    featured_image: Optional[str] = None
    coupang_url: Optional[str] = None
    coupang_product_id: Optional[str] = None
    product_name: Optional[str] = None
    product_price: Optional[float] = None
    tags: Optional[List[str]] = None
    seo_keywords: Optional[List[str]] = None
    faq: Optional[List[FaqItem]] = None

    # Cadenas vacías del formulario se guardan como NULL
    @validator(*OPTIONAL_TEXT_FIELDS, pre=True, allow_reuse=True)
    def empty_string_to_none(cls, v):
        return v or None

    @validator("product_price", pre=True, allow_reuse=True)
    def empty_price_to_none(cls, v):
        if v in ("", 0, None):
            return None
        return v

    @validator(*LIST_FIELDS, pre=True, allow_reuse=True)
    def none_to_empty_list(cls, v):
        return [] if v is None else v


class PostCreate(PostFields):
    title: str = Field(..., min_length=1, max_length=255)
    slug: str = Field(..., min_length=1, max_length=255)
    content: str = Field(..., min_length=1)
    category: str = Field(..., min_length=1, max_length=100)
    is_published: bool = False


class PostUpdate(PostFields):
    id: Optional[str] = None
    title: Optional[str] = Field(None, min_length=1, max_length=255)
    slug: Optional[str] = Field(None, min_length=1, max_length=255)
    content: Optional[str] = None
    category: Optional[str] = Field(None, min_length=1, max_length=100)
    is_published: Optional[bool] = None


class PostPatch(BaseModel):
    """Actualización parcial: solo estos campos se pueden modificar."""
    title: Optional[str] = Field(None, min_length=1, max_length=255)
    description: Optional[str] = None
    content: Optional[str] = None
    featured_image: Optional[str] = None
    category: Optional[str] = Field(None, min_length=1, max_length=100)
    tags: Optional[List[str]] = None
    seo_keywords: Optional[List[str]] = None
    is_published: Optional[bool] = None

    class Config:
        extra = 'ignore'


class PostResponse(BaseModel):
    id: str
    slug: str
    title: str
    description: Optional[str] = None
    content: str
    featured_image: Optional[str] = None
    coupang_url: Optional[str] = None
    coupang_product_id: Optional[str] = None
    product_name: Optional[str] = None
    product_price: Optional[float] = None
    category: str
    tags: List[str] = []
    seo_keywords: List[str] = []
    faq: List[FaqItem] = []
    view_count: int = 0
    word_count: Optional[int] = None
    is_published: bool
    published_at: Optional[datetime] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @validator("tags", "seo_keywords", "faq", pre=True)
    def null_list(cls, v):
        return v or []

    class Config:
        from_attributes = True


class PostListItem(BaseModel):
    id: str
    slug: str
    title: str
    description: Optional[str] = None
    featured_image: Optional[str] = None
    category: str
    tags: List[str] = []
    published_at: Optional[datetime] = None
    product_price: Optional[float] = None

    @validator("tags", pre=True)
    def null_tags(cls, v):
        return v or []

    class Config:
        from_attributes = True


class RelatedPost(BaseModel):
    id: str
    slug: str
    title: str
    featured_image: Optional[str] = None
    category: str

    class Config:
        from_attributes = True


class NameCount(BaseModel):
    name: str
    count: int


class PostDraft(BaseModel):
    slug: str
    categories: List[str]


def serialize_post(post) -> dict:
    return PostResponse.model_validate(post).model_dump(mode="json")
