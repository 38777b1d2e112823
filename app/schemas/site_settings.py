from pydantic import BaseModel, Field
from typing import List, Optional
from datetime import datetime

DEFAULT_CATEGORIES = [
    "인공지능과 머신러닝",
    "모바일 기술",
    "인터넷 보안",
    "클라우드 컴퓨팅",
    "하드웨어 리뷰",
    "소프트웨어 개발",
    "가상현실과 증강현실",
    "스타트업과 혁신",
    "기타",
]


class SiteSettings(BaseModel):
    """Configuración del sitio que se pasa a quien renderiza selectores de categoría."""
    id: int = 1
    categories: List[str] = Field(default_factory=lambda: list(DEFAULT_CATEGORIES))
    site_name: str = "테크매니아"
    site_description: str = "최신 테크 트렌드와 리뷰"
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class SiteSettingsUpdate(BaseModel):
    categories: Optional[List[str]] = None
    site_name: Optional[str] = None
    site_description: Optional[str] = None
