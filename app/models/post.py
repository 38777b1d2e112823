import uuid
from sqlalchemy import Column, String, Integer, Text, DateTime, Boolean, Float, JSON, func
from app.database import Base

class Post(Base):
    __tablename__ = "posts"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    slug = Column(String(255), unique=True, nullable=False, index=True)
    title = Column(String(255), nullable=False)
    description = Column(Text)
    content = Column(Text, nullable=False)
    featured_image = Column(String(500))

    # Afiliado (Coupang)
    coupang_url = Column(String(500))
    coupang_product_id = Column(String(100))
    product_name = Column(String(255))
    product_price = Column(Float)

    category = Column(String(100), nullable=False, index=True)
    tags = Column(JSON, default=list)
    seo_keywords = Column(JSON, default=list)
    faq = Column(JSON, default=list)  # [{"question": ..., "answer": ...}]

    view_count = Column(Integer, default=0, nullable=False)
    word_count = Column(Integer)
    is_published = Column(Boolean, default=False, nullable=False, index=True)
    published_at = Column(DateTime(timezone=True))
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())
