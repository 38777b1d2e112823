from sqlalchemy import Column, String, Integer, Text, DateTime, JSON
from sqlalchemy.sql import func
from app.database import Base

SETTINGS_ROW_ID = 1

class SiteSettingsRow(Base):
    """Fila única (id = 1) con las categorías y los textos del sitio."""
    __tablename__ = "settings"

    id = Column(Integer, primary_key=True, default=SETTINGS_ROW_ID)
    categories = Column(JSON, nullable=False, default=list)
    site_name = Column(String(255))
    site_description = Column(Text)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())
