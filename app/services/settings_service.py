import logging
from typing import Any, Dict, Tuple
from fastapi import Depends
from sqlalchemy.orm import Session
from app.database import get_db
from app.models.site_settings import SiteSettingsRow, SETTINGS_ROW_ID
from app.schemas.site_settings import SiteSettings

logger = logging.getLogger(__name__)

# Valores para la fila creada en el primer PUT si faltan campos
FALLBACK_CATEGORIES = ["기타"]
FALLBACK_SITE_NAME = "블로그"


def load_site_settings(db: Session) -> SiteSettings:
    """Lee la fila singleton; si no existe devuelve los valores por defecto."""
    row = db.query(SiteSettingsRow).filter(SiteSettingsRow.id == SETTINGS_ROW_ID).first()
    if row is None:
        return SiteSettings()
    return SiteSettings.model_validate(row)


def get_site_settings(db: Session = Depends(get_db)) -> SiteSettings:
    """Dependencia: configuración del sitio para la request actual."""
    return load_site_settings(db)


def save_site_settings(db: Session, data: Dict[str, Any]) -> Tuple[SiteSettings, bool]:
    """
    Actualiza la fila singleton con los campos de ``data``.

    Si la fila no existe se crea. Devuelve (settings, creada).
    """
    row = db.query(SiteSettingsRow).filter(SiteSettingsRow.id == SETTINGS_ROW_ID).first()
    created = row is None

    if created:
        row = SiteSettingsRow(
            id=SETTINGS_ROW_ID,
            categories=data.get("categories") or list(FALLBACK_CATEGORIES),
            site_name=data.get("site_name") or FALLBACK_SITE_NAME,
            site_description=data.get("site_description") or "",
        )
        db.add(row)
        logger.info("Fila de settings creada")
    else:
        for field, value in data.items():
            setattr(row, field, value)

    try:
        db.commit()
    except Exception:
        db.rollback()
        raise
    db.refresh(row)
    return SiteSettings.model_validate(row), created
