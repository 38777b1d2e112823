from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from app.database import get_db
from app.core.exceptions import BadRequestException
from app.core.security import require_admin_key
from app.schemas.site_settings import SiteSettings, SiteSettingsUpdate
from app.services.settings_service import get_site_settings, save_site_settings

router = APIRouter()


@router.get("")
def read_settings(site_settings: SiteSettings = Depends(get_site_settings)):
    """Categorías y textos del sitio (valores por defecto si aún no hay fila)."""
    return {"settings": site_settings.model_dump(mode="json")}


@router.put("", dependencies=[Depends(require_admin_key)])
def update_settings(update_data: SiteSettingsUpdate, db: Session = Depends(get_db)):
    changes = update_data.dict(exclude_none=True)
    if not changes:
        raise BadRequestException("No fields to update")

    site_settings, created = save_site_settings(db, changes)
    return {
        "settings": site_settings.model_dump(mode="json"),
        "message": "Settings created" if created else "Settings updated",
    }
