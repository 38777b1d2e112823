from fastapi import APIRouter, Depends, File, UploadFile
from typing import Optional
from app.core.exceptions import BadRequestException
from app.core.security import require_admin_session
from app.services.supabase_storage import SupabaseStorage, get_storage_service

router = APIRouter()


@router.post("", dependencies=[Depends(require_admin_session)])
async def upload_image(
    file: Optional[UploadFile] = File(None),
    storage: SupabaseStorage = Depends(get_storage_service),
):
    """Sube una imagen del editor a Supabase Storage y devuelve su URL pública."""
    if file is None:
        raise BadRequestException("No file provided")

    result = await storage.upload_image(file)
    return {"success": True, **result}
