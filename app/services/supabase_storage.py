# app/services/supabase_storage.py
import logging
import random
import string
import time
from functools import lru_cache
from fastapi import UploadFile, HTTPException
from supabase import create_client
from app.config import settings
from app.core.exceptions import StorageUploadError

logger = logging.getLogger(__name__)

ALLOWED_CONTENT_TYPES = {"image/jpeg", "image/png", "image/gif", "image/webp"}
MAX_SIZE_MB = 5


def unique_filename(original: str) -> str:
    """``<timestamp ms>-<6 caracteres>.<ext>``; sin extensión se usa jpg."""
    ext = original.rsplit(".", 1)[-1].lower() if "." in (original or "") else "jpg"
    suffix = "".join(random.choices(string.ascii_lowercase + string.digits, k=6))
    return f"{int(time.time() * 1000)}-{suffix}.{ext}"


class SupabaseStorage:
    def __init__(self, client=None, bucket: str = None):
        # Usar SERVICE KEY para escritura
        self.client = client or create_client(
            settings.SUPABASE_URL,
            settings.SUPABASE_SERVICE_KEY
        )
        self.bucket = bucket or settings.SUPABASE_BUCKET

    async def upload_image(
        self,
        file: UploadFile,
        folder: str = "blog-images",
        max_size_mb: int = MAX_SIZE_MB
    ) -> dict:
        """Sube imagen y retorna {"url", "filename"}"""
        # Validar tipo de archivo
        if file.content_type not in ALLOWED_CONTENT_TYPES:
            raise HTTPException(
                status_code=400,
                detail="Invalid file type. Allowed: JPG, PNG, GIF, WebP"
            )

        # Validar tamaño
        content = await file.read()
        if len(content) > max_size_mb * 1024 * 1024:
            raise HTTPException(
                status_code=400,
                detail=f"File too large. Maximum size is {max_size_mb}MB"
            )

        filename = unique_filename(file.filename or "")
        storage_path = f"{folder}/{filename}"

        try:
            # Subir a Supabase Storage
            self.client.storage.from_(self.bucket).upload(
                storage_path,
                content,
                {"content-type": file.content_type, "cache-control": "3600", "upsert": "false"}
            )
            url = self.client.storage.from_(self.bucket).get_public_url(storage_path)
        except Exception as e:
            logger.error(f"❌ Error al subir {storage_path}: {e}")
            raise StorageUploadError(f"Upload failed: {e}")

        logger.info(f"📤 Imagen subida: {storage_path}")
        return {"url": url, "filename": filename}


@lru_cache
def get_storage_service() -> SupabaseStorage:
    if not settings.SUPABASE_URL or not settings.SUPABASE_SERVICE_KEY:
        # No se rompe el arranque; solo falla cuando se sube algo
        raise StorageUploadError("Missing Supabase environment variables")
    return SupabaseStorage()
