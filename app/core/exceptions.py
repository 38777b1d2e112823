# app/core/exceptions.py

from fastapi import HTTPException, status

class AuthException(HTTPException):
    def __init__(self, detail: str = "Unauthorized"):
        super().__init__(status_code=status.HTTP_401_UNAUTHORIZED, detail=detail)

class BadRequestException(HTTPException):
    def __init__(self, detail: str):
        super().__init__(status_code=status.HTTP_400_BAD_REQUEST, detail=detail)

class NotFoundException(HTTPException):
    def __init__(self, detail: str = "Recurso no encontrado"):
        super().__init__(status_code=status.HTTP_404_NOT_FOUND, detail=detail)

# =======================================================
# EXCEPCIONES DE SERVICIOS EXTERNOS
# =======================================================
class AIGenerationError(Exception):
    """
    Error al comunicarse con el modelo de OpenAI o al interpretar su respuesta.
    """
    def __init__(self, message: str = "Failed to generate content", status_code: int = 502):
        self.message = message
        self.status_code = status_code
        super().__init__(self.message)

class StorageUploadError(Exception):
    """Error al subir un archivo a Supabase Storage."""
    def __init__(self, message: str = "Failed to upload image"):
        self.message = message
        super().__init__(self.message)

class SlugConflictError(Exception):
    """El slug ya existe (detectado por la restricción UNIQUE de la base de datos)."""
    def __init__(self, slug: str):
        self.slug = slug
        super().__init__(f"A post with this slug already exists: {slug}")
