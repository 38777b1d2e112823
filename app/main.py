# En main.py
import logging
from datetime import datetime, timezone
from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from app.config import settings
from app.core.exceptions import AIGenerationError, SlugConflictError, StorageUploadError
from app.logging_config import setup_logging
from app.routers import (
    auth,
    feeds,
    generate,
    posts,
    public,
    settings as settings_router,
    upload,
)

setup_logging()
logger = logging.getLogger(__name__)


app = FastAPI(
    title="Tech Blog CMS",
    description="API del blog: páginas públicas, panel de administración y generación de posts con IA",
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc"
)

# Configuración CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE", "PATCH", "OPTIONS"],
    allow_headers=[
        "Content-Type",
        "Accept",
        "Origin",
        "X-Requested-With",
        "X-Admin-Key",
    ],
    max_age=600,
)


# Errores de servicios externos -> respuestas HTTP
@app.exception_handler(AIGenerationError)
async def ai_generation_error_handler(request: Request, exc: AIGenerationError):
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})


@app.exception_handler(StorageUploadError)
async def storage_error_handler(request: Request, exc: StorageUploadError):
    return JSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content={"detail": exc.message})


@app.exception_handler(SlugConflictError)
async def slug_conflict_handler(request: Request, exc: SlugConflictError):
    return JSONResponse(status_code=status.HTTP_409_CONFLICT, content={"detail": str(exc)})


# Routers
app.include_router(auth.router, prefix="/api/auth", tags=["Auth"])
app.include_router(posts.router, prefix="/api/posts", tags=["Posts (admin)"])
app.include_router(settings_router.router, prefix="/api/settings", tags=["Settings"])
app.include_router(upload.router, prefix="/api/upload", tags=["Upload"])
app.include_router(generate.router, prefix="/api/generate-info-post", tags=["Generación IA"])
app.include_router(public.router, prefix="/api/public", tags=["Sitio público"])
app.include_router(feeds.router, tags=["Feeds"])

@app.get("/")
def read_root():
    return {
        "mensaje": f"{settings.SITE_NAME} API funcionando correctamente",
        "version": "1.0.0"
    }

@app.get("/api/health")
def health_check():
    # Solo indica qué está configurado, nunca los valores
    return {
        "status": "ok",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "config": {
            "hasDatabaseUrl": bool(settings.DATABASE_URL),
            "hasSupabaseUrl": bool(settings.SUPABASE_URL),
            "hasSupabaseServiceKey": bool(settings.SUPABASE_SERVICE_KEY),
            "hasOpenAIKey": bool(settings.OPENAI_API_KEY),
            "hasAdminSecretKey": bool(settings.ADMIN_SECRET_KEY),
        },
    }
