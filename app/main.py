# app/main.py
from contextlib import asynccontextmanager
from pathlib import Path
import logging

from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse, PlainTextResponse
from fastapi import FastAPI, HTTPException, status

from app.core.config import get_settings
from app.core.errors import register_exception_handlers
from app.database import create_db_and_tables

# Import models so SQLModel metadata is populated before create_all()
from app.models import product as _product_models  # noqa: F401
from app.models import category as _category_models  # noqa: F401
from app.models import carousel as _carousel_models  # noqa: F401
from app.models import cart as _cart_models  # noqa: F401


# Routers
from app.routers.products import router as products_router
from app.routers.catalog import router as catalog_router
from app.routers.cart import router as cart_router

settings = get_settings()

logging.basicConfig(level=settings.LOG_LEVEL.upper())
logger = logging.getLogger("uvicorn")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    Startup:
      - Verify DB connectivity and create tables.
        A failure here is fatal: the app does not start.

    Shutdown:
      - No special cleanup needed for sync engine.
    """
    logger.info("🔄 Startup: Connecting to database...")
    try:
        create_db_and_tables()
        logger.info("✅ Startup: DB connection OK, tables verified.")
    except Exception as e:
        logger.error(f"❌ Startup: DB connection FAILED: {e}")
        raise
    yield


app = FastAPI(
    title=settings.PROJECT_NAME,
    version="0.1.0",
    lifespan=lifespan,
)

register_exception_handlers(app)


# --- CORS configuration ---
# Every origin is allowed; the request Origin is echoed back so
# credentialed requests work.
app.add_middleware(
    CORSMiddleware,
    allow_origin_regex=settings.CORS_ORIGIN_REGEX,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE", "PATCH", "OPTIONS"],
    allow_headers=["X-Requested-With", "Content-Type", "Accept", "Origin", "Authorization"],
)

app.include_router(products_router)
app.include_router(catalog_router)
app.include_router(cart_router)


@app.get("/", response_class=PlainTextResponse)
def root():
    """Liveness check endpoint."""
    return "Product catalog API is running...."


@app.get("/favicon.ico", include_in_schema=False)
def favicon():
    path = Path(settings.FAVICON_PATH)
    if not path.is_file():
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Favicon not found",
        )
    return FileResponse(path, media_type="image/x-icon")
