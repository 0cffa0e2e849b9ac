"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.config import get_settings
from app.database import close_pool, close_postgrest

logger = logging.getLogger("app")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup / shutdown lifecycle."""
    settings = get_settings()
    if settings.DATABASE_URL:
        logger.info("Nearby search backed by Postgres")
    else:
        logger.info("DATABASE_URL not set; nearby search uses mock data (seed=%d, count=%d)",
                    settings.MOCK_SEED, settings.MOCK_COUNT)
    yield
    # Shutdown: release connections opened lazily by the services
    await close_pool()
    await close_postgrest()


settings = get_settings()

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

app = FastAPI(
    title=settings.APP_NAME,
    version="0.1.0",
    debug=settings.DEBUG,
    lifespan=lifespan,
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/health")
async def health_check():
    return {"status": "ok"}


# ── API routers ──
from app.api.mosques import LocationRequired, location_required_handler
from app.api.mosques import router as mosques_router
from app.api.mosques import submissions_router

app.add_exception_handler(LocationRequired, location_required_handler)
app.include_router(mosques_router, prefix="/api/v1")
app.include_router(submissions_router, prefix="/api/v1")
