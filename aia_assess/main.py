# aia_assess/main.py
from contextlib import asynccontextmanager
from datetime import datetime, timezone

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .dependencies import load_catalog
from .errors import install_error_handlers
from .logging_config import log_event
from .routes import assessments
from .settings import get_settings

settings = get_settings()


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Catalog is loaded once and only read afterwards
    app.state.catalog = load_catalog(settings)
    log_event(
        "STARTUP",
        "Question catalog loaded",
        {"catalog_version": app.state.catalog.version, "questions": len(app.state.catalog)},
    )
    yield


app = FastAPI(title=settings.API_TITLE, version=settings.APP_VERSION, lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["Content-Type"],
)
install_error_handlers(app)

app.include_router(assessments.router)


@app.get("/health")
def health():
    return {
        "status": "healthy",
        "service": "aia-assess",
        "version": settings.APP_VERSION,
        "env": settings.ENV,
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }
