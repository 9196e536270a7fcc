from dotenv import load_dotenv
load_dotenv()

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from biztime.api.error_handlers import register_error_handlers
from biztime.core.config import Settings, get_settings
from biztime.core.db import configure_engine, init_db
from biztime.core.observability import setup_logging

# Routers
from biztime.routes import companies, invoices

logger = logging.getLogger(__name__)


# ==========================
# Startup / Shutdown
# ==========================
@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = app.state.settings
    setup_logging(settings.LOG_LEVEL, settings.LOG_FORMAT)
    configure_engine(settings.DATABASE_URL, echo=settings.DATABASE_ECHO)
    init_db()
    logger.info("Database initialized")
    logger.info("BizTime API is running")
    yield
    logger.info("BizTime API shutting down")


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()

    app = FastAPI(
        title="BizTime API",
        version="1.0.0",
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.legacy_validation_status = settings.LEGACY_VALIDATION_STATUS

    # ==========================
    # CORS
    # ==========================
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_error_handlers(app)

    # ==========================
    # Routers
    # ==========================
    app.include_router(companies.router, prefix="/companies", tags=["companies"])
    app.include_router(invoices.router, prefix="/invoices", tags=["invoices"])

    # ==========================
    # Root + Health
    # ==========================
    @app.get("/")
    def root():
        return {
            "service": "biztime-api",
            "status": "running",
            "endpoints": {
                "companies": "/companies",
                "company": "/companies/{code}",
                "invoices": "/invoices",
                "invoice": "/invoices/{id}",
                "health": "/health",
            },
        }

    @app.get("/health")
    def health():
        return {"status": "ok"}

    return app


app = create_app()
