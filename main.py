from typing import Dict

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from settings.db import init_db, close_db
import logging
from settings.config import settings
from settings.logging_config import configure_logging
from db.errors import register_exception_handlers
from transactions.transaction_routes import router as transaction_router
from budgets.budget_routes import router as budget_router
from categories.category_routes import router as category_router
from analysis_service.analysis_routes import router as analysis_router

logger = logging.getLogger(__name__)


def get_app() -> FastAPI:
    configure_logging()
    logger.info("Starting Personal Finance API")
    app = FastAPI(title="Personal Finance API")

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ALLOW_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # DB lifecycle
    @app.on_event("startup")
    async def on_startup() -> None:
        logger.info("Initializing database")
        await init_db()

    @app.on_event("shutdown")
    async def on_shutdown() -> None:
        logger.info("Closing database")
        await close_db()

    register_exception_handlers(app)

    # Routers
    app.include_router(transaction_router)
    app.include_router(budget_router)
    app.include_router(category_router)
    app.include_router(analysis_router)
    logger.info("Routers initialized successfully")

    # Health
    @app.get("/health")
    async def health_check() -> Dict[str, str]:
        return {"status": "ok"}

    return app


# ASGI app instance
app = get_app()
