import logging
from contextlib import asynccontextmanager
from datetime import datetime, timezone

import uvicorn
from fastapi import Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware
from pymongo.asynchronous.database import AsyncDatabase

from app.config.settings import settings
from app.core.exceptions import register_exception_handlers
from app.database.mongo_client import MongoClient, ensure_indexes, get_database, ping
from app.modules.auth import routes as auth_routes
from app.modules.relief_goods import routes as relief_goods_routes
from app.modules.recent_works import routes as recent_works_routes

logging.basicConfig(
    level=getattr(logging, settings.log_level.upper(), logging.INFO),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    datefmt="%Y-%m-%dT%H:%M:%SZ",
)
logger = logging.getLogger(__name__)


class SecurityHeadersMiddleware:
    def __init__(self, app):
        self.app = app

    async def __call__(self, scope, receive, send):
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        async def send_with_headers(message):
            if message["type"] == "http.response.start":
                message.setdefault("headers", [])
                message["headers"].extend([
                    (b"X-Content-Type-Options", b"nosniff"),
                    (b"X-Frame-Options", b"DENY"),
                ])
            await send(message)

        await self.app(scope, receive, send_with_headers)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Application startup")
    database = MongoClient.get_database()
    try:
        await ping(database)
        await ensure_indexes(database)
    except Exception:
        logger.exception("Could not connect to MongoDB at startup")
        raise
    logger.info("Connected to MongoDB database %s", settings.mongodb_db_name)
    yield
    await MongoClient.close_client()
    logger.info("Application shutdown")


def create_app() -> FastAPI:
    app = FastAPI(
        title=settings.app_name,
        debug=settings.debug,
        redirect_slashes=False,
        lifespan=lifespan,
    )

    register_exception_handlers(app, is_production=settings.is_production)

    cors_origins = settings.get_cors_origins_list()
    app.add_middleware(SecurityHeadersMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=cors_origins,
        allow_credentials="*" not in cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(auth_routes.router, prefix="/api/v1")
    app.include_router(relief_goods_routes.router)
    app.include_router(recent_works_routes.router)

    @app.get("/")
    async def root():
        return {
            "message": "Server is running smoothly",
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }

    @app.get("/health")
    async def health():
        return {"status": "healthy"}

    @app.get("/ready")
    async def ready(db: AsyncDatabase = Depends(get_database)):
        """Readiness probe: one round-trip to MongoDB."""
        await ping(db)
        return {"status": "ready"}

    return app


app = create_app()


if __name__ == "__main__":
    logger.info("Server is running on http://localhost:%d", settings.port)
    uvicorn.run(
        "app.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )
