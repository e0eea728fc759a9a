"""
Application entrypoint.

    uvicorn subscriptions_api.main:app --reload
"""

import logging
import os

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from subscriptions_api.database import init_db
from subscriptions_api.error_handlers import register_exception_handlers
from subscriptions_api.logging_config import setup_logging
from subscriptions_api.routes import subscriptions, users

APP_NAME = "Subscriptions API"
APP_VERSION = "1.0.0"

logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    """Build the FastAPI app: logging, CORS, routers, error handlers, startup hook"""
    setup_logging(os.getenv("LOG_LEVEL", "INFO"), os.getenv("LOG_FILE") or None)

    app = FastAPI(title=APP_NAME, version=APP_VERSION)

    cors_origins = [
        "http://localhost:3000",
        "http://127.0.0.1:3000",
    ]
    extra = os.getenv("CORS_ORIGINS", "")
    if extra:
        cors_origins.extend(o.strip() for o in extra.split(",") if o.strip())

    app.add_middleware(
        CORSMiddleware,
        allow_origins=cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(users.router, tags=["users"])
    app.include_router(subscriptions.router, tags=["subscriptions"])

    register_exception_handlers(app)

    @app.on_event("startup")
    def on_startup():
        init_db()
        logger.info("%s %s started with %d routes", APP_NAME, APP_VERSION, len(app.routes))

    @app.get("/health")
    def health_check():
        """Liveness probe"""
        return {"app_name": APP_NAME, "version": APP_VERSION, "status": "healthy"}

    return app


app = create_app()
