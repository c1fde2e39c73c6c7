import logging
import secrets
from datetime import datetime, timezone

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.auth.routes import router as auth_router
from app.auth.service import ensure_admin
from app.auth.tokens import TokenCodec
from app.config import Settings, settings as default_settings
from app.content.routes import routers as content_routers
from app.db.session import Database
from app.logging_setup import configure_logging
from app.search.routes import router as search_router
from app.users.routes import router as users_router

logger = logging.getLogger("portfolio.app")


def _signing_secret(settings: Settings) -> str:
    if settings.secret_key:
        return settings.secret_key
    if settings.is_prod_like:
        raise RuntimeError("SECRET_KEY must be set when APP_ENV is production-like")
    logger.warning("SECRET_KEY not set; using a random key, tokens will not survive a restart")
    return secrets.token_urlsafe(32)


def init_db(app: FastAPI) -> None:
    """Create tables and seed the admin account; runs once at startup."""
    settings = app.state.settings
    app.state.database.create_all()
    if settings.admin_email and settings.admin_password:
        with app.state.database.session() as db:
            ensure_admin(db, settings.admin_email, settings.admin_password, settings.admin_fullname)


def create_app(settings: Settings | None = None, database: Database | None = None) -> FastAPI:
    settings = settings or default_settings
    configure_logging(settings.log_level)

    app = FastAPI(title=settings.app_name)
    app.state.settings = settings
    app.state.tokens = TokenCodec(_signing_secret(settings), settings.access_token_expire_minutes)
    app.state.database = database or Database(settings.database_url)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins,
        allow_methods=settings.cors_allow_methods,
        allow_headers=settings.cors_allow_headers,
    )

    @app.exception_handler(StarletteHTTPException)
    async def http_error(request: Request, exc: StarletteHTTPException):
        return JSONResponse({"error": exc.detail}, status_code=exc.status_code, headers=exc.headers)

    @app.exception_handler(SQLAlchemyError)
    async def store_error(request: Request, exc: SQLAlchemyError):
        logger.exception("Store error on %s %s", request.method, request.url.path)
        return JSONResponse({"error": "Lỗi server"}, status_code=500)

    app.include_router(auth_router)
    app.include_router(users_router)
    for router in content_routers:
        app.include_router(router)
    app.include_router(search_router)

    @app.on_event("startup")
    def on_startup():
        init_db(app)

    @app.on_event("shutdown")
    def on_shutdown():
        app.state.database.dispose()

    @app.get("/", tags=["root"])
    def root():
        return {"name": settings.app_name, "env": settings.app_env}

    @app.get("/api/health", tags=["health"])
    def health():
        try:
            app.state.database.ping()
        except SQLAlchemyError:
            logger.exception("Health check could not reach the database")
            return JSONResponse(
                {"status": "unhealthy", "error": "Database connection failed"}, status_code=500
            )
        return {"status": "healthy", "timestamp": datetime.now(timezone.utc).isoformat()}

    return app

app = create_app()
