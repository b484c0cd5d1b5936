# boutique/main.py
from fastapi import FastAPI
from contextlib import asynccontextmanager
import logging

from boutique.config.settings import settings
from boutique.config.database import Base, SessionLocal, engine
from boutique.core.logging import setup_logging
from boutique.core.middleware import setup_middleware
from boutique.api.error_handlers import register_exception_handlers
from boutique.api.v1.router import api_router
from boutique.modules.users.service import UserService
# Registers the models on Base.metadata
from boutique.shared.database import models  # noqa: F401

logger = logging.getLogger(__name__)

def bootstrap_database():
    """Create missing tables and the start-up admin account"""
    if settings.create_tables:
        Base.metadata.create_all(bind=engine)

    if settings.admin_email and settings.admin_password:
        db = SessionLocal()
        try:
            UserService(db).ensure_admin(
                settings.admin_email, settings.admin_password, settings.admin_name
            )
        finally:
            db.close()

@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup
    setup_logging()
    logger.info(f"{settings.app_name} {settings.version} starting")
    logger.info(f"Environment: {'development' if settings.debug else 'production'}")
    logger.info(f"Database: {settings.database_url.split('@')[1] if '@' in settings.database_url else settings.database_url}")
    bootstrap_database()

    yield

    # Shutdown
    logger.info(f"{settings.app_name} shutting down")

app = FastAPI(
    title=settings.app_name,
    version=settings.version,
    description="Boutique management: categories, clients, phones, sales and users",
    lifespan=lifespan
)

setup_middleware(app)
register_exception_handlers(app)

app.include_router(api_router, prefix=settings.api_prefix)

@app.get("/health")
def health_check():
    return {
        "status": "healthy",
        "version": settings.version,
        "app": settings.app_name,
        "environment": "production" if not settings.debug else "development"
    }

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "boutique.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug
    )
