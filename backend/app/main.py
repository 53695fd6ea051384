"""FastAPI application factory."""

import logging
from contextlib import asynccontextmanager
from collections.abc import AsyncIterator
from pathlib import Path
from urllib.parse import urlparse

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from app.config import get_settings
from app.application.services import (
    AssetManager,
    ContactService,
    SeoService,
    SiteSeeder,
    ThemeService,
    load_seed_file,
)
from app.infrastructure.database import Base, engine
from app.infrastructure.database.session import async_session_factory
from app.infrastructure.database.repositories import (
    SQLAlchemyContactInfoRepository,
    SQLAlchemySeoPageRepository,
    SQLAlchemyThemeSettingsRepository,
)
from app.infrastructure.dependencies import LOGO_FOLDER, default_theme
from app.infrastructure.logging.log_config import setup_logging
from app.infrastructure.storage.local_file_storage import LocalFileStorage
from app.presentation.api.errors import register_exception_handlers
from app.presentation.api.router import router as api_router

logger = logging.getLogger(__name__)


async def _ensure_database_exists() -> None:
    """Create the database if it does not yet exist.

    For PostgreSQL, connects to the default ``postgres`` maintenance database,
    checks for the target database name, and issues ``CREATE DATABASE`` when
    missing. For SQLite, creates the parent directory of the database file.
    """
    settings = get_settings()
    url = settings.database_url

    if url.startswith("sqlite"):
        db_path = url.split(":///", 1)[-1]
        if db_path and db_path != ":memory:":
            Path(db_path).parent.mkdir(parents=True, exist_ok=True)
        return

    if not url.startswith("postgresql"):
        return

    import asyncpg

    parsed = urlparse(url)
    db_name = parsed.path.lstrip("/")
    if not db_name:
        return

    # Build a connection URL pointing at the default 'postgres' database
    maintenance_url = url.rsplit("/", 1)[0] + "/postgres"

    try:
        conn = await asyncpg.connect(maintenance_url)
        try:
            exists = await conn.fetchval(
                "SELECT 1 FROM pg_database WHERE datname = $1", db_name
            )
            if not exists:
                # CREATE DATABASE cannot run inside a transaction block
                await conn.execute(f'CREATE DATABASE "{db_name}"')
                logger.info("Created database '%s'", db_name)
            else:
                logger.debug("Database '%s' already exists", db_name)
        finally:
            await conn.close()
    except Exception as exc:
        logger.warning("Could not auto-create database '%s': %s", db_name, exc)


async def _seed_site_content() -> None:
    """Insert default SEO pages, contact details and theme when absent.

    Existing records are left untouched, so this runs on every startup.
    """
    settings = get_settings()
    try:
        data = load_seed_file(Path(settings.seed_file))
        async with async_session_factory() as session:
            seeder = SiteSeeder(
                seo=SeoService(SQLAlchemySeoPageRepository(session)),
                contact=ContactService(SQLAlchemyContactInfoRepository(session)),
                theme=ThemeService(
                    SQLAlchemyThemeSettingsRepository(session),
                    AssetManager(LocalFileStorage(settings.public_dir), LOGO_FOLDER),
                    defaults=default_theme(settings),
                ),
            )
            await seeder.seed(data)
            await session.commit()
    except Exception:
        logger.exception("Seeding default site content failed; starting without it")


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan — create tables, public directory and default content."""
    settings = get_settings()
    setup_logging()

    # 0. Ensure the database exists (auto-create if missing)
    await _ensure_database_exists()

    # 1. Create all database tables
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    # 2. Ensure the public asset directory exists
    Path(settings.public_dir).mkdir(parents=True, exist_ok=True)

    # 3. Seed default SEO pages, contact details and theme
    await _seed_site_content()

    yield

    await engine.dispose()


def create_app() -> FastAPI:
    """Factory function that builds and configures the FastAPI application."""
    settings = get_settings()

    app = FastAPI(
        title=settings.app_title,
        version=settings.app_version,
        lifespan=lifespan,
    )

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    # Mount API routes
    app.include_router(api_router)

    # Uploaded assets are served from their public paths (/testimonials/..., /brochures/...)
    app.mount(
        "/",
        StaticFiles(directory=settings.public_dir, check_dir=False),
        name="public",
    )

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "app.main:app",
        host="0.0.0.0",
        port=8020,
        reload=True,
    )
