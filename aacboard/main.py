import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from importlib.metadata import version as pkg_version

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from aacboard.api import cards_router, categories_router, health_router
from aacboard.api.errors import register_exception_handlers
from aacboard.config import settings
from aacboard.store.catalog import CatalogStore

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Create the catalog store on startup unless one was supplied."""
    if getattr(app.state, "store", None) is None:
        app.state.store = CatalogStore(seed=settings.seed_catalog)
    logger.info("Catalog store ready")
    yield


def create_app(store: CatalogStore | None = None) -> FastAPI:
    """
    Build the application.

    Args:
        store: Catalog store to serve. When None, one is created at startup
            and held for the process lifetime.
    """
    app = FastAPI(
        title=settings.app_name,
        debug=settings.debug,
        version=pkg_version("aacboard"),
        lifespan=lifespan,
    )
    app.state.store = store

    app.include_router(categories_router)
    app.include_router(cards_router)
    app.include_router(health_router)

    register_exception_handlers(app)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    return app


app = create_app()


def run() -> None:
    """CLI entry point for serving the board API."""
    import uvicorn

    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    run()
