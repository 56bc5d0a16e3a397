"""FastAPI application factory.

The store and the LLM client live on ``app.state`` for the lifetime of the
process; route handlers reach them through the dependencies in api.routes.
"""
import logging
import sqlite3
from pathlib import Path
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse, JSONResponse

from config import Settings, resolve_database_url
from db import Store, StoreError
from agent.llm import get_llm_client
from agent.llm.base import LLMClient
from api.routes import router

logger = logging.getLogger(__name__)


def create_app(
    settings: Optional[Settings] = None,
    store: Optional[Store] = None,
    llm: Optional[LLMClient] = None,
) -> FastAPI:
    if settings is None:
        from config import settings

    if store is None:
        store = Store.from_url(resolve_database_url(settings))
        init_store(store)
    if llm is None:
        llm = get_llm_client(settings)

    app = FastAPI(title="Mensentaal Machine")
    app.state.settings = settings
    app.state.store = store
    app.state.llm = llm

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.include_router(router)
    _mount_frontend(app, Path(settings.frontend_dist))
    return app


def init_store(store: Store) -> bool:
    """Create tables; a broken database is logged and the server starts anyway.

    Dictionary reads during simplification already fall back to an empty
    dictionary, so only the CRUD routes suffer.
    """
    try:
        store.init_db()
    except (StoreError, sqlite3.Error):
        logger.exception("Database initialization failed at %s", store.path)
        return False
    logger.info("Database initialized at %s", store.path)
    return True


def _mount_frontend(app: FastAPI, dist: Path) -> None:
    """Serve the built single-page app; unknown paths fall back to index.html."""
    root = dist.resolve()

    @app.get("/{full_path:path}", include_in_schema=False)
    async def frontend(full_path: str):
        if full_path == "api" or full_path.startswith("api/"):
            return JSONResponse(status_code=404, content={"message": "Not found"})

        candidate = (root / full_path).resolve()
        if full_path and candidate.is_relative_to(root) and candidate.is_file():
            return FileResponse(candidate)

        index = root / "index.html"
        if index.is_file():
            return FileResponse(index)
        return JSONResponse(status_code=404, content={"message": "Frontend not built"})
