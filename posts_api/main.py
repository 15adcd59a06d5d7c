from __future__ import annotations
import logging
from typing import Any, Dict, Optional
from fastapi import Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware
from .core.config import APP_TITLE, APP_VERSION, CORS_ALLOW_ORIGINS, SEED_POSTS, LOG_LEVEL, HOST, PORT
from .core.logging import configure_logging
from .storage.memory import InMemoryStore
from .di import get_store
from .routers import posts as posts_router

logger = logging.getLogger(__name__)

def create_app(store: Optional[InMemoryStore] = None) -> FastAPI:
    configure_logging(LOG_LEVEL)
    app = FastAPI(
        title=APP_TITLE,
        version=APP_VERSION,
        description="In-memory posts collection with list, get, create, update and delete.",
        docs_url="/docs", redoc_url="/redoc", openapi_url="/openapi.json",
    )

    app.add_middleware(CORSMiddleware, allow_origins=CORS_ALLOW_ORIGINS or ["*"], allow_credentials=True, allow_methods=["*"], allow_headers=["*"])

    if store is None:
        store = InMemoryStore.seeded() if SEED_POSTS else InMemoryStore()
    app.state.store = store
    app.include_router(posts_router.router)

    @app.get("/healthz/live", tags=["health"])
    async def liveness() -> Dict[str, str]:
        return {"status": "live"}

    @app.get("/healthz/ready", tags=["health"])
    async def readiness(store: InMemoryStore = Depends(get_store)) -> Dict[str, Any]:
        return {"status": "ready", "posts": await store.count()}

    logger.info("%s %s app created", APP_TITLE, APP_VERSION)
    return app

app = create_app()

if __name__ == "__main__":
    import uvicorn
    uvicorn.run("posts_api.main:app", host=HOST, port=PORT)
