from __future__ import annotations
from fastapi import Request
from .storage.memory import InMemoryStore

# The store lives on app.state (set by main.create_app)
def get_store(request: Request) -> InMemoryStore:
    store = getattr(request.app.state, "store", None)
    if store is None:
        raise RuntimeError("Store not initialized")
    return store
