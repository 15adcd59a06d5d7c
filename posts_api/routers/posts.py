from __future__ import annotations
from typing import List, Optional
from fastapi import Depends, APIRouter, HTTPException, Query
from ..storage.memory import InMemoryStore
from ..di import get_store
from ..errors import PostError
from ..models import Post, PostCreate, PostUpdate, parse_limit

router = APIRouter(tags=["posts"])

def _http_error(e: PostError) -> HTTPException:
    return HTTPException(status_code=e.status_code, detail=e.message)

@router.get("/api/posts", response_model=List[Post])
async def list_posts(limit: Optional[str] = Query(None), store: InMemoryStore = Depends(get_store)) -> List[Post]:
    return await store.list_posts(parse_limit(limit))

@router.get("/api/posts/{post_id}", response_model=Post)
async def get_post(post_id: int, store: InMemoryStore = Depends(get_store)) -> Post:
    try: return await store.get_post(post_id)
    except PostError as e: raise _http_error(e)

@router.post("/api/posts", response_model=List[Post], status_code=201)
async def create_post(payload: Optional[PostCreate] = None, store: InMemoryStore = Depends(get_store)) -> List[Post]:
    try: return await store.create_post(payload.title if payload else None)
    except PostError as e: raise _http_error(e)

@router.api_route("/api/posts/{post_id}", methods=["PUT", "PATCH"], response_model=Post)
async def update_post(post_id: int, payload: Optional[PostUpdate] = None, store: InMemoryStore = Depends(get_store)) -> Post:
    try: return await store.update_post(post_id, payload.title if payload else None)
    except PostError as e: raise _http_error(e)

@router.delete("/api/posts/{post_id}", response_model=Post)
async def delete_post(post_id: int, store: InMemoryStore = Depends(get_store)) -> Post:
    try: return await store.delete_post(post_id)
    except PostError as e: raise _http_error(e)
