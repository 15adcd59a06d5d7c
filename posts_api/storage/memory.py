from __future__ import annotations
import asyncio, copy, logging
from typing import Any, Dict, Iterable, List, Optional
from ..errors import PostNotFound, PostValidationError
from ..models import Post, SEED_POSTS

logger = logging.getLogger(__name__)

class InMemoryStore:
    """Ordered, process-local collection of posts.

    Every operation runs under one asyncio lock so lookups and the mutation
    that follows them cannot interleave with another request.
    Ids come from a counter and are never handed out twice, even after deletes.
    """

    def __init__(self, seed: Optional[Iterable[Dict[str, Any]]] = None):
        self._seed: List[Dict[str, Any]] = [dict(d) for d in (seed or [])]
        self._posts: List[Dict[str, Any]] = []
        self._next_id = 1
        self._lock = asyncio.Lock()
        self._load_seed()

    @classmethod
    def seeded(cls) -> "InMemoryStore":
        return cls(SEED_POSTS)

    def _load_seed(self) -> None:
        self._posts = copy.deepcopy(self._seed)
        self._next_id = max((d["id"] for d in self._posts), default=0) + 1

    def _find(self, post_id: int) -> Optional[Dict[str, Any]]:
        for doc in self._posts:
            if doc["id"] == post_id: return doc
        return None

    async def reset(self) -> None:
        async with self._lock:
            self._load_seed()

    async def count(self) -> int:
        async with self._lock:
            return len(self._posts)

    async def list_posts(self, limit: Optional[int] = None) -> List[Post]:
        async with self._lock:
            docs = self._posts[:limit] if limit and limit > 0 else self._posts
            return [Post(**d) for d in docs]

    async def get_post(self, post_id: int) -> Post:
        async with self._lock:
            doc = self._find(post_id)
            if not doc:
                logger.warning("post %s not found", post_id)
                raise PostNotFound(f"A post with the id of {post_id} was not found")
            return Post(**doc)

    async def create_post(self, title: Optional[str]) -> List[Post]:
        async with self._lock:
            if not title: raise PostValidationError("Please include a title")
            post = Post(id=self._next_id, title=title)
            self._next_id += 1
            self._posts.append(post.model_dump())
            logger.info("created post %s", post.id)
            return [Post(**d) for d in self._posts]

    async def update_post(self, post_id: int, title: Optional[str]) -> Post:
        async with self._lock:
            doc = self._find(post_id)
            if not doc:
                logger.warning("post %s not found for update", post_id)
                raise PostNotFound(f"Post with {post_id} is not found")
            if not title: raise PostValidationError("Please include a title")
            doc["title"] = title
            logger.info("updated post %s", post_id)
            return Post(**doc)

    async def delete_post(self, post_id: int) -> Post:
        async with self._lock:
            doc = self._find(post_id)
            if not doc:
                logger.warning("post %s not found for delete", post_id)
                raise PostNotFound(f"Post with {post_id} is not found")
            self._posts = [d for d in self._posts if d["id"] != post_id]
            logger.info("deleted post %s", post_id)
            return Post(**doc)
