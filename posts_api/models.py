from __future__ import annotations
import re
from typing import Any, Dict, List, Optional
from pydantic import BaseModel, ConfigDict

SEED_POSTS: List[Dict[str, Any]] = [
    {"id": 1, "title": "Post 1"},
    {"id": 2, "title": "Post 2"},
    {"id": 3, "title": "Post 3"},
]

class Post(BaseModel):
    model_config = ConfigDict(from_attributes=True)
    id: int
    title: str

class PostCreate(BaseModel):
    title: Optional[str] = None

class PostUpdate(BaseModel):
    title: Optional[str] = None

_LEADING_INT = re.compile(r"^\s*([+-]?[0-9]+)")

def parse_limit(raw: Optional[str]) -> Optional[int]:
    """Read a ``limit`` query value the lenient way: leading digits win, "2abc" -> 2.

    Returns None when nothing usable is there or the value is not positive.
    """
    if raw is None: return None
    m = _LEADING_INT.match(raw)
    if not m: return None
    # past the int digit cap the value dwarfs any collection, so no limit
    try: n = int(m.group(1))
    except ValueError: return None
    return n if n > 0 else None
