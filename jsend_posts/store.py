"""Post models and the in-memory post store."""

from __future__ import annotations

import threading
import uuid

from pydantic import BaseModel, Field

from jsend_posts.middleware.error_handler import PostNotFoundError


class CreatePost(BaseModel):
    """Request body for creating a post."""

    title: str = Field(..., min_length=1)
    body: str


class Post(BaseModel):
    """A stored blog post."""

    id: uuid.UUID = Field(default_factory=uuid.uuid4)
    title: str
    body: str


class PostStore:
    """Thread-safe in-memory mapping of post id to post.

    Sync endpoints run in FastAPI's thread pool, so every access goes through
    a lock.
    """

    def __init__(self) -> None:
        self._posts: dict[uuid.UUID, Post] = {}
        self._lock = threading.Lock()

    def list_all(self) -> list[Post]:
        with self._lock:
            return list(self._posts.values())

    def add(self, post: Post) -> Post:
        with self._lock:
            self._posts[post.id] = post
        return post

    def get(self, post_id: uuid.UUID) -> Post:
        with self._lock:
            post = self._posts.get(post_id)
        if post is None:
            raise PostNotFoundError(id="not found")
        return post

    def remove(self, post_id: uuid.UUID) -> Post:
        with self._lock:
            post = self._posts.pop(post_id, None)
        if post is None:
            raise PostNotFoundError(id="not found")
        return post

    def __len__(self) -> int:
        with self._lock:
            return len(self._posts)
