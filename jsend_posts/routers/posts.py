"""Post endpoints.

- GET    /posts: list all posts
- POST   /posts: create a post, returns its id
- GET    /posts/{post_id}: fetch one post
- DELETE /posts/{post_id}: delete one post
"""

from __future__ import annotations

import logging
import uuid

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from jsend import success
from jsend_posts.middleware.error_handler import jsend_response
from jsend_posts.store import CreatePost, Post, PostStore

logger = logging.getLogger(__name__)


def create_posts_router(*, store: PostStore) -> APIRouter:
    """Factory that creates the posts router bound to ``store``."""

    posts_router = APIRouter(prefix="/posts", tags=["posts"])

    @posts_router.get("")
    def list_posts() -> JSONResponse:
        posts = [post.model_dump(mode="json") for post in store.list_all()]
        return jsend_response(success({"posts": posts}))

    @posts_router.post("")
    def create_post(body: CreatePost) -> JSONResponse:
        post = store.add(Post(title=body.title, body=body.body))
        logger.info("Created post %s", post.id)
        return jsend_response(success({"id": str(post.id)}))

    @posts_router.get("/{post_id}")
    def get_post(post_id: uuid.UUID) -> JSONResponse:
        post = store.get(post_id)
        return jsend_response(success({"post": post.model_dump(mode="json")}))

    @posts_router.delete("/{post_id}")
    def delete_post(post_id: uuid.UUID) -> JSONResponse:
        store.remove(post_id)
        logger.info("Deleted post %s", post_id)
        return jsend_response(success(None))

    return posts_router
