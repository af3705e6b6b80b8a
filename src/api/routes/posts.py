"""Post routes. Every endpoint requires a token.

Endpoints:
- POST /posts, GET /posts, GET /posts/{post_id}, DELETE /posts/{post_id}
- PUT /posts/like/{post_id}, PUT /posts/unlike/{post_id}
- POST /posts/comment/{post_id}, DELETE /posts/comment/{post_id}/{comment_id}
"""

import logging

from fastapi import APIRouter, Depends, HTTPException

from api.dependencies import get_post_repo, get_user_repo
from api.models import (
    CommentResponse,
    LikeResponse,
    MessageResponse,
    PostResponse,
    TextRequest,
)
from api.security import get_current_user_id
from domain.model.errors import ConflictError, NotFoundError, PermissionDeniedError
from domain.model.post import Comment, Like, Post
from port.post_repository import PostRepository
from port.user_repository import UserRepository
from services import post_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/posts", tags=["posts"])


def _comment_response(comment: Comment) -> CommentResponse:
    return CommentResponse(
        id=comment.id,
        user_id=comment.user_id,
        text=comment.text,
        name=comment.name,
        avatar=comment.avatar,
        created_at=comment.created_at,
    )


def _likes_response(likes: list[Like]) -> list[LikeResponse]:
    return [LikeResponse(user_id=like.user_id) for like in likes]


def _to_response(post: Post) -> PostResponse:
    """Convert domain Post to API PostResponse."""
    return PostResponse(
        id=post.id,
        user_id=post.user_id,
        text=post.text,
        name=post.name,
        avatar=post.avatar,
        likes=_likes_response(post.likes),
        comments=[_comment_response(c) for c in post.comments],
        created_at=post.created_at,
    )


@router.post("", response_model=PostResponse)
async def create_post(
    request: TextRequest,
    user_id: str = Depends(get_current_user_id),
    repo: PostRepository = Depends(get_post_repo),
    user_repo: UserRepository = Depends(get_user_repo),
):
    try:
        post = post_service.create(repo, user_repo, user_id, request.text)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return _to_response(post)


@router.get("", response_model=list[PostResponse])
async def list_posts(
    user_id: str = Depends(get_current_user_id),
    repo: PostRepository = Depends(get_post_repo),
):
    """All posts, newest first."""
    return [_to_response(p) for p in post_service.list_all(repo)]


@router.get("/{post_id}", response_model=PostResponse)
async def get_post(
    post_id: str,
    user_id: str = Depends(get_current_user_id),
    repo: PostRepository = Depends(get_post_repo),
):
    try:
        post = post_service.get_by_id(repo, post_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return _to_response(post)


@router.delete("/{post_id}", response_model=MessageResponse)
async def delete_post(
    post_id: str,
    user_id: str = Depends(get_current_user_id),
    repo: PostRepository = Depends(get_post_repo),
):
    try:
        post_service.delete(repo, user_id, post_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except PermissionDeniedError as e:
        raise HTTPException(status_code=401, detail=str(e))

    return MessageResponse(message="Post removed")


# ── likes ────────────────────────────────────────────────


@router.put("/like/{post_id}", response_model=list[LikeResponse])
async def like_post(
    post_id: str,
    user_id: str = Depends(get_current_user_id),
    repo: PostRepository = Depends(get_post_repo),
):
    try:
        likes = post_service.like(repo, user_id, post_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except ConflictError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return _likes_response(likes)


@router.put("/unlike/{post_id}", response_model=list[LikeResponse])
async def unlike_post(
    post_id: str,
    user_id: str = Depends(get_current_user_id),
    repo: PostRepository = Depends(get_post_repo),
):
    try:
        likes = post_service.unlike(repo, user_id, post_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except ConflictError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return _likes_response(likes)


# ── comments ─────────────────────────────────────────────


@router.post("/comment/{post_id}", response_model=list[CommentResponse])
async def add_comment(
    post_id: str,
    request: TextRequest,
    user_id: str = Depends(get_current_user_id),
    repo: PostRepository = Depends(get_post_repo),
    user_repo: UserRepository = Depends(get_user_repo),
):
    try:
        comments = post_service.add_comment(repo, user_repo, user_id, post_id, request.text)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return [_comment_response(c) for c in comments]


@router.delete("/comment/{post_id}/{comment_id}", response_model=list[CommentResponse])
async def remove_comment(
    post_id: str,
    comment_id: str,
    user_id: str = Depends(get_current_user_id),
    repo: PostRepository = Depends(get_post_repo),
):
    try:
        comments = post_service.remove_comment(repo, user_id, post_id, comment_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except PermissionDeniedError as e:
        raise HTTPException(status_code=401, detail=str(e))
    return [_comment_response(c) for c in comments]
