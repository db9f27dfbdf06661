import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Request, status
from pydantic import BaseModel

from ...core.security import BasicAuthRoute
from ...models import Post
from ...store import RecordStore
from ..deps import get_post_store, parse_body, parse_record_id

router = APIRouter(route_class=BasicAuthRoute)
logger = logging.getLogger("app.api.posts")

class PostCreate(BaseModel):
    title: str = ""
    content: str = ""
    user_id: int = 0  # Não é validado contra os usuários existentes

class PostUpdate(BaseModel):
    title: str = ""
    content: str = ""


def validate_post_input(post: PostCreate) -> bool:
    return post.title != "" and post.content != ""


@router.get("", response_model=List[Post])
def get_posts(posts: RecordStore[Post] = Depends(get_post_store)):
    all_posts = posts.list()
    if not all_posts:
        raise HTTPException(status_code=404, detail="No posts found")
    return all_posts

@router.post("", response_model=Post, status_code=status.HTTP_201_CREATED)
def create_post(post: PostCreate, posts: RecordStore[Post] = Depends(get_post_store)):
    """
    Cria um novo post (sem checagem de duplicados)
    """
    if not validate_post_input(post):
        logger.warning("Rejected post input: empty title or content")
        raise HTTPException(status_code=400, detail="Invalid post input")

    created = posts.add(Post(**post.model_dump()))
    logger.info("Created post %d for user %d", created.id, created.user_id)
    return created

@router.put("/{post_id}", response_model=Post)
async def update_post(post_id: str, request: Request, posts: RecordStore[Post] = Depends(get_post_store)):
    """
    Sobrescreve título e conteúdo; o dono do post não muda
    """
    record_id = parse_record_id(post_id)
    if record_id is None or posts.get(record_id) is None:
        raise HTTPException(status_code=404, detail="Post not found")

    post = parse_body(PostUpdate, await request.body())
    updated = posts.update(record_id, post.model_dump())
    if updated is None:
        raise HTTPException(status_code=404, detail="Post not found")
    logger.info("Updated post %d", updated.id)
    return updated

@router.delete("/{post_id}")
def delete_post(post_id: str, posts: RecordStore[Post] = Depends(get_post_store)):
    record_id = parse_record_id(post_id)
    if record_id is None or not posts.delete(record_id):
        raise HTTPException(status_code=404, detail="Post not found")
    logger.info("Deleted post %d", record_id)
    return {"message": "Post deleted"}
