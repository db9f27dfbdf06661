from fastapi import APIRouter
from .users import router as users_router
from .posts import router as posts_router

router = APIRouter()

# Rotas de usuários são abertas
router.include_router(users_router, prefix="/users", tags=["users"])

# Rotas de posts exigem basic auth (ver BasicAuthRoute em posts.py)
router.include_router(posts_router, prefix="/posts", tags=["posts"])

@router.get("/health", tags=["health"])
def health_check():
    return {"status": "healthy"}
