import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Request, status
from pydantic import BaseModel

from ...models import User
from ...store import RecordStore
from ..deps import get_user_store, parse_body, parse_record_id

router = APIRouter()
logger = logging.getLogger("app.api.users")

# Campos ausentes no JSON viram string vazia e são barrados pela validação
class UserCreate(BaseModel):
    username: str = ""
    email: str = ""
    password: str = ""

class UserUpdate(BaseModel):
    username: str = ""
    email: str = ""
    password: str = ""


def validate_user_input(user: UserCreate) -> bool:
    return user.username != "" and user.email != "" and user.password != ""


@router.get("", response_model=List[User])
def get_users(users: RecordStore[User] = Depends(get_user_store)):
    """
    Retorna lista de usuários
    """
    all_users = users.list()
    if not all_users:
        raise HTTPException(status_code=404, detail="No users found")
    return all_users

@router.post("", response_model=User, status_code=status.HTTP_201_CREATED)
def create_user(user: UserCreate, users: RecordStore[User] = Depends(get_user_store)):
    """
    Cria um novo usuário
    """
    if not validate_user_input(user):
        logger.warning("Rejected user input: empty field")
        raise HTTPException(status_code=400, detail="Invalid user input")

    # Username só é checado na criação, não no update
    created = users.add(User(**user.model_dump()), unique=lambda u: u.username == user.username)
    if created is None:
        logger.warning("Rejected duplicate username %r", user.username)
        raise HTTPException(status_code=409, detail="User already exists")

    logger.info("Created user %d", created.id)
    return created

@router.put("/{user_id}", response_model=User)
async def update_user(user_id: str, request: Request, users: RecordStore[User] = Depends(get_user_store)):
    """
    Sobrescreve username, email e senha de um usuário
    """
    # Procura o usuário antes de decodificar o corpo: id inexistente é 404
    record_id = parse_record_id(user_id)
    if record_id is None or users.get(record_id) is None:
        raise HTTPException(status_code=404, detail="User not found")

    user = parse_body(UserUpdate, await request.body())
    updated = users.update(record_id, user.model_dump())
    if updated is None:
        raise HTTPException(status_code=404, detail="User not found")
    logger.info("Updated user %d", updated.id)
    return updated

@router.delete("/{user_id}")
def delete_user(user_id: str, users: RecordStore[User] = Depends(get_user_store)):
    record_id = parse_record_id(user_id)
    if record_id is None or not users.delete(record_id):
        raise HTTPException(status_code=404, detail="User not found")
    logger.info("Deleted user %d", record_id)
    return {"message": "User deleted"}
