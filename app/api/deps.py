from typing import Optional, Type, TypeVar

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from pydantic import BaseModel, ValidationError

from ..models import Post, User
from ..store import RecordStore

Body = TypeVar("Body", bound=BaseModel)


def get_user_store(request: Request) -> RecordStore[User]:
    return request.app.state.users


def get_post_store(request: Request) -> RecordStore[Post]:
    return request.app.state.posts


def parse_record_id(raw: str) -> Optional[int]:
    """Ids de path só casam com a forma decimal do id inteiro"""
    if not (raw.isascii() and raw.isdigit()) or str(int(raw)) != raw:
        return None
    return int(raw)


def parse_body(model: Type[Body], raw: bytes) -> Body:
    """Decodifica o corpo JSON; erros viram o mesmo 400 dos demais endpoints"""
    try:
        return model.model_validate_json(raw)
    except ValidationError as e:
        raise RequestValidationError(e.errors(include_url=False))
