from datetime import datetime
from typing import Optional
from pydantic import BaseModel

# Registros mantidos em memória pelos stores (sem banco de dados)

class User(BaseModel):
    id: int = 0
    username: str
    email: str
    password: str  # Armazenada em texto puro, nunca faça isso em produção!
    created: Optional[datetime] = None

class Post(BaseModel):
    id: int = 0
    title: str
    content: str
    user_id: int
    created: Optional[datetime] = None
