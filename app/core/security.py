import secrets
from typing import Callable, Protocol

from fastapi import HTTPException, Request, status
from fastapi.routing import APIRoute
from fastapi.security import HTTPBasic

basic_auth = HTTPBasic(auto_error=False)


class CredentialVerifier(Protocol):
    def verify(self, username: str, password: str) -> bool:
        ...


class StaticCredentialVerifier:
    """Aceita apenas o par usuário/senha configurado"""

    def __init__(self, username: str, password: str):
        self.username = username
        self.password = password

    def verify(self, username: str, password: str) -> bool:
        # compare_digest nos dois campos, sem curto-circuito
        user_ok = secrets.compare_digest(username.encode(), self.username.encode())
        password_ok = secrets.compare_digest(password.encode(), self.password.encode())
        return user_ok and password_ok


async def require_basic_auth(request: Request) -> str:
    """
    Valida o header Authorization: Basic de cada request.
    Não existe sessão nem token, toda request é checada de novo.
    O verificador fica em app.state.credential_verifier.
    """
    credentials = await basic_auth(request)
    verifier: CredentialVerifier = request.app.state.credential_verifier
    if credentials is None or not verifier.verify(credentials.username, credentials.password):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="unauthorized",
            headers={"WWW-Authenticate": "Basic"},
        )
    return credentials.username


class BasicAuthRoute(APIRoute):
    """Rota que checa as credenciais antes de ler o corpo da request"""

    def get_route_handler(self) -> Callable:
        handler = super().get_route_handler()

        async def auth_first_handler(request: Request):
            await require_basic_auth(request)
            return await handler(request)

        return auth_first_handler
