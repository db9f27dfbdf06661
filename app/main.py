from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .api.v1 import router as api_router
from .core.config import Settings, get_settings
from .core.logging import configure_logging, logging_middleware
from .core.security import StaticCredentialVerifier
from .models import Post, User
from .store import RecordStore


async def bad_request_handler(request: Request, exc: RequestValidationError):
    # JSON malformado ou tipos errados viram 400, não 422
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": jsonable_encoder(exc.errors())},
    )


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or get_settings()
    configure_logging(settings.LOG_LEVEL)

    app = FastAPI(title=settings.PROJECT_NAME, version=settings.VERSION)

    # Stores em memória, um por instância da aplicação
    app.state.users = RecordStore[User]()
    app.state.posts = RecordStore[Post]()
    # Verificador do grupo /posts; troque por outro backend de identidade se preciso
    app.state.credential_verifier = StaticCredentialVerifier(settings.AUTH_USERNAME, settings.AUTH_PASSWORD)

    # Configurar CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    # Logging por último para ser o middleware mais externo
    app.middleware("http")(logging_middleware)

    app.add_exception_handler(RequestValidationError, bad_request_handler)
    app.include_router(api_router)
    return app


app = create_app()
