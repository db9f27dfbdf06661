from pathlib import Path
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from .core.config import Settings, get_settings
from .core.logging import configure_logging, logging_middleware

PACKAGE_DIR = Path(__file__).parent


def create_web_app(settings: Optional[Settings] = None) -> FastAPI:
    """Variante que só serve a página inicial estática"""
    settings = settings or get_settings()
    configure_logging(settings.LOG_LEVEL)

    templates_dir = Path(settings.TEMPLATES_DIR)
    if not templates_dir.is_absolute():
        templates_dir = PACKAGE_DIR / templates_dir
    if not templates_dir.is_dir():
        raise RuntimeError(f"Templates directory not found: {templates_dir}")
    templates = Jinja2Templates(directory=str(templates_dir))

    app = FastAPI(title=settings.PROJECT_NAME, version=settings.VERSION)
    app.middleware("http")(logging_middleware)

    @app.get("/", response_class=HTMLResponse)
    def index(request: Request):
        return templates.TemplateResponse(request, "views/index.html", {"title": "Main website"})

    return app


app = create_web_app()
