from pydantic_settings import BaseSettings
from functools import lru_cache

class Settings(BaseSettings):
    # Configurações básicas
    PROJECT_NAME: str = "Social CRUD API"
    VERSION: str = "1.0.0"

    # Servidor
    HOST: str = "0.0.0.0"
    PORT: int = 8080
    LOG_LEVEL: str = "INFO"

    # Credencial única do grupo de rotas protegido (/posts)
    AUTH_USERNAME: str = "admin"
    AUTH_PASSWORD: str = "password123"  # Em produção, use um backend de identidade real

    # Templates da variante web
    TEMPLATES_DIR: str = "templates"

    class Config:
        case_sensitive = True
        env_file = ".env"

@lru_cache()
def get_settings() -> Settings:
    return Settings()
