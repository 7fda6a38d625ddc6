from functools import lru_cache
from typing import List

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Настройки сайта документации"""
    site_title: str = "Synapse Framework Documentation"
    site_description: str = "Complete documentation for the Synapse TypeScript framework"

    host: str = "127.0.0.1"
    port: int = 3001
    output_dir: str = "public"

    log_level: str = "INFO"
    log_json: bool = False

    jwt_secret: str = "synapse-docs-dev-secret"
    jwt_algorithm: str = "HS256"
    access_token_expire_minutes: int = 30

    # Учетная запись администратора для внутреннего API
    admin_email: str = "admin@synapse.dev"
    admin_password: str = "ChangeMe123"

    cors_origins: List[str] = ["*"]

    model_config = {"env_file": ".env", "env_prefix": "SYNAPSE_DOCS_", "extra": "ignore"}


@lru_cache
def get_settings() -> Settings:
    """Настройки процесса, прочитанные из окружения"""
    return Settings()
