from typing import List

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    cors_origins: List[str] = ["http://localhost:5173"]
    max_text_chars: int = 100_000
    log_level: str = "INFO"

    class Config:
        env_file = ".env"


settings = Settings()
