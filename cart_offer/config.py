from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import List

class Settings(BaseSettings):
    SEGMENT_SERVICE_URL : str = "http://localhost:1080"
    SEGMENT_LOOKUP_TIMEOUT : float = 5.0

    HOST : str = "0.0.0.0"
    PORT : int = 9001

    LOG_LEVEL : str = "INFO"
    CORS_ORIGINS : List[str] = ["http://localhost:3000", "http://localhost:8000", "http://127.0.0.1:8000"]

    model_config = SettingsConfigDict(
        env_file = ".env",
        extra = "ignore"
    )


Config = Settings()
