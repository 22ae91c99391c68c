from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    PROJECT_NAME: str = "Supermarket MCP"
    PROJECT_VERSION: str = "1.0.0"
    DATABASE_URL: str = "sqlite:///./supermarket.db"
    DATABASE_ECHO: bool = False

    # Uvicorn
    HOST: str = "0.0.0.0"
    PORT: int = 8000

    LOG_LEVEL: str = "INFO"

    class Config:
        env_file = ".env"
        extra = "ignore"


settings = Settings()
