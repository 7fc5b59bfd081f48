from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    PROJECT_NAME: str = "Products API"

    # Database
    DATABASE_URL: str = "sqlite:///./products.db"
    CREATE_TABLES: bool = True
    SQL_ECHO: bool = False

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FILE: str | None = None

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 8080
    CORS_ORIGINS: list[str] = ["*"]

    # Pydantic v2 config
    model_config = SettingsConfigDict(
        env_file=".env",
        extra="allow"
    )


settings = Settings()
