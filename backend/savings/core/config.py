from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    database_url: str = "sqlite+pysqlite:///./savings.db"
    cors_origins: str = "http://localhost:3000"

    timezone: str = "UTC"
    log_level: str = "INFO"
    auto_create_tables: bool = True

    class Config:
        env_prefix = ""
        case_sensitive = False
        env_file = ".env"

settings = Settings()
