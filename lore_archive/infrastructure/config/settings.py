from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    DATABASE_URL: str
    # Upper bound applied to the ``limit`` query parameter of list endpoints; 0 disables it.
    MAX_PAGE_LIMIT: int = 100
    AUTO_CREATE_TABLES: bool = True
