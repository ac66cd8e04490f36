from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Sort hook
    SORT_PARAM_KEY: str = "sort"  # key read from the params mapping
    SORT_STRICT: bool = False  # raise on malformed sort strings instead of ignoring them


settings = Settings()
