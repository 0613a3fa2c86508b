from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    app_title: str = "FitPath"
    log_level: str = "INFO"
    fitpath_api_key: str | None = None

    model_config = {"env_file": ".env", "extra": "ignore"}


settings = Settings()
