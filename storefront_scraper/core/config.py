from typing import Optional
from pydantic_settings import BaseSettings
from pydantic import Field


class Settings(BaseSettings):
    # Storefront client
    request_timeout: float = Field(30.0, env="REQUEST_TIMEOUT")
    user_agent: Optional[str] = Field(None, env="USER_AGENT")
    page_size: int = Field(250, env="PAGE_SIZE")
    page_delay: float = Field(0.1, env="PAGE_DELAY")
    max_pages: Optional[int] = Field(None, env="MAX_PAGES")

    # API
    api_host: str = Field("0.0.0.0", env="API_HOST")
    api_port: int = Field(8000, env="API_PORT")
    debug: bool = Field(False, env="DEBUG")
    log_level: str = Field("INFO", env="LOG_LEVEL")

    # App
    app_name: str = Field("Storefront Scraper API", env="APP_NAME")
    version: str = Field("1.0.0", env="VERSION")

    class Config:
        env_file = ".env"
        case_sensitive = False


settings = Settings()
