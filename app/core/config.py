from pydantic_settings import BaseSettings
from pydantic import Field


class Settings(BaseSettings):
    # Окружение: production, development, testing
    ENV: str = Field(
        "production",
        description="Application environment",
    )
    DEBUG: bool = Field(
        False,
        description="Turn on debug mode (reload, detailed errors)",
    )

    # Общие параметры API
    API_PREFIX: str = Field(
        "/api",
        description="Base prefix for all API routes",
    )
    APP_NAME: str = Field(
        "City Info API",
        description="Application name for docs/title",
    )
    HOST: str = Field("0.0.0.0", description="Bind address for uvicorn")
    PORT: int = Field(8000, description="Bind port for uvicorn")

    # Логи
    LOG_LEVEL: str = Field(
        "INFO",
        description="Logging level",
    )
    LOG_TO_FILE: bool = Field(
        True,
        description="Write logs to a rotating file in addition to stdout",
    )
    LOG_DIR: str = Field(
        "logs",
        description="Directory for log files",
    )
    LOG_FILENAME: str = Field(
        "cityinfo.log",
        description="Log file name",
    )

    # Почтовые уведомления
    MAIL_TO: str = Field(
        "admin@mycompany.com",
        description="Recipient of notification mails",
    )
    MAIL_FROM: str = Field(
        "noreply@mycompany.com",
        description="Sender of notification mails",
    )

    model_config = {
        "env_file": ".env",
        "case_sensitive": True,
    }


settings = Settings()
