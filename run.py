"""Запуск City Info API через uvicorn.

Адрес и порт берутся из настроек (HOST, PORT).

Usage:
    python run.py
"""
import uvicorn

from app.core.config import settings


if __name__ == "__main__":
    uvicorn.run(
        "app.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.DEBUG,
        log_level=settings.LOG_LEVEL.lower(),
    )
