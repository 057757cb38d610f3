"""
Точка входа City Info API.

create_app() — корень композиции: создаёт хранилище городов и почтовый
сервис и передаёт их обработчикам через app.state. Запуск:

    uvicorn app.main:app --reload
"""

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.core.config import settings
from app.core.error_handlers import register_error_handlers
from app.core.logging_config import setup_logging
from app.db.seed import build_seeded_store
from app.db.store import CityStore
from app.services.mail import LocalMailService, MailService

from app.api.routers.health import router as health_router
from app.api.routers.cities import router as cities_router
from app.api.routers.points_of_interest import router as poi_router

logger = logging.getLogger(__name__)


def create_app(
    store: CityStore | None = None,
    mail_service: MailService | None = None,
) -> FastAPI:
    app = FastAPI(
        title=settings.APP_NAME,
        version="1.0.0",
        debug=settings.DEBUG,
    )

    app.state.city_store = store if store is not None else build_seeded_store()
    app.state.mail_service = mail_service if mail_service is not None else LocalMailService(
        mail_to=settings.MAIL_TO,
        mail_from=settings.MAIL_FROM,
    )

    # CORS (разреши свой фронт если нужно)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_error_handlers(app)

    @app.on_event("startup")
    async def on_startup():
        setup_logging()
        logger.info(
            "%s started (%s), %d cities in store",
            settings.APP_NAME,
            settings.ENV,
            len(app.state.city_store.list_cities()),
        )

    # Подключаем роутеры
    app.include_router(health_router, tags=["health"])
    app.include_router(cities_router)
    app.include_router(poi_router)

    return app


app = create_app()
