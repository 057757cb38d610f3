# app/api/deps.py

from fastapi import Request

from app.db.store import CityStore
from app.services.mail import MailService


def get_city_store(request: Request) -> CityStore:
    """
    Зависимость FastAPI, возвращающая хранилище городов,
    созданное в create_app() и сохранённое в app.state.
    """
    return request.app.state.city_store


def get_mail_service(request: Request) -> MailService:
    return request.app.state.mail_service
