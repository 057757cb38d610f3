from typing import List

from fastapi import APIRouter, Depends

from app.api.deps import get_city_store
from app.core.config import settings
from app.db.store import CityStore
from app.schemas.city import CityOut
from app.services import cities as city_service

router = APIRouter(prefix=f"{settings.API_PREFIX}/cities", tags=["City"])


@router.get(
    "",
    response_model=List[CityOut],
    summary="Получить список городов",
    description="Возвращает все города вместе с их точками интереса."
)
async def list_cities(store: CityStore = Depends(get_city_store)):
    return city_service.list_cities(store)


@router.get(
    "/{city_id}",
    response_model=CityOut,
    summary="Получить город по ID",
    responses={404: {"description": "City not found"}}
)
async def get_city(
    city_id: int,
    store: CityStore = Depends(get_city_store)
):
    return city_service.get_city(store, city_id)
