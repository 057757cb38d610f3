from typing import List

from fastapi import APIRouter, Body, Depends, Request, Response, status

from app.api.deps import get_city_store, get_mail_service
from app.core.config import settings
from app.db.store import CityStore
from app.schemas.city import PatchOperation, PointOfInterestForCreation, PointOfInterestOut
from app.services import points_of_interest as poi_service
from app.services.mail import MailService

router = APIRouter(prefix=f"{settings.API_PREFIX}/cities", tags=["PointOfInterest"])

_NOT_FOUND = {404: {"description": "City or point of interest not found"}}
_BAD_REQUEST = {400: {"description": "Validation failed: field -> messages"}}


@router.get("/{city_id}/pointsofinterest", response_model=List[PointOfInterestOut], include_in_schema=False)
@router.get(
    "/{city_id}/pointsOfInterest",
    response_model=List[PointOfInterestOut],
    summary="Получить точки интереса города",
    responses=_NOT_FOUND
)
async def list_points_of_interest(
    city_id: int,
    store: CityStore = Depends(get_city_store)
):
    return poi_service.list_points_of_interest(store, city_id)


@router.get(
    "/{city_id}/pointsofinterest/{poi_id}",
    response_model=PointOfInterestOut,
    name="get_point_of_interest",
    include_in_schema=False
)
@router.get(
    "/{city_id}/pointsOfInterest/{poi_id}",
    response_model=PointOfInterestOut,
    summary="Получить точку интереса по ID",
    responses=_NOT_FOUND,
    name="get_point_of_interest_camel"
)
async def get_point_of_interest(
    city_id: int,
    poi_id: int,
    store: CityStore = Depends(get_city_store)
):
    return poi_service.get_point_of_interest(store, city_id, poi_id)


@router.post(
    "/{city_id}/pointsofinterest",
    response_model=PointOfInterestOut,
    status_code=status.HTTP_201_CREATED,
    summary="Создать точку интереса",
    description="Создаёт точку интереса в городе. ID назначается глобально по всем городам.",
    responses={**_BAD_REQUEST, **_NOT_FOUND}
)
async def create_point_of_interest(
    city_id: int,
    request: Request,
    response: Response,
    payload: dict | None = Body(
        None,
        description="Тело в формате PointOfInterestForCreation",
        examples=[PointOfInterestForCreation(name="Brooklyn Bridge", description="A hybrid suspension bridge.").model_dump()],
    ),
    store: CityStore = Depends(get_city_store)
):
    poi = poi_service.create_point_of_interest(store, city_id, payload)
    response.headers["Location"] = str(
        request.url_for("get_point_of_interest", city_id=city_id, poi_id=poi.id)
    )
    return poi


@router.put(
    "/{city_id}/pointsofinterest/{poi_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Заменить точку интереса",
    responses={**_BAD_REQUEST, **_NOT_FOUND}
)
async def update_point_of_interest(
    city_id: int,
    poi_id: int,
    payload: dict | None = Body(None, description="Тело в формате PointOfInterestForUpdate"),
    store: CityStore = Depends(get_city_store)
):
    poi_service.update_point_of_interest(store, city_id, poi_id, payload)


@router.patch(
    "/{city_id}/pointsofinterest/{poi_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Частично обновить точку интереса",
    description="Принимает список операций {op, path, value} для полей /name и /description.",
    responses={**_BAD_REQUEST, **_NOT_FOUND}
)
async def patch_point_of_interest(
    city_id: int,
    poi_id: int,
    document: List[PatchOperation] | None = Body(None),
    store: CityStore = Depends(get_city_store)
):
    poi_service.patch_point_of_interest(store, city_id, poi_id, document)


@router.delete(
    "/{city_id}/pointsofinterest/{poi_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Удалить точку интереса",
    responses=_NOT_FOUND
)
async def delete_point_of_interest(
    city_id: int,
    poi_id: int,
    store: CityStore = Depends(get_city_store),
    mail_service: MailService = Depends(get_mail_service)
):
    poi_service.delete_point_of_interest(store, mail_service, city_id, poi_id)
