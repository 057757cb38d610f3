import logging
from typing import Any, Mapping, Sequence

from app.db.models import PointOfInterest
from app.db.store import CityStore
from app.exceptions import NotFoundError, ValidationError
from app.schemas.city import PatchOperation, PointOfInterestForCreation, PointOfInterestForUpdate
from app.services.cities import get_city
from app.services.mail import MailService
from app.services.validation import add_error, validate_point_of_interest

logger = logging.getLogger(__name__)

MISSING_BODY = "A non-empty request body is required."
PATCHABLE_FIELDS = ("name", "description")

DELETED_SUBJECT = "Point of interest deleted."


def _require_body(payload: Any) -> None:
    if payload is None:
        raise ValidationError({"": [MISSING_BODY]})


def _validated(model_cls, payload: Mapping[str, Any]):
    model, errors = validate_point_of_interest(model_cls, payload)
    if errors:
        logger.info("Point of interest rejected: %s", errors)
        raise ValidationError(errors)
    return model


def list_points_of_interest(store: CityStore, city_id: int) -> list[PointOfInterest]:
    city = get_city(store, city_id)
    return list(city.points_of_interest)


def get_point_of_interest(store: CityStore, city_id: int, poi_id: int) -> PointOfInterest:
    city = get_city(store, city_id)
    poi = city.find_point_of_interest(poi_id)
    if poi is None:
        logger.info("Point of interest %s not found in city %s", poi_id, city_id)
        raise NotFoundError(f"PointOfInterest id={poi_id} not found")
    return poi


def create_point_of_interest(
    store: CityStore, city_id: int, payload: Mapping[str, Any] | None
) -> PointOfInterest:
    """
    Создаёт точку интереса в городе city_id.
    Порядок проверок: тело (400) -> валидация (400) -> город (404).
    """
    _require_body(payload)
    data = _validated(PointOfInterestForCreation, payload)

    with store.lock:
        city = get_city(store, city_id)
        poi = PointOfInterest(
            id=store.next_point_of_interest_id(),
            name=data.name,
            description=data.description,
        )
        city.points_of_interest.append(poi)

    logger.info("Point of interest %s created in city %s", poi.id, city_id)
    return poi


def update_point_of_interest(
    store: CityStore, city_id: int, poi_id: int, payload: Mapping[str, Any] | None
) -> None:
    """Полная замена name/description. id не меняется."""
    _require_body(payload)
    data = _validated(PointOfInterestForUpdate, payload)

    with store.lock:
        poi = get_point_of_interest(store, city_id, poi_id)
        poi.name = data.name
        poi.description = data.description


def apply_patch(
    document: Sequence[PatchOperation], target: dict[str, Any], errors: dict[str, list[str]]
) -> None:
    """
    Применяет операции к рабочей копии target.
    Допустимы только поля из PATCHABLE_FIELDS; id изменить нельзя.
    """
    for operation in document:
        field = operation.path.strip("/").lower()
        if field == "id":
            add_error(errors, "id", "The id of a point of interest cannot be modified.")
            continue
        if field not in PATCHABLE_FIELDS:
            add_error(
                errors,
                field,
                f"The target location specified by path segment '{field}' was not found.",
            )
            continue
        if operation.op == "remove":
            target[field] = None
        else:
            target[field] = operation.value


def patch_point_of_interest(
    store: CityStore,
    city_id: int,
    poi_id: int,
    document: Sequence[PatchOperation] | None,
) -> None:
    """
    Частичное обновление: операции применяются к копии,
    копия проходит структурную проверку, доменное правило и полную валидацию,
    и только затем переносится в хранилище.
    """
    _require_body(document)

    with store.lock:
        poi = get_point_of_interest(store, city_id, poi_id)
        working = {"name": poi.name, "description": poi.description}

        errors: dict[str, list[str]] = {}
        apply_patch(document, working, errors)
        if errors:
            raise ValidationError(errors)

        data = _validated(PointOfInterestForUpdate, working)

        poi.name = data.name
        poi.description = data.description


def delete_point_of_interest(
    store: CityStore, mail_service: MailService, city_id: int, poi_id: int
) -> PointOfInterest:
    with store.lock:
        city = get_city(store, city_id)
        poi = city.find_point_of_interest(poi_id)
        if poi is None:
            logger.info("Point of interest %s not found in city %s", poi_id, city_id)
            raise NotFoundError(f"PointOfInterest id={poi_id} not found")
        city.points_of_interest.remove(poi)

    try:
        mail_service.send(
            DELETED_SUBJECT,
            f"Point of interest {poi.name} with id {poi.id} was deleted.",
        )
    except Exception:
        # Точка уже удалена, ошибка уведомления не отменяет запрос
        logger.exception("Failed to send deletion notice for point of interest %s", poi.id)
    return poi
