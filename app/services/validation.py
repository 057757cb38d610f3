from typing import Any, Iterable, Mapping

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

DESCRIPTION_EQUALS_NAME = "The provided description should be different from the name."

# Сегменты loc, которые FastAPI добавляет к ошибкам запроса
_LOCATION_PREFIXES = {"body", "path", "query", "header", "cookie"}

# Типы ошибок, означающие отсутствие обязательного значения
_MISSING_TYPES = {"missing", "blank_value"}


def _is_missing(err: Mapping[str, Any]) -> bool:
    # null в обязательном строковом поле — то же, что отсутствие поля
    if err.get("type") == "string_type" and err.get("input") is None:
        return True
    return err.get("type") in _MISSING_TYPES


def error_messages(errors: Iterable[Mapping[str, Any]]) -> dict[str, list[str]]:
    """
    Превращает список ошибок pydantic/FastAPI в словарь поле -> сообщения.
    """
    result: dict[str, list[str]] = {}
    for err in errors:
        loc = list(err.get("loc", ()))
        if loc and loc[0] in _LOCATION_PREFIXES:
            loc = loc[1:]
        key = ".".join(str(part) for part in loc)
        if key and _is_missing(err):
            message = f"You should provide a {key} value."
        else:
            message = err.get("msg", "The value is invalid.")
        result.setdefault(key, []).append(message)
    return result


def add_error(errors: dict[str, list[str]], key: str, message: str) -> None:
    errors.setdefault(key, []).append(message)


def check_name_differs(data: Mapping[str, Any], errors: dict[str, list[str]]) -> None:
    """Доменное правило: название и описание должны различаться."""
    if data.get("name") == data.get("description"):
        add_error(errors, "description", DESCRIPTION_EQUALS_NAME)


def validate_point_of_interest(
    model_cls: type[BaseModel],
    data: Mapping[str, Any],
) -> tuple[BaseModel | None, dict[str, list[str]]]:
    """
    Полная проверка тела точки интереса: схема + доменное правило.
    Ошибки собираются вместе, доменное правило проверяется даже при ошибках схемы.
    """
    errors: dict[str, list[str]] = {}
    model = None
    try:
        model = model_cls.model_validate(data)
    except PydanticValidationError as exc:
        errors = error_messages(exc.errors())
    check_name_differs(data, errors)
    if errors:
        model = None
    return model, errors
