from typing import Any, List, Literal, Optional

from pydantic import BaseModel, Field, computed_field, field_validator
from pydantic_core import PydanticCustomError
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Поля в JSON — camelCase, в Python — snake_case."""

    model_config = {
        "alias_generator": to_camel,
        "populate_by_name": True,
        "from_attributes": True,
    }


class PointOfInterestOut(CamelModel):
    id: int = Field(..., description="Глобально уникальный ID точки интереса")
    name: str = Field(..., description="Название точки интереса")
    description: Optional[str] = Field(None, description="Описание точки интереса")


class CityWithoutPointsOfInterestOut(CamelModel):
    id: int = Field(..., description="ID города")
    name: str = Field(..., description="Название города")
    description: Optional[str] = Field(None, description="Описание города")


class CityOut(CityWithoutPointsOfInterestOut):
    points_of_interest: List[PointOfInterestOut] = Field(
        default_factory=list, description="Точки интереса города"
    )

    @computed_field(alias="numberOfPointsOfInterest")
    @property
    def number_of_points_of_interest(self) -> int:
        return len(self.points_of_interest)


class PointOfInterestForCreation(CamelModel):
    name: str = Field(..., max_length=50, description="Название (до 50 символов)")
    description: Optional[str] = Field(None, max_length=200, description="Описание (до 200 символов)")

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise PydanticCustomError("blank_value", "Value must not be blank")
        return value


class PointOfInterestForUpdate(PointOfInterestForCreation):
    pass


class PatchOperation(BaseModel):
    """
    Операция частичного обновления в духе JSON Patch.
    add/replace записывают value в поле, remove сбрасывает поле в null.
    """

    op: Literal["add", "replace", "remove"] = Field(..., description="Тип операции")
    path: str = Field(..., description="Путь к полю: /name или /description")
    value: Any = Field(None, description="Новое значение (для add/replace)")
