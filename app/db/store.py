import threading
from typing import Iterable

from app.db.models import City
from app.exceptions import ServiceError


class CityStore:
    """
    In-memory хранилище городов и их точек интереса.
    Создаётся явно в create_app() и живёт в app.state на протяжении процесса.
    Все изменения выполняются под self.lock.
    """

    def __init__(self, cities: Iterable[City] = ()):
        self._cities: list[City] = list(cities)
        self.lock = threading.RLock()

    def list_cities(self) -> list[City]:
        return list(self._cities)

    def get_city(self, city_id: int) -> City | None:
        for city in self._cities:
            if city.id == city_id:
                return city
        return None

    def next_point_of_interest_id(self) -> int:
        """
        Следующий id точки интереса: максимум по ВСЕМ городам + 1.
        Пространство id глобальное, а не в пределах города.
        """
        ids = [poi.id for city in self._cities for poi in city.points_of_interest]
        if not ids:
            raise ServiceError("Store holds no points of interest to derive the next id from")
        return max(ids) + 1
