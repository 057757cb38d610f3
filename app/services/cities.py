import logging

from app.db.models import City
from app.db.store import CityStore
from app.exceptions import NotFoundError

logger = logging.getLogger(__name__)


def list_cities(store: CityStore) -> list[City]:
    return store.list_cities()


def get_city(store: CityStore, city_id: int) -> City:
    city = store.get_city(city_id)
    if city is None:
        logger.info("City not found: '%s'", city_id)
        raise NotFoundError(f"City id={city_id} not found")
    return city
