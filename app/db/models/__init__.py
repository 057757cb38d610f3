# Пакет доменных моделей хранилища
from .city import City, PointOfInterest
