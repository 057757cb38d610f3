from app.db.models import City, PointOfInterest
from app.db.store import CityStore


def seed_cities() -> list[City]:
    """Начальный набор городов. Каждый вызов возвращает новые объекты."""
    return [
        City(
            id=1,
            name="New York City",
            description="The one with that big park.",
            points_of_interest=[
                PointOfInterest(
                    id=1,
                    name="Central Park",
                    description="The most visited urban park in the United States.",
                ),
                PointOfInterest(
                    id=2,
                    name="Empire State Building",
                    description="A 102-story skyscraper located in Midtown Manhattan.",
                ),
            ],
        ),
        City(
            id=2,
            name="Antwerp",
            description="The one with the cathedral that was never really finished.",
            points_of_interest=[
                PointOfInterest(
                    id=3,
                    name="Cathedral of Our Lady",
                    description="A Gothic style cathedral, conceived by architects Jan and Pieter Appelmans.",
                ),
                PointOfInterest(
                    id=4,
                    name="Antwerp Central Station",
                    description="The finest example of railway architecture in Belgium.",
                ),
            ],
        ),
        City(
            id=3,
            name="Paris",
            description="The one with that big tower.",
            points_of_interest=[
                PointOfInterest(
                    id=5,
                    name="Eiffel Tower",
                    description="A wrought iron lattice tower on the Champ de Mars, named after engineer Gustave Eiffel.",
                ),
                PointOfInterest(
                    id=6,
                    name="The Louvre",
                    description="The world's largest museum.",
                ),
            ],
        ),
    ]


def build_seeded_store() -> CityStore:
    return CityStore(seed_cities())
