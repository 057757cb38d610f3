from dataclasses import dataclass, field


@dataclass
class PointOfInterest:
    id: int
    name: str
    description: str | None = None


@dataclass
class City:
    id: int
    name: str
    description: str | None = None
    points_of_interest: list[PointOfInterest] = field(default_factory=list)

    @property
    def number_of_points_of_interest(self) -> int:
        return len(self.points_of_interest)

    def find_point_of_interest(self, poi_id: int) -> PointOfInterest | None:
        for poi in self.points_of_interest:
            if poi.id == poi_id:
                return poi
        return None
