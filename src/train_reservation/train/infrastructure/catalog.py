from collections.abc import Iterable
from typing import TypedDict

from train_reservation.train.domain.entity import Train
from train_reservation.train.domain.value_object import Route, TrainNumber


class TrainSpec(TypedDict):
    """カタログ1件分の入力データ構造"""

    number: int
    name: str
    source: str
    destination: str
    capacity: int


DEFAULT_CATALOG: tuple[TrainSpec, ...] = (
    {
        "number": 101,
        "name": "Express 101",
        "source": "CityA",
        "destination": "CityB",
        "capacity": 50,
    },
    {
        "number": 202,
        "name": "Superfast 202",
        "source": "CityB",
        "destination": "CityC",
        "capacity": 75,
    },
)


def build_catalog(specs: Iterable[TrainSpec] = DEFAULT_CATALOG) -> list[Train]:
    """プリミティブ型のカタログから Train エンティティを生成する"""
    return [
        Train(
            number=TrainNumber(spec["number"]),
            name=spec["name"],
            route=Route(source=spec["source"], destination=spec["destination"]),
            capacity=spec["capacity"],
        )
        for spec in specs
    ]
