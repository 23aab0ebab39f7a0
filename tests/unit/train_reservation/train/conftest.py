import pytest

from train_reservation.train.domain.entity import Train
from train_reservation.train.domain.value_object import Route, TrainNumber


@pytest.fixture
def create_train():
    """Train を生成する Factory fixture（Factories as fixtures パターン）"""

    def _factory(
        number: int = 101,
        name: str = "Express 101",
        source: str = "CityA",
        destination: str = "CityB",
        capacity: int = 50,
    ) -> Train:
        return Train(
            number=TrainNumber(number),
            name=name,
            route=Route(source=source, destination=destination),
            capacity=capacity,
        )

    return _factory
