from collections.abc import Iterable, Iterator

from train_reservation.shared.domain.exception import DuplicateResourceException
from train_reservation.train.domain.entity import Train
from train_reservation.train.domain.repository import TrainRepository
from train_reservation.train.domain.value_object import TrainNumber


class InMemoryTrainRepository(TrainRepository):
    """メモリ上のリストを使用した TrainRepository の具象実装

    カタログは小さいため、検索は線形走査で行う。
    """

    def __init__(self, trains: Iterable[Train] = ()) -> None:
        self._trains: list[Train] = []
        for train in trains:
            self.save(train)

    def save(self, train: Train) -> None:
        """列車を登録する"""
        if self.find_by_id(train.number) is not None:
            raise DuplicateResourceException(f"Train already exists: {train.number}")
        self._trains.append(train)

    def find_by_id(self, train_number: TrainNumber) -> Train | None:
        """列車番号で検索"""
        for train in self._trains:
            if train.number == train_number:
                return train
        return None

    def find_all(self) -> Iterator[Train]:
        """登録順に全列車を返す"""
        return iter(list(self._trains))
