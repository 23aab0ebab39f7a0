from abc import abstractmethod
from collections.abc import Iterator
from typing import Optional

from train_reservation.shared.domain import Repository
from train_reservation.train.domain.entity import Train
from train_reservation.train.domain.value_object import TrainNumber


class TrainRepository(Repository[Train, TrainNumber]):
    """列車レポジトリ"""

    @abstractmethod
    def save(self, train: Train) -> None:
        """登録する"""
        raise NotImplementedError

    @abstractmethod
    def find_by_id(self, train_number: TrainNumber) -> Optional[Train]:
        """列車番号で検索"""
        raise NotImplementedError

    @abstractmethod
    def find_all(self) -> Iterator[Train]:
        """登録順に全列車を返す"""
        raise NotImplementedError
