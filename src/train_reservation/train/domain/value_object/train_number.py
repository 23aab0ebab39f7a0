from dataclasses import dataclass


@dataclass(frozen=True)
class TrainNumber:
    """列車番号

    例: 101, 202
    """

    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise ValueError(f"Train number must be an integer: {self.value!r}")

    def __str__(self) -> str:
        return str(self.value)
