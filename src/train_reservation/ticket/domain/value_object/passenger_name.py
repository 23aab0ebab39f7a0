from dataclasses import dataclass
from typing import ClassVar


@dataclass(frozen=True)
class PassengerName:
    """乗客名"""

    value: str

    MAX_LENGTH: ClassVar[int] = 100

    def __post_init__(self) -> None:
        if not self.value or len(self.value.strip()) == 0:
            raise ValueError("Passenger name cannot be empty")
        if len(self.value) > self.MAX_LENGTH:
            raise ValueError(
                f"Passenger name is too long (max {self.MAX_LENGTH} characters)"
            )

    def __str__(self) -> str:
        return self.value
