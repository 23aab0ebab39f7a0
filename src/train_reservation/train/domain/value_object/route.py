from dataclasses import dataclass


@dataclass(frozen=True)
class Route:
    """運行区間（出発地 + 到着地）"""

    source: str
    destination: str

    def __post_init__(self) -> None:
        if not self.source or not self.source.strip():
            raise ValueError("Route source cannot be empty")
        if not self.destination or not self.destination.strip():
            raise ValueError("Route destination cannot be empty")

    def __str__(self) -> str:
        return f"{self.source} to {self.destination}"
