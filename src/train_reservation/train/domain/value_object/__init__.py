from .route import Route
from .train_number import TrainNumber

__all__ = ["Route", "TrainNumber"]
