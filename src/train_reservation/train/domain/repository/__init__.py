from .train_repository import TrainRepository

__all__ = ["TrainRepository"]
