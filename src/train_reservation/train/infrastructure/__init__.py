from .catalog import DEFAULT_CATALOG, TrainSpec, build_catalog
from .in_memory_train_repository import InMemoryTrainRepository

__all__ = [
    "DEFAULT_CATALOG",
    "InMemoryTrainRepository",
    "TrainSpec",
    "build_catalog",
]
