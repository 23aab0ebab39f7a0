from .train import Train

__all__ = ["Train"]
