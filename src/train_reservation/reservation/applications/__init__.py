from .reservation_manager import ReservationManager, TrainSummary

__all__ = ["ReservationManager", "TrainSummary"]
