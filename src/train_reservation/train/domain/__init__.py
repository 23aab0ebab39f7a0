from .entity import Train as Train
from .repository import TrainRepository as TrainRepository
from .value_object import Route as Route
from .value_object import TrainNumber as TrainNumber
