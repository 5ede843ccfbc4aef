from .entity import MAX_CAPACITY as MAX_CAPACITY
from .entity import MIN_CAPACITY as MIN_CAPACITY
from .entity import Rocket as Rocket
from .enum import RocketRange as RocketRange
from .repository import RocketRepository as RocketRepository
