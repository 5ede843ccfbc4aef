from .rocket import MAX_CAPACITY as MAX_CAPACITY
from .rocket import MIN_CAPACITY as MIN_CAPACITY
from .rocket import Rocket as Rocket
