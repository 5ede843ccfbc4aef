from .entity import Flight as Flight
from .enum import FlightState as FlightState
from .event import FlightEventPublisher as FlightEventPublisher
from .factory import DEFAULT_MINIMUM_PASSENGERS as DEFAULT_MINIMUM_PASSENGERS
from .factory import FlightDetails as FlightDetails
from .factory import FlightFactory as FlightFactory
from .repository import FlightRepository as FlightRepository
