from .flight_factory import DEFAULT_MINIMUM_PASSENGERS as DEFAULT_MINIMUM_PASSENGERS
from .flight_factory import FlightDetails as FlightDetails
from .flight_factory import FlightFactory as FlightFactory
