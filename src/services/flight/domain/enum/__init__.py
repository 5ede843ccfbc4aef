from .flight_state import FlightState as FlightState
