from .flight_event_publisher import FlightEventPublisher as FlightEventPublisher
from .flight_events import FlightCancelled as FlightCancelled
from .flight_events import FlightConfirmed as FlightConfirmed
from .flight_events import FlightEvent as FlightEvent
from .flight_events import FlightPerformed as FlightPerformed
from .flight_events import FlightSoldOut as FlightSoldOut
