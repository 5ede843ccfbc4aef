"""プロセス内で共有する依存関係

インメモリのストアと排他ゲートはプロセス単位で 1 つだけ存在する必要があるため、
各 Lambda Handler はコールドスタート時にここからサービスを取得する。
"""

from services.booking.applications.create_booking import CreateBookingService
from services.booking.applications.list_bookings import ListBookingsService
from services.booking.infrastructure.in_memory_booking_repository import (
    InMemoryBookingRepository,
)
from services.flight.applications.cancel_flight import CancelFlightService
from services.flight.applications.create_flight import CreateFlightService
from services.flight.applications.list_future_flights import ListFutureFlightsService
from services.flight.applications.perform_flight import PerformFlightService
from services.flight.domain import FlightFactory
from services.flight.infrastructure.in_memory_flight_repository import (
    InMemoryFlightRepository,
)
from services.flight.infrastructure.logging_flight_event_publisher import (
    LoggingFlightEventPublisher,
)
from services.rocket.applications.create_rocket import CreateRocketService
from services.rocket.applications.get_rocket import GetRocketService
from services.rocket.infrastructure.in_memory_rocket_repository import (
    InMemoryRocketRepository,
)
from services.shared.utils.clock import SystemClock
from services.shared.utils.operation_gate import OperationGate

rocket_repository = InMemoryRocketRepository()
flight_repository = InMemoryFlightRepository()
booking_repository = InMemoryBookingRepository()

gate = OperationGate()
clock = SystemClock()
publisher = LoggingFlightEventPublisher()

create_rocket_service = CreateRocketService(repository=rocket_repository)
get_rocket_service = GetRocketService(repository=rocket_repository)

create_flight_service = CreateFlightService(
    flight_repository=flight_repository,
    rocket_repository=rocket_repository,
    factory=FlightFactory(),
    clock=clock,
)
list_future_flights_service = ListFutureFlightsService(
    flight_repository=flight_repository, clock=clock
)
cancel_flight_service = CancelFlightService(
    flight_repository=flight_repository,
    booking_repository=booking_repository,
    gate=gate,
    publisher=publisher,
)
perform_flight_service = PerformFlightService(
    flight_repository=flight_repository, gate=gate, publisher=publisher
)

create_booking_service = CreateBookingService(
    booking_repository=booking_repository,
    flight_repository=flight_repository,
    rocket_repository=rocket_repository,
    gate=gate,
    publisher=publisher,
)
list_bookings_service = ListBookingsService(
    booking_repository=booking_repository, flight_repository=flight_repository
)
