from unittest.mock import MagicMock

import pytest

from services.flight.applications.perform_flight import PerformFlightService
from services.flight.domain import FlightState
from services.shared.applications import (
    Conflict,
    NotFound,
    Success,
    UnexpectedFailure,
)


class TestPerformFlightService:
    """PerformFlightService のテスト"""

    @pytest.fixture
    def service(self, flight_repository, gate, publisher):
        return PerformFlightService(
            flight_repository=flight_repository, gate=gate, publisher=publisher
        )

    @pytest.mark.parametrize(
        "state",
        [FlightState.SCHEDULED, FlightState.CONFIRMED, FlightState.SOLD_OUT],
    )
    def test_perform_flight(self, service, add_flight, flight_repository, state):
        flight = add_flight(state=state)

        result = service.perform(flight.id)

        assert isinstance(result, Success)
        assert result.value.state == FlightState.DONE
        assert flight_repository.find_by_id(flight.id).state == FlightState.DONE

    def test_perform_is_idempotent(self, service, add_flight, publisher):
        flight = add_flight()

        service.perform(flight.id)
        result = service.perform(flight.id)

        assert isinstance(result, Success)
        assert result.value.state == FlightState.DONE
        publisher.publish.assert_called_once()

    def test_cannot_perform_cancelled_flight(self, service, add_flight):
        """CANCELLED のフライトは運航済みにできない"""
        flight = add_flight(state=FlightState.CANCELLED)

        result = service.perform(flight.id)

        assert isinstance(result, Conflict)
        assert "CANCELLED" in result.error

    @pytest.mark.parametrize("flight_id", ["", "f9999"])
    def test_blank_or_unknown_flight_returns_not_found(self, service, flight_id):
        assert isinstance(service.perform(flight_id), NotFound)

    def test_update_miss_returns_unexpected_failure(
        self, create_flight, gate, publisher
    ):
        flight_repository = MagicMock()
        flight_repository.find_by_id.return_value = create_flight()
        flight_repository.update.return_value = None
        service = PerformFlightService(
            flight_repository=flight_repository, gate=gate, publisher=publisher
        )

        result = service.perform("f0001")

        assert isinstance(result, UnexpectedFailure)
        publisher.publish.assert_not_called()
