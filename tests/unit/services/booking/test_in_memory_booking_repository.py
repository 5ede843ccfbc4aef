from decimal import Decimal

import pytest

from services.booking.domain import Booking
from services.shared.domain import Money


class TestInMemoryBookingRepository:
    """InMemoryBookingRepository のテスト"""

    @pytest.fixture
    def create_booking(self):
        def _factory(flight_id: str = "f0001", name: str = "Ada") -> Booking:
            return Booking(
                flight_id=flight_id,
                passenger_name=name,
                passenger_email="ada@example.com",
                final_price=Money(amount=Decimal("70")),
            )

        return _factory

    def test_add_assigns_booking_ids(self, booking_repository, create_booking):
        first = booking_repository.add(create_booking())
        second = booking_repository.add(create_booking())

        assert (first.id, second.id) == ("b0001", "b0002")

    def test_add_does_not_mutate_argument(self, booking_repository, create_booking):
        booking = create_booking()
        booking_repository.add(booking)
        assert booking.id is None

    def test_count_by_flight_id(self, booking_repository, create_booking):
        booking_repository.add(create_booking(flight_id="f0001"))
        booking_repository.add(create_booking(flight_id="f0001"))
        booking_repository.add(create_booking(flight_id="f0002"))

        assert booking_repository.count_by_flight_id("f0001") == 2
        assert booking_repository.count_by_flight_id("f0002") == 1
        assert booking_repository.count_by_flight_id("f0003") == 0
        assert booking_repository.count_by_flight_id(" ") == 0

    def test_list_by_blank_flight_id_is_empty(self, booking_repository, create_booking):
        booking_repository.add(create_booking())
        assert booking_repository.list_by_flight_id("") == []

    def test_find_by_id(self, booking_repository, create_booking):
        created = booking_repository.add(create_booking(name="Grace"))

        found = booking_repository.find_by_id(created.id)

        assert found == created
        assert found is not created
        assert found.passenger_name == "Grace"
        assert booking_repository.find_by_id("b9999") is None
