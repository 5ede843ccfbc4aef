import pytest

from services.rocket.domain import Rocket, RocketRange
from services.shared.domain.exception import BusinessRuleViolationException


class TestRocket:
    """Rocket エンティティのテスト"""

    def test_defaults(self):
        rocket = Rocket(name="Falcon", capacity=3)

        assert rocket.id is None
        assert rocket.range == RocketRange.LEO
        assert rocket.speed is None

    @pytest.mark.parametrize("capacity", [0, 11, -1])
    def test_capacity_out_of_bounds(self, capacity):
        with pytest.raises(BusinessRuleViolationException):
            Rocket(name="Falcon", capacity=capacity)

    def test_blank_name(self):
        with pytest.raises(BusinessRuleViolationException):
            Rocket(name="  ", capacity=3)

    def test_non_positive_speed(self):
        with pytest.raises(BusinessRuleViolationException):
            Rocket(name="Falcon", capacity=3, speed=0)

    def test_id_cannot_be_reassigned(self):
        rocket = Rocket(name="Falcon", capacity=3)
        rocket.assign_id("r0001")

        with pytest.raises(ValueError, match="already assigned"):
            rocket.assign_id("r0002")
        assert rocket.id == "r0001"


class TestRocketRange:
    @pytest.mark.parametrize(
        "value, expected",
        [("leo", RocketRange.LEO), (" Moon ", RocketRange.MOON), ("MARS", RocketRange.MARS)],
    )
    def test_parse_is_case_insensitive(self, value, expected):
        assert RocketRange.parse(value) == expected

    def test_parse_unknown(self):
        with pytest.raises(ValueError):
            RocketRange.parse("JUPITER")
