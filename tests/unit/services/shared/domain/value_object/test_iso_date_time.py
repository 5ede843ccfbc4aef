from datetime import datetime, timedelta, timezone

import pytest

from services.shared.domain import IsoDateTime


class TestIsoDateTime:
    """IsoDateTime のテスト"""

    def test_naive_datetime_is_treated_as_utc(self):
        value = IsoDateTime(datetime(2026, 1, 1, 9, 0))
        assert value.value.tzinfo == timezone.utc

    def test_from_string_accepts_z_suffix(self):
        value = IsoDateTime.from_string("2026-01-01T09:00:00Z")
        assert value == IsoDateTime(datetime(2026, 1, 1, 9, 0, tzinfo=timezone.utc))

    def test_from_string_keeps_offset(self):
        value = IsoDateTime.from_string("2026-01-01T18:00:00+09:00")
        assert value.value == datetime(2026, 1, 1, 9, 0, tzinfo=timezone.utc)

    def test_invalid_string(self):
        with pytest.raises(ValueError, match="Invalid ISO 8601"):
            IsoDateTime.from_string("next tuesday")

    def test_comparison(self):
        earlier = IsoDateTime(datetime(2026, 1, 1, tzinfo=timezone.utc))
        later = IsoDateTime(earlier.value + timedelta(seconds=1))

        assert earlier.is_before(later)
        assert later.is_after(earlier)
        assert not earlier.is_after(earlier)
        assert sorted([later, earlier]) == [earlier, later]

    def test_str_is_iso_format(self):
        value = IsoDateTime(datetime(2026, 1, 1, 9, 0, tzinfo=timezone.utc))
        assert str(value) == "2026-01-01T09:00:00+00:00"
