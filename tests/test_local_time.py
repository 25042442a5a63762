from datetime import datetime, timedelta, timezone

from utils.local_time import combine_instant, host_utc_offset, local_time_for, time_at_offset


def test_combine_instant():
    assert combine_instant("2024-06-01", "09:00") == datetime(2024, 6, 1, 9, 0)


def test_combine_instant_incomplete_or_invalid():
    assert combine_instant("", "09:00") is None
    assert combine_instant("2024-06-01", "") is None
    assert combine_instant("2024-13-01", "09:00") is None
    assert combine_instant("2024-06-01", "nine") is None


def test_local_time_shifts_from_reference_to_target():
    instant = datetime(2024, 6, 1, 9, 0)
    # 09:00 at UTC+2 is 07:00 UTC, 16:00 at UTC+9
    assert local_time_for(instant, 9, timedelta(hours=2)) == "01/06/2024 16:00"


def test_local_time_crosses_day_boundary():
    instant = datetime(2024, 6, 1, 2, 0)
    assert local_time_for(instant, -5, timedelta(0)) == "31/05/2024 21:00"


def test_local_time_half_hour_reference():
    instant = datetime(2024, 1, 1, 12, 0)
    assert local_time_for(instant, 0, timedelta(hours=5, minutes=30)) == "01/01/2024 06:30"


def test_local_time_without_instant():
    assert local_time_for(None, 9, timedelta(0)) is None


def test_local_time_is_repeatable():
    instant = datetime(2024, 6, 1, 9, 0)
    ref = host_utc_offset(instant)
    assert local_time_for(instant, 9, ref) == local_time_for(instant, 9, ref)


def test_time_at_offset_uses_given_now():
    now = datetime(2024, 1, 1, 23, 30, tzinfo=timezone.utc)
    assert time_at_offset(2, now) == datetime(2024, 1, 2, 1, 30)
    assert time_at_offset(-12, now) == datetime(2024, 1, 1, 11, 30)


def test_host_utc_offset_is_timedelta():
    assert isinstance(host_utc_offset(), timedelta)
