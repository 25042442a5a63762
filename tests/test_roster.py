from datetime import datetime, timedelta

import pytest

from scheduler.roster import ParticipantRoster


@pytest.fixture
def roster(offline_directory, utc):
    return ParticipantRoster(offline_directory, utc)


@pytest.mark.parametrize(
    "name,email,code",
    [("", "a@example.com", "JP"), ("Aiko", "", "JP"), ("Aiko", "a@example.com", ""), ("   ", "a@example.com", "JP"), ("Aiko", "a@example.com", "ZZ")],
)
def test_add_requires_all_fields_and_known_country(roster, name, email, code):
    roster.add("Paul", "paul@example.com", "FR")
    assert roster.add(name, email, code) is None
    assert len(roster) == 1


def test_add_assigns_unique_ids(roster):
    ids = set()
    for i in range(5):
        p = roster.add(f"P{i}", f"p{i}@example.com", "JP")
        assert p is not None
        assert p.id not in ids
        ids.add(p.id)
    assert len(roster) == 5


def test_add_is_unstamped_without_instant(roster):
    p = roster.add("Aiko", "aiko@example.com", "JP")
    assert p.local_time is None
    assert p.country.code == "JP"


def test_add_stamps_when_instant_known(roster):
    roster.restamp_all(datetime(2024, 6, 1, 9, 0))
    p = roster.add("Aiko", "aiko@example.com", "JP")
    assert p.local_time == "01/06/2024 18:00"


def test_remove(roster):
    a = roster.add("Aiko", "aiko@example.com", "JP")
    b = roster.add("Paul", "paul@example.com", "FR")
    assert roster.remove("missing") is False
    assert [p.id for p in roster] == [a.id, b.id]
    assert roster.remove(a.id) is True
    assert [p.id for p in roster] == [b.id]


def test_restamp_all_updates_every_participant(offline_directory):
    roster = ParticipantRoster(offline_directory, timedelta(hours=2))
    a = roster.add("Aiko", "aiko@example.com", "JP")
    b = roster.add("Paul", "paul@example.com", "FR")
    ids = [p.id for p in roster]

    roster.restamp_all(datetime(2024, 6, 1, 9, 0))
    assert (a.local_time, b.local_time) == ("01/06/2024 16:00", "01/06/2024 09:00")

    roster.restamp_all(datetime(2024, 6, 2, 23, 0))
    assert (a.local_time, b.local_time) == ("03/06/2024 06:00", "02/06/2024 23:00")
    assert [p.id for p in roster] == ids


def test_incomplete_instant_keeps_existing_stamps(roster):
    p = roster.add("Aiko", "aiko@example.com", "JP")
    roster.restamp_all(datetime(2024, 6, 1, 9, 0))
    roster.restamp_all(None)
    assert p.local_time == "01/06/2024 18:00"
    late = roster.add("Paul", "paul@example.com", "FR")
    assert late.local_time is None
