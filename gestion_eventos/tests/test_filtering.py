from datetime import date, datetime, timedelta, timezone

from gestion_eventos.filtering import compute_visible_events, matches_filters, parse_fecha, parse_fecha_local
from gestion_eventos.models.event import FilterState, SortDirection
from gestion_eventos.tests.helpers import make_event


def test_default_filters_hide_inactive_events():
    events = [
        make_event(1, nombre="Feria", categoria="festivales", fecha="2024-01-10"),
        make_event(2, nombre="Teatro X", categoria="teatro", fecha="2024-02-01", estado="inactivo"),
    ]

    visible = compute_visible_events(events, FilterState())

    assert [e.id for e in visible] == [1]


def test_only_activo_status_is_visible():
    events = [
        make_event(1, estado="activo"),
        make_event(2, estado="inactivo"),
        make_event(3, estado=None),
        make_event(4, estado="ACTIVO"),
    ]

    assert [e.id for e in compute_visible_events(events, FilterState())] == [1]


def test_category_filter_is_exact_and_case_sensitive(sample_events):
    visible = compute_visible_events(sample_events, FilterState(category_filter="charlas"))
    assert [e.id for e in visible] == [3]

    assert compute_visible_events(sample_events, FilterState(category_filter="Charlas")) == []


def test_category_without_active_events_gives_empty_result(sample_events):
    assert compute_visible_events(sample_events, FilterState(category_filter="teatro")) == []


def test_name_query_is_case_insensitive_substring(sample_events):
    visible = compute_visible_events(sample_events, FilterState(name_query="PYTH"))
    assert [e.id for e in visible] == [3]

    visible = compute_visible_events(sample_events, FilterState(name_query="a"))
    assert all("a" in e.nombre.lower() for e in visible)
    assert {e.id for e in visible} == {1, 3, 4}


def test_empty_name_query_matches_all_active(sample_events):
    visible = compute_visible_events(sample_events, FilterState(name_query=""))
    assert {e.id for e in visible} == {1, 3, 4}


def test_missing_name_only_matches_empty_query():
    event = make_event(1, nombre=None)

    assert matches_filters(event, FilterState())
    assert not matches_filters(event, FilterState(name_query="x"))


def test_ascending_order_is_chronological(sample_events):
    visible = compute_visible_events(sample_events, FilterState())

    assert [e.id for e in visible] == [4, 1, 3]
    fechas = [parse_fecha(e.fecha) for e in visible]
    assert all(a <= b for a, b in zip(fechas, fechas[1:]))


def test_descending_order():
    events = [
        make_event(1, fecha="2024-01-01"),
        make_event(2, fecha="2024-03-01"),
    ]

    visible = compute_visible_events(events, FilterState(sort_direction=SortDirection.DESC))

    assert [e.fecha for e in visible] == ["2024-03-01", "2024-01-01"]


def test_dates_are_compared_chronologically_not_lexically():
    events = [
        make_event(1, fecha="2024-01-10T09:00:00+02:00"),
        make_event(2, fecha="2024-01-10T08:30:00Z"),
    ]

    # 09:00+02:00 is 07:00 UTC, earlier than 08:30 UTC
    visible = compute_visible_events(events, FilterState())

    assert [e.id for e in visible] == [1, 2]


def test_equal_dates_keep_input_order_in_both_directions():
    events = [
        make_event(1, fecha="2024-05-01"),
        make_event(2, fecha="2024-05-01"),
        make_event(3, fecha="2024-04-01"),
        make_event(4, fecha="2024-05-01"),
    ]

    asc = compute_visible_events(events, FilterState())
    desc = compute_visible_events(events, FilterState(sort_direction=SortDirection.DESC))

    assert [e.id for e in asc] == [3, 1, 2, 4]
    assert [e.id for e in desc] == [1, 2, 4, 3]


def test_unparseable_dates_go_last():
    events = [
        make_event(1, fecha="no es una fecha"),
        make_event(2, fecha="2024-02-01"),
        make_event(3, fecha=None),
        make_event(4, fecha="2024-01-01"),
    ]

    asc = compute_visible_events(events, FilterState())
    desc = compute_visible_events(events, FilterState(sort_direction=SortDirection.DESC))

    assert [e.id for e in asc] == [4, 2, 1, 3]
    assert [e.id for e in desc] == [2, 4, 1, 3]


def test_input_collection_is_not_mutated(sample_events):
    before = list(sample_events)

    result = compute_visible_events(sample_events, FilterState(sort_direction=SortDirection.DESC))

    assert sample_events == before
    assert result is not sample_events


def test_parse_fecha_formats():
    utc = timezone.utc

    assert parse_fecha("2024-01-10") == datetime(2024, 1, 10, tzinfo=utc)
    assert parse_fecha("2024-01-10T12:30:00Z") == datetime(2024, 1, 10, 12, 30, tzinfo=utc)
    assert parse_fecha(date(2024, 1, 10)) == datetime(2024, 1, 10, tzinfo=utc)
    assert parse_fecha(datetime(2024, 1, 10, 5)) == datetime(2024, 1, 10, 5, tzinfo=utc)
    assert parse_fecha("") is None
    assert parse_fecha(None) is None
    assert parse_fecha("10/01/2024") is None
    assert parse_fecha(20240110) is None


def test_parse_fecha_local_keeps_offset():
    plus_two = timezone(timedelta(hours=2))

    local = parse_fecha_local("2024-01-10T00:30:00+02:00")

    assert local == datetime(2024, 1, 10, 0, 30, tzinfo=plus_two)
    assert local.utcoffset() == timedelta(hours=2)
    assert parse_fecha_local("2024-01-10") == datetime(2024, 1, 10)
    assert parse_fecha_local("mañana") is None
    # Comparison value is the same instant, moved to UTC
    assert parse_fecha("2024-01-10T00:30:00+02:00") == datetime(2024, 1, 9, 22, 30, tzinfo=timezone.utc)


def test_status_rule_follows_event_is_active():
    active = make_event(1, estado="activo")
    inactive = make_event(2, estado="inactivo")

    assert active.is_active and matches_filters(active, FilterState())
    assert not inactive.is_active and not matches_filters(inactive, FilterState())
