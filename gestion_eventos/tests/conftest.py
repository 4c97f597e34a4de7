import pytest

from gestion_eventos.tests.helpers import FakeClient, make_event


@pytest.fixture()
def sample_events():
    return [
        make_event(1, nombre="Feria", categoria="festivales", fecha="2024-01-10"),
        make_event(2, nombre="Teatro X", categoria="teatro", fecha="2024-02-01", estado="inactivo"),
        make_event(3, nombre="Charla de Python", categoria="charlas", fecha="2024-03-05"),
        make_event(4, nombre="Maratón", categoria="deportes", fecha="2023-12-24"),
    ]


@pytest.fixture()
def fake_client(sample_events):
    return FakeClient(sample_events)


@pytest.fixture()
def notifications():
    return []
