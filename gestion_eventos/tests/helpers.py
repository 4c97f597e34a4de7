from gestion_eventos.models.event import Event
from gestion_eventos.web.api import APIResult, LoadFailure, UpdateFailure


def make_event(id, nombre="Evento", categoria="charlas", fecha="2024-01-01", estado="activo", **extra):
    return Event(
        id=id,
        nombre=nombre,
        categoria=categoria,
        fecha=fecha,
        descripcion=extra.pop("descripcion", None),
        imagen=extra.pop("imagen", None),
        estado=estado,
        extra=extra,
    )


class FakeClient:
    """Stands in for EventAPIClient and records the calls it receives."""

    def __init__(self, events=None, load_error=False, update_error=False):
        self.events = list(events or [])
        self.load_error = load_error
        self.update_error = update_error
        self.get_calls = 0
        self.patched = []

    def get_events(self):
        self.get_calls += 1
        if self.load_error:
            return APIResult.failure(LoadFailure("connection refused"))
        return APIResult.success(list(self.events))

    def deactivate_event(self, event_id):
        self.patched.append(event_id)
        if self.update_error:
            return APIResult.failure(UpdateFailure("500 Server Error"))
        return APIResult.success()
