"""In-memory event collection owned by the list controller."""

import logging
from typing import Any, Iterable, List, Optional, Tuple

from .models.event import Event, EventStatus

logger = logging.getLogger(__name__)

def matching_positions(events: Iterable[Event], event_id: Any) -> List[int]:
    """
    Positions of the events whose id is event_id.
    
    Exact matches win. Only when there is none is an id of another type
    compared by its string form, so '7' from a URL finds the JSON id 7
    without also catching a distinct '7' next to a 7.
    """
    events = list(events)
    exact = [i for i, event in enumerate(events) if event.id == event_id]
    if exact:
        return exact
    return [
        i for i, event in enumerate(events)
        if type(event.id) is not type(event_id) and str(event.id) == str(event_id)
    ]

class EventStore:
    """
    Mutable holder of the loaded events.
    
    The store is the only place the collection changes; readers get an
    immutable snapshot and derive views from it.
    """
    
    def __init__(self, events: Optional[Iterable[Event]] = None):
        self._events: Tuple[Event, ...] = tuple(events or ())
    
    @property
    def events(self) -> Tuple[Event, ...]:
        return self._events
    
    def __len__(self) -> int:
        return len(self._events)
    
    def replace_all(self, events: Iterable[Event]):
        self._events = tuple(events)
    
    def get(self, event_id: Any) -> Optional[Event]:
        positions = matching_positions(self._events, event_id)
        return self._events[positions[0]] if positions else None
    
    def mark_inactive(self, event_id: Any) -> bool:
        """
        Set estado to 'inactivo' on the matching event, leaving other fields alone.
        
        Returns:
            bool: True if an event with that id was found
        """
        positions = set(matching_positions(self._events, event_id))
        if not positions:
            logger.warning(f"Event {event_id} not present in the loaded collection")
            return False
        
        self._events = tuple(
            event.with_estado(EventStatus.INACTIVO) if i in positions else event
            for i, event in enumerate(self._events)
        )
        return True
