"""Derivation of the visible event list.

Everything here is a pure function of its arguments: the input collection is
never mutated and the same inputs always yield the same ordering.
"""

import logging
from datetime import date, datetime, timezone
from typing import Any, Iterable, List, Optional

from .models.event import Event, FilterState, SortDirection

logger = logging.getLogger(__name__)

def parse_fecha_local(value: Any) -> Optional[datetime]:
    """
    Parse an event date as written, keeping its own offset (or lack of one).
    
    Accepts datetime/date objects and ISO-8601 strings (date-only, full
    datetime, or with a trailing 'Z'). Use this for display; compare with
    parse_fecha.
    
    Returns:
        Optional[datetime]: The parsed value, or None if missing or unparseable
    """
    if value is None or value == '':
        return None
    
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day)
    if isinstance(value, str):
        try:
            return datetime.fromisoformat(value.strip().replace('Z', '+00:00'))
        except ValueError:
            logger.debug(f"Unparseable fecha: {value!r}")
            return None
    return None

def parse_fecha(value: Any) -> Optional[datetime]:
    """Parse an event date into an aware UTC datetime. Naive values are taken as UTC."""
    parsed = parse_fecha_local(value)
    if parsed is None:
        return None
    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=timezone.utc)
    return parsed.astimezone(timezone.utc)

def _nombre(event: Event) -> str:
    # Events without a name only match the empty query
    if event.nombre is None:
        return ''
    return str(event.nombre)

def matches_filters(event: Event, filter_state: FilterState) -> bool:
    """Check the category, name and status conditions for one event."""
    if filter_state.category_filter and event.categoria != filter_state.category_filter:
        return False
    
    query = (filter_state.name_query or '').lower()
    if query not in _nombre(event).lower():
        return False
    
    return event.is_active

def compute_visible_events(events: Iterable[Event], filter_state: FilterState) -> List[Event]:
    """
    Filter and order events for display.
    
    Events are kept only if they are active and match the category and name
    filters, then sorted chronologically by fecha. Equal dates keep their
    input order. Events whose fecha cannot be parsed go last, in input order,
    whatever the direction.
    
    Args:
        events: The loaded event collection
        filter_state: Current filter criteria
        
    Returns:
        List[Event]: A new list with the visible events
    """
    dated = []
    undated = []
    for event in events:
        if not matches_filters(event, filter_state):
            continue
        fecha = parse_fecha(event.fecha)
        if fecha is None:
            undated.append(event)
        else:
            dated.append((fecha, event))
    
    # sorted() is stable, also with reverse=True
    dated = sorted(
        dated,
        key=lambda pair: pair[0],
        reverse=filter_state.sort_direction == SortDirection.DESC
    )
    return [event for _, event in dated] + undated
