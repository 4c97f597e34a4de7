from .event import (
    Event,
    EventStatus,
    CATEGORIAS,
    FilterState,
    SortDirection,
)

__all__ = ['Event', 'EventStatus', 'CATEGORIAS', 'FilterState', 'SortDirection']
