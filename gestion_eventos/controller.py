"""Event list controller: loading, filtering state and soft deletion."""

import asyncio
import logging
from typing import Any, Callable, List, Optional

from .filtering import compute_visible_events
from .models.event import Event, FilterState, SortDirection
from .notifications import (
    DEACTIVATE_ERROR,
    DEACTIVATE_PROMPT,
    DEACTIVATED,
    LOAD_ERROR,
    Confirmer,
    Notifier,
    log_notification,
)
from .store import EventStore
from .web.api import APIResult, EventAPIClient

logger = logging.getLogger(__name__)

Listener = Callable[[List[Event]], None]

class EventListController:
    """
    Owns the loaded events and the filter state of one display session.
    
    The controller is responsible for:
    1. Loading the collection once from the API
    2. Keeping the filter/sort criteria and deriving the visible list
    3. Deactivating events (soft delete) after user confirmation
    
    Listeners registered with subscribe() receive the recomputed visible list
    after every state change.
    """
    
    def __init__(
        self,
        client: EventAPIClient,
        notify: Notifier = log_notification,
        confirm: Optional[Confirmer] = None,
        store: Optional[EventStore] = None,
        filter_state: Optional[FilterState] = None
    ):
        self.client = client
        self.notify = notify
        self.confirm = confirm
        self.store = store if store is not None else EventStore()
        self.filter_state = filter_state if filter_state is not None else FilterState()
        self._listeners: List[Listener] = []
    
    @property
    def events(self):
        return self.store.events
    
    def subscribe(self, listener: Listener):
        self._listeners.append(listener)
    
    def _changed(self):
        if not self._listeners:
            return
        visible = self.visible_events()
        for listener in self._listeners:
            listener(visible)
    
    # Loading
    
    def load_events(self) -> bool:
        """
        Fetch the collection and replace the local copy.
        
        Returns:
            bool: True on success. On failure the collection is left empty and
            the user is notified.
        """
        return self._apply_load(self.client.get_events())
    
    async def load_events_async(self) -> bool:
        """Same as load_events, without blocking the running event loop."""
        result = await asyncio.to_thread(self.client.get_events)
        return self._apply_load(result)
    
    def _apply_load(self, result: APIResult[List[Event]]) -> bool:
        if not result.ok:
            self.store.replace_all([])
            self.notify(LOAD_ERROR)
            self._changed()
            return False
        
        self.store.replace_all(result.value)
        logger.info(f"Loaded {len(self.store)} events")
        self._changed()
        return True
    
    # Filters
    
    def visible_events(self) -> List[Event]:
        return compute_visible_events(self.store.events, self.filter_state)
    
    def set_category_filter(self, value: Optional[str]):
        self.filter_state.category_filter = value or ''
        self._changed()
    
    def set_name_query(self, value: Optional[str]):
        self.filter_state.name_query = value or ''
        self._changed()
    
    def set_sort_direction(self, value):
        """Set the direction explicitly. Raises ValueError for unknown values."""
        self.filter_state.sort_direction = SortDirection(value)
        self._changed()
    
    def toggle_sort_direction(self) -> SortDirection:
        self.filter_state.sort_direction = self.filter_state.sort_direction.flipped()
        self._changed()
        return self.filter_state.sort_direction
    
    # Soft deletion
    
    def _confirmed(self, event_id: Any, confirm: Optional[Confirmer]) -> bool:
        confirm = confirm or self.confirm
        if confirm is None:
            raise ValueError("No confirmation handler available to deactivate events")
        if not confirm(DEACTIVATE_PROMPT):
            logger.debug(f"Deactivation of event {event_id} cancelled")
            return False
        return True
    
    def deactivate_event(self, event_id: Any, confirm: Optional[Confirmer] = None) -> bool:
        """
        Ask for confirmation, then set the event's estado to 'inactivo'.
        
        The local copy is only changed once the API has accepted the update.
        
        Args:
            event_id: Identifier of an event in the loaded collection
            confirm: Confirmation handler for this call, overriding the default
            
        Returns:
            bool: True if the event was deactivated
        """
        if not self._confirmed(event_id, confirm):
            return False
        return self._apply_deactivation(event_id, self.client.deactivate_event(event_id))
    
    async def deactivate_event_async(self, event_id: Any, confirm: Optional[Confirmer] = None) -> bool:
        """Same as deactivate_event, without blocking the running event loop."""
        if not self._confirmed(event_id, confirm):
            return False
        result = await asyncio.to_thread(self.client.deactivate_event, event_id)
        return self._apply_deactivation(event_id, result)
    
    def _apply_deactivation(self, event_id: Any, result: APIResult[None]) -> bool:
        if not result.ok:
            self.notify(DEACTIVATE_ERROR)
            return False
        
        self.store.mark_inactive(event_id)
        logger.info(f"Event {event_id} deactivated")
        self.notify(DEACTIVATED)
        self._changed()
        return True
