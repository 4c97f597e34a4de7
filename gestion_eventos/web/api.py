"""HTTP client for the events REST API.

The client never touches UI state: every call returns an APIResult carrying
either the data or the error, and the caller decides what to do with it.
"""

import logging
from dataclasses import dataclass
from typing import Any, Generic, List, Optional, TypeVar

import requests

from ..config.api import EventsAPIConfig
from ..models.event import Event, EventStatus

logger = logging.getLogger(__name__)

T = TypeVar('T')

class EventsAPIError(Exception):
    """Base exception for events API errors."""
    pass

class LoadFailure(EventsAPIError):
    """Raised when the event collection could not be fetched."""
    pass

class UpdateFailure(EventsAPIError):
    """Raised when an event status update was rejected or failed."""
    pass

@dataclass
class APIResult(Generic[T]):
    """Outcome of an API call: either a value or an error."""
    value: Optional[T] = None
    error: Optional[EventsAPIError] = None
    
    @property
    def ok(self) -> bool:
        return self.error is None
    
    @classmethod
    def success(cls, value: T = None) -> 'APIResult[T]':
        return cls(value=value)
    
    @classmethod
    def failure(cls, error: EventsAPIError) -> 'APIResult[T]':
        return cls(error=error)

class EventAPIClient:
    """Client for reading and updating events through the API."""
    
    def __init__(self, base_url: str, timeout: float = 30, session: Optional[requests.Session] = None):
        self.base_url = base_url.rstrip('/')
        self.timeout = timeout
        self.session = session or requests.Session()
    
    @classmethod
    def from_config(cls, config: Optional[EventsAPIConfig] = None) -> 'EventAPIClient':
        config = config or EventsAPIConfig()
        config.validate()
        return cls(base_url=config.base_url, timeout=config.timeout)
    
    def get_events(self) -> APIResult[List[Event]]:
        """
        Fetch the event collection.
        
        Returns:
            APIResult[List[Event]]: The events in the order the API sent them,
            or a LoadFailure if the request or the response body failed
        """
        try:
            response = self.session.get(
                f"{self.base_url}/eventos",
                timeout=self.timeout
            )
            response.raise_for_status()
            
            events_data = response.json()
            if not isinstance(events_data, list):
                raise ValueError("API response must be a list of events")
            
            events = [self._convert_to_event(event) for event in events_data]
            logger.info(f"Fetched {len(events)} events from {self.base_url}")
            return APIResult.success(events)
            
        except (requests.RequestException, ValueError) as e:
            logger.error(f"Failed to fetch events from API: {e}")
            return APIResult.failure(LoadFailure(str(e)))
    
    def deactivate_event(self, event_id: Any) -> APIResult[None]:
        """
        Mark an event as inactive on the server.
        
        Args:
            event_id: Identifier of the event to deactivate
            
        Returns:
            APIResult[None]: Success, or an UpdateFailure
        """
        try:
            response = self.session.patch(
                f"{self.base_url}/eventos/{event_id}",
                json={'estado': EventStatus.INACTIVO.value},
                timeout=self.timeout
            )
            response.raise_for_status()
            return APIResult.success()
            
        except requests.RequestException as e:
            logger.error(f"Failed to deactivate event {event_id}: {e}")
            return APIResult.failure(UpdateFailure(str(e)))
    
    def _convert_to_event(self, data: Any) -> Event:
        """
        Convert API event data to an Event object.
        
        Raises:
            ValueError: If the item is not a JSON object
        """
        if not isinstance(data, dict):
            raise ValueError(f"Event entries must be objects, got {type(data).__name__}")
        return Event.from_dict(data)
