"""Events API configuration."""

import os
from typing import Dict, Any
from dataclasses import dataclass

DEFAULT_API_BASE_URL = 'http://localhost:3000'
DEFAULT_API_TIMEOUT = 30.0

@dataclass
class EventsAPIConfig:
    """Connection settings for the events REST API."""
    
    base_url: str = ""
    timeout: float = 0.0
    
    def __post_init__(self):
        """Fill unset values from the environment."""
        if not self.base_url:
            self.base_url = os.environ.get('API_BASE_URL', DEFAULT_API_BASE_URL)
        if not self.timeout:
            self.timeout = float(os.environ.get('API_TIMEOUT', DEFAULT_API_TIMEOUT))
    
    def to_dict(self) -> Dict[str, Any]:
        return {
            'base_url': self.base_url,
            'timeout': self.timeout
        }
    
    def validate(self) -> bool:
        """Validate the configuration."""
        if not self.base_url:
            raise ValueError("API_BASE_URL must not be empty")
        if self.timeout <= 0:
            raise ValueError("API_TIMEOUT must be a positive number of seconds")
        return True
