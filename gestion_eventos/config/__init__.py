"""Configuration for the events admin."""

# Environment must be loaded before the other config modules read os.environ
from .environment import IS_PRODUCTION_ENVIRONMENT
from .api import EventsAPIConfig
from .settings import Config

__all__ = [
    'IS_PRODUCTION_ENVIRONMENT',
    'EventsAPIConfig',
    'Config'
]
