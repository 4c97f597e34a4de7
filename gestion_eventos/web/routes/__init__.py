from .events import events_bp

__all__ = ['events_bp']
