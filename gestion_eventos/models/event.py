"""Event and filter models."""

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any, Dict, Optional

# Closed set offered in the category selector; an empty value means "Todas"
CATEGORIAS = ('charlas', 'teatro', 'deportes', 'culturales', 'festivales')

class EventStatus(str, Enum):
    ACTIVO = 'activo'
    INACTIVO = 'inactivo'

class SortDirection(str, Enum):
    ASC = 'asc'
    DESC = 'desc'

    def flipped(self) -> 'SortDirection':
        return SortDirection.DESC if self is SortDirection.ASC else SortDirection.ASC

@dataclass
class Event:
    """
    Event record as served by the events API.
    
    Fields:
        id: Unique identifier, never changed locally
        nombre: Event name, used for the name search
        categoria: One of CATEGORIAS, or empty
        fecha: Raw date value from the API (parsed only for ordering)
        descripcion: Display-only description
        imagen: Display-only image URL
        estado: 'activo' or 'inactivo'
        extra: Any other fields the API returned, kept untouched
    """
    id: Any
    nombre: Optional[str] = None
    categoria: Optional[str] = None
    fecha: Any = None
    descripcion: Optional[str] = None
    imagen: Optional[str] = None
    estado: Optional[str] = None
    extra: Dict[str, Any] = field(default_factory=dict)
    
    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Event':
        """Build an Event from an API object without validating its shape."""
        known = {'id', 'nombre', 'categoria', 'fecha', 'descripcion', 'imagen', 'estado'}
        return cls(
            id=data.get('id'),
            nombre=data.get('nombre'),
            categoria=data.get('categoria'),
            fecha=data.get('fecha'),
            descripcion=data.get('descripcion'),
            imagen=data.get('imagen'),
            estado=data.get('estado'),
            extra={k: v for k, v in data.items() if k not in known}
        )
    
    def to_dict(self) -> Dict[str, Any]:
        """Convert back to the API representation."""
        data = dict(self.extra)
        data.update({
            'id': self.id,
            'nombre': self.nombre,
            'categoria': self.categoria,
            'fecha': self.fecha,
            'descripcion': self.descripcion,
            'imagen': self.imagen,
            'estado': self.estado,
        })
        return data
    
    @property
    def is_active(self) -> bool:
        return self.estado == EventStatus.ACTIVO.value
    
    def with_estado(self, estado: EventStatus) -> 'Event':
        """Return a copy with only the status changed."""
        return replace(self, estado=estado.value)
    
    def to_summary_string(self) -> str:
        """One-line description used by the CLI."""
        return f"[{self.id}] {self.fecha or '-'} | {self.categoria or '-'} | {self.nombre or ''}"

@dataclass
class FilterState:
    """Transient filter and ordering criteria for the event list."""
    category_filter: str = ''
    name_query: str = ''
    sort_direction: SortDirection = SortDirection.ASC
