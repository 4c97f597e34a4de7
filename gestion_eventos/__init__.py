"""Administración de eventos: listado, filtros y desactivación."""

__version__ = "1.0.0"
