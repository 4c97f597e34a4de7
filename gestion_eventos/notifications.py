"""User-facing prompts and notifications.

How they are shown is up to the caller (flashed messages in the web admin,
stdin/stdout in the CLI); the controller only deals with these values.
"""

import logging
from dataclasses import dataclass
from typing import Callable

logger = logging.getLogger(__name__)

@dataclass(frozen=True)
class Prompt:
    """A blocking confirm/cancel question."""
    title: str
    text: str
    confirm_label: str
    cancel_label: str
    icon: str = 'warning'

@dataclass(frozen=True)
class Notification:
    """A one-off message for the user. level is 'success' or 'error'."""
    title: str
    text: str
    level: str

DEACTIVATE_PROMPT = Prompt(
    title='¿Estás seguro?',
    text='Esta acción desactivará el evento.',
    confirm_label='Sí, desactivar',
    cancel_label='Cancelar'
)

LOAD_ERROR = Notification('Error', 'No se pudo cargar los eventos.', 'error')
DEACTIVATED = Notification('Desactivado!', 'El evento ha sido desactivado.', 'success')
DEACTIVATE_ERROR = Notification('Error', 'No se pudo desactivar el evento.', 'error')

Confirmer = Callable[[Prompt], bool]
Notifier = Callable[[Notification], None]

def log_notification(notification: Notification):
    """Default notifier: write the notification to the log."""
    level = logging.ERROR if notification.level == 'error' else logging.INFO
    logger.log(level, f"{notification.title}: {notification.text}")
