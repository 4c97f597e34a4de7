
"""
Command-line interface for the events admin.

Lists the active events with the same filters as the web admin and
deactivates (soft-deletes) events by id.

For usage information, run:
    gestion-eventos --help

Common use cases:
    # List active events, oldest first
    gestion-eventos list

    # Only "teatro" events whose name contains "noche", newest first
    gestion-eventos list --categoria teatro --nombre noche --orden desc

    # Deactivate event 7 (asks for confirmation)
    gestion-eventos deactivate 7

    # Deactivate without asking
    gestion-eventos deactivate 7 --yes
"""

import argparse
import logging
import sys
from typing import List, Optional

from .config import EventsAPIConfig
from .controller import EventListController
from .models.event import CATEGORIAS, SortDirection
from .notifications import Notification, Prompt
from .utils.logging_config import setup_logging
from .web.api import EventAPIClient

logger = logging.getLogger(__name__)

def print_notification(notification: Notification):
    stream = sys.stderr if notification.level == 'error' else sys.stdout
    print(f"{notification.title} {notification.text}", file=stream)

def ask_confirmation(prompt: Prompt) -> bool:
    """Blocking yes/no question on stdin."""
    print(prompt.title)
    print(prompt.text)
    answer = input(f"{prompt.confirm_label} [s/N]: ").strip().lower()
    return answer in ('s', 'si', 'sí', 'y', 'yes')

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description='Gestión de eventos')
    parser.add_argument('--api-url', help='Base URL of the events API (default: API_BASE_URL)')
    parser.add_argument('--timeout', type=float, help='Request timeout in seconds (default: API_TIMEOUT)')
    parser.add_argument('--debug', action='store_true', help='Enable debug logging')
    
    subparsers = parser.add_subparsers(dest='command', required=True)
    
    list_parser = subparsers.add_parser('list', help='List active events')
    list_parser.add_argument('--categoria', choices=CATEGORIAS, help='Only events in this category')
    list_parser.add_argument('--nombre', default='', help='Case-insensitive name search')
    list_parser.add_argument('--orden', choices=[d.value for d in SortDirection],
                             default=SortDirection.ASC.value, help='Date order')
    
    deactivate_parser = subparsers.add_parser('deactivate', help='Deactivate an event')
    deactivate_parser.add_argument('event_id', help='Id of the event to deactivate')
    deactivate_parser.add_argument('--yes', '-y', action='store_true', help='Skip the confirmation prompt')
    
    return parser

def build_controller(args: argparse.Namespace) -> EventListController:
    config = EventsAPIConfig(base_url=args.api_url or '', timeout=args.timeout or 0.0)
    client = EventAPIClient.from_config(config)
    return EventListController(client, notify=print_notification, confirm=ask_confirmation)

def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(logging.DEBUG if args.debug else logging.WARNING)
    
    try:
        controller = build_controller(args)
    except ValueError as e:
        logger.error(f"Invalid configuration: {e}")
        return 2
    
    if not controller.load_events():
        return 1
    
    if args.command == 'list':
        controller.set_category_filter(args.categoria)
        controller.set_name_query(args.nombre)
        controller.set_sort_direction(args.orden)
        events = controller.visible_events()
        for event in events:
            print(event.to_summary_string())
        print(f"{len(events)} eventos")
        return 0
    
    if args.command == 'deactivate':
        if controller.store.get(args.event_id) is None:
            logger.warning(f"Event {args.event_id} is not in the loaded list")
        confirm = (lambda prompt: True) if args.yes else None
        return 0 if controller.deactivate_event(args.event_id, confirm=confirm) else 1
    
    return 2

if __name__ == '__main__':
    sys.exit(main())
