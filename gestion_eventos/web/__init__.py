from typing import Optional

from flask import Flask, flash, render_template
from .api import EventAPIClient
from .routes import events_bp
from ..config import Config
from ..notifications import Notification
from ..utils.logging_config import setup_logging
import logging
import threading

# Module logger
logger = logging.getLogger(__name__)

EXTENSION_KEY = 'gestion_eventos'

def flash_notification(notification: Notification):
    """Show a controller notification as a flashed message."""
    flash(f"{notification.title} {notification.text}", notification.level)

def create_app(config_class=Config, client: Optional[EventAPIClient] = None):
    """Create and configure the Flask application."""
    # Imported here: the controller itself depends on .api
    from ..controller import EventListController
    
    app = Flask(__name__)
    app.config.from_object(config_class)
    
    if not app.config.get('TESTING'):
        setup_logging(logging.DEBUG if app.config.get('DEBUG') else logging.INFO)
    
    if client is None:
        client = EventAPIClient(
            base_url=app.config['API_BASE_URL'],
            timeout=app.config['API_TIMEOUT']
        )
    
    # One display session per app instance; events load on the first request
    app.extensions[EXTENSION_KEY] = {
        'controller': EventListController(client, notify=flash_notification),
        'loaded': False,
        'lock': threading.Lock()
    }
    
    app.register_blueprint(events_bp)
    
    # Error handlers
    @app.errorhandler(404)
    def not_found_error(error):
        return render_template('errors/404.html'), 404
    
    @app.errorhandler(500)
    def internal_error(error):
        logger.error(f"Internal error: {error}")
        return render_template('errors/500.html'), 500
    
    return app
