import os
import sys

from gestion_eventos.config.environment import IS_PRODUCTION_ENVIRONMENT
from gestion_eventos.web import create_app

app = create_app()

if __name__ == '__main__':
    """
    Development vs Production Configuration:
    
    Development (ENVIRONMENT=development, or unset):
        - Flask's built-in server with debug mode and auto-reload
        - Uses localhost
        Example: ENVIRONMENT=development python run.py
    
    Production (ENVIRONMENT=production):
        - Gunicorn WSGI server with a single worker, since the loaded
          events and filters live in process memory
        Example: ENVIRONMENT=production python run.py
    """
    port = int(os.environ.get('PORT', 5001))
    
    if not IS_PRODUCTION_ENVIRONMENT:
        app.run(
            host='localhost',
            port=port,
            debug=True
        )
    else:
        try:
            from gunicorn.app.base import BaseApplication

            class GunicornApp(BaseApplication):
                def __init__(self, app, options=None):
                    self.options = options or {}
                    self.application = app
                    super().__init__()

                def load_config(self):
                    for key, value in self.options.items():
                        self.cfg.set(key.lower(), value)

                def load(self):
                    return self.application

            options = {
                'bind': f'0.0.0.0:{port}',
                'workers': 1,
                'worker_class': 'sync',
                'timeout': 120
            }
            
            GunicornApp(app, options).run()
        except ImportError:
            print("Error: Gunicorn is required for production mode.")
            print("Please install it with: pip install gunicorn")
            sys.exit(1)
