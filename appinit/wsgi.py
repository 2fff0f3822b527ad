"""WSGI entry point (``gunicorn -c gunicorn_config.py appinit.wsgi:app``)."""
import atexit

from appinit import create_app, shutdown_app

app = create_app()
atexit.register(shutdown_app, app)
