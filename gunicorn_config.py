"""Gunicorn configuration for production (``gunicorn -c gunicorn_config.py appinit.wsgi:app``)."""
import multiprocessing
import os

# Server socket
port = os.getenv("PORT", "8000")
bind = f"0.0.0.0:{port}"
backlog = 2048

# Worker processes
workers_env = os.getenv("GUNICORN_WORKERS")
if workers_env:
    workers = int(workers_env)
else:
    workers = min(multiprocessing.cpu_count() * 2 + 1, 8)

worker_class = "sync"
timeout = 60
keepalive = 5
graceful_timeout = 30

# Logging (stdout, matching the application's LoggerFactory)
accesslog = "-"
errorlog = "-"
loglevel = os.getenv("LOG_LEVEL", "info").lower()
access_log_format = '%(h)s %(l)s %(u)s %(t)s "%(r)s" %(s)s %(b)s "%(f)s" "%(a)s" %(D)s'
capture_output = True

# Process naming
proc_name = os.getenv("APP_NAME", "appinit")

# Server mechanics
daemon = False
pidfile = None
