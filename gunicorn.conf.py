"""
Gunicorn configuration for the DevConnector API
Uvicorn workers; each worker opens its own MongoDB pool in the app lifespan
"""
import os

# Server socket
bind = f"0.0.0.0:{os.getenv('PORT', 5000)}"
backlog = 2048

# Worker processes
workers = int(os.getenv("GUNICORN_WORKERS", 2))
worker_class = "uvicorn.workers.UvicornWorker"
worker_connections = 100

# Worker lifecycle
max_requests = 1000
max_requests_jitter = 100

# Timeouts (the GitHub proxy call has its own 10s limit)
timeout = 30
keepalive = 5
graceful_timeout = 30

proc_name = "devconnector_api"
daemon = False

# Logging
accesslog = "-"
errorlog = "-"
loglevel = os.getenv("LOG_LEVEL", "info").lower()
access_log_format = '%(h)s %(t)s "%(r)s" %(s)s %(b)s %(D)s'


def when_ready(server):
    """Called just after the server is started."""
    server.log.info(f"DevConnector API listening on {bind} with {workers} workers")


def worker_abort(worker):
    """Called when a worker is aborted (usually a request timeout)."""
    worker.log.warning("Worker aborted, request exceeded timeout")
