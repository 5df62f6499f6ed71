"""Gunicorn settings for running the gateway behind UvicornWorker.

Usage:
    gunicorn halalnest.main:app -c gunicorn_conf.py
"""

import os

bind = f"0.0.0.0:{os.getenv('PORT', '3000')}"

workers = int(os.getenv("WEB_CONCURRENCY", "2"))
worker_class = "uvicorn.workers.UvicornWorker"

# Scholar answers can take a while; upstream calls have no timeout of their own
timeout = int(os.getenv("GUNICORN_TIMEOUT", "120"))
graceful_timeout = 30

accesslog = "-"
errorlog = "-"
loglevel = os.getenv("LOG_LEVEL", "info").lower()
proc_name = "halalnest"
