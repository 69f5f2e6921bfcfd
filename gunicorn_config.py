"""Gunicorn configuration for production."""
import os
import sys

# Server socket
# Use PORT environment variable if available (for Railway, Heroku, etc.), otherwise default to 3000
port = os.getenv("PORT", "3000")
bind = f"0.0.0.0:{port}"
backlog = 2048

# Worker processes
# The message history lives in process memory, so a single worker process
# serves every request; concurrency comes from its threads.
workers = 1
worker_class = "gthread"
threads = int(os.getenv("GUNICORN_THREADS", "8"))
# Longer than the outbound WhatsApp API timeout
timeout = 30
keepalive = 5
graceful_timeout = 30

# Logging
accesslog = "-"  # stdout
errorlog = "-"  # stdout so Railway doesn't mark normal logs as errors
loglevel = "info"
access_log_format = '%(h)s %(l)s %(u)s %(t)s "%(r)s" %(s)s %(b)s "%(f)s" "%(a)s" %(D)s'

capture_output = True
enable_stdio_inheritance = True

sys.stderr = sys.stdout

# Process naming
proc_name = "whatsapp-webhook-relay"

# Server mechanics
daemon = False
pidfile = None
umask = 0
user = None
group = None
tmp_upload_dir = None
