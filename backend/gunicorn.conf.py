import os

# Bind & workers
bind = os.getenv("GUNICORN_BIND", "0.0.0.0:8000")
# The user store lives in process memory: a single worker keeps one
# consistent record set; scale with threads instead.
workers = 1
threads = int(os.getenv("GUNICORN_THREADS", "4"))
timeout = 60
graceful_timeout = 30
keepalive = 5

# Logs to stdout/stderr (collected by Docker)
accesslog = "-"
errorlog = "-"
loglevel = os.getenv("LOG_LEVEL", "info").lower()

# Trust proxy headers
forwarded_allow_ips = "*"
proxy_protocol = False
wsgi_app = "wsgi:app"
