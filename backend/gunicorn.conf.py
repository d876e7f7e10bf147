import os

# App
wsgi_app = "authservice:create_app()"

# Bind & workers (sync workers: one blocking request per worker)
bind = os.getenv("GUNICORN_BIND", "0.0.0.0:8000")
workers = int(os.getenv("GUNICORN_WORKERS", "2"))
worker_class = "sync"
threads = 1
timeout = 60
graceful_timeout = 30
keepalive = 5

# Logs to stdout/stderr; the app emits its own JSON lines
accesslog = "-"
errorlog = "-"
loglevel = os.getenv("LOG_LEVEL", "info").lower()

# Proxy headers are trusted here; ProxyFix handles them in the app
forwarded_allow_ips = "*"
proxy_protocol = False
