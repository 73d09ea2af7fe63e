import os

# Bind & workers: one request per sync worker, no shared state between them
bind = os.getenv("GUNICORN_BIND", "0.0.0.0:4000")
workers = int(os.getenv("GUNICORN_WORKERS", "2"))
threads = 1
# Above the 10 s database operation timeout so the app answers first
timeout = 30
graceful_timeout = 30
keepalive = 5

# Logs to stdout/stderr; app records are already JSON
accesslog = None
errorlog = "-"
loglevel = os.getenv("LOG_LEVEL", "info").lower()

forwarded_allow_ips = os.getenv("FORWARDED_ALLOW_IPS", "127.0.0.1")
proxy_protocol = False
