"""
Gunicorn configuration for the lead capture API.

Usage:
    gunicorn core.wsgi:application -c deployment/gunicorn/gunicorn_config.py
"""
import multiprocessing
import os

bind = os.getenv('GUNICORN_BIND', f"0.0.0.0:{os.getenv('PORT', '8000')}")
workers = int(os.getenv('GUNICORN_WORKERS', multiprocessing.cpu_count() * 2 + 1))
# Threaded workers; the stats endpoint fans out its reads across a thread pool as well
worker_class = "gthread"
threads = int(os.getenv('GUNICORN_THREADS', 2))
worker_tmp_dir = "/dev/shm"
max_requests = 1000
max_requests_jitter = 100
timeout = 30
keepalive = 5

# Logging (stdout/stderr so the platform collects it)
accesslog = "-"
errorlog = "-"
loglevel = os.getenv('GUNICORN_LOG_LEVEL', 'info')
access_log_format = '%(h)s "%(r)s" %(s)s %(b)s "%(a)s" %(D)s'

proc_name = "leads-backend"


def when_ready(server):
    server.log.info("Lead capture API ready. Spawning workers")


def worker_abort(worker):
    worker.log.warning("Worker timed out and received SIGABRT")
