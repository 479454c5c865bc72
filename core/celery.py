"""
Celery configuration for the lead capture backend.

Background work kept off the request path:
- Contact form notification emails
"""
import os
from celery import Celery

# Set the default Django settings module
os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'core.settings')

# Create Celery app
app = Celery('core')

# Load config from Django settings with CELERY_ prefix
app.config_from_object('django.conf:settings', namespace='CELERY')

# Auto-discover tasks in all installed apps
app.autodiscover_tasks()

# Celery configuration
app.conf.update(
    # Task result expiry
    result_expires=3600,  # 1 hour

    # Task time limits
    task_time_limit=120,
    task_soft_time_limit=90,

    # Retry policy
    task_acks_late=True,
    task_reject_on_worker_lost=True,

    # Prefetch multiplier (1 = fair distribution)
    worker_prefetch_multiplier=1,

    # Serialization
    task_serializer='json',
    result_serializer='json',
    accept_content=['json'],

    # Timezone
    timezone='Asia/Kolkata',
    enable_utc=True,
)
