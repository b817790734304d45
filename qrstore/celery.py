"""Celery configuration for qrstore project."""

import os
from celery import Celery
from celery.schedules import crontab

# Set default Django settings module
os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'qrstore.settings')

# Create Celery app
app = Celery('qrstore')

# Load config from Django settings with CELERY_ prefix
app.config_from_object('django.conf:settings', namespace='CELERY')

# Auto-discover tasks in all registered Django apps
app.autodiscover_tasks()

# Periodic tasks (Celery Beat)
app.conf.beat_schedule = {
    'refresh-product-handles-daily': {
        'task': 'apps.qrcodes.tasks.refresh_all_shops',
        'schedule': crontab(minute=0, hour=3),
    },
}
