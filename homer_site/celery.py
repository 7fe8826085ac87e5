"""
Celery configuration for the Hello Homer project.
"""
import os

from celery import Celery

# Set the default Django settings module for Celery
os.environ.setdefault("DJANGO_SETTINGS_MODULE", "homer_site.settings")

app = Celery("homer_site")

# Use string names for task routing since Django settings aren't loaded yet
app.config_from_object("django.conf:settings", namespace="CELERY")

# Load tasks from all registered Django app configs
app.autodiscover_tasks()

# Configure periodic tasks
app.conf.beat_schedule = {
    "prefetch-quote": {
        "task": "hello_homer.tasks.prefetch_quote",
        "schedule": 60 * 30,  # Every 30 minutes
        "args": (),
    },
}
