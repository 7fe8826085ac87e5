"""
Django app configuration for the hello_homer module.

The app shows a random Simpsons quote in the admin footer and caches it for a
configurable duration.

Version: 1.0
"""
from django.apps import AppConfig


class HelloHomerConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "hello_homer"
    verbose_name = "Hello Homer"
