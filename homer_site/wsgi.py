"""
WSGI config for the Hello Homer project.
"""
import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "homer_site.settings")

application = get_wsgi_application()
