"""WSGI config for qrstore project."""

import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'qrstore.settings')

application = get_wsgi_application()
