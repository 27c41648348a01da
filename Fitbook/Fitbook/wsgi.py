"""
WSGI config for the Fitbook project
"""
import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'Fitbook.settings')

application = get_wsgi_application()
