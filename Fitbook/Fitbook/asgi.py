"""
ASGI config for the Fitbook project
"""
import os

from django.core.asgi import get_asgi_application

os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'Fitbook.settings')

application = get_asgi_application()
